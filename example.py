"""
Example usage of Mini Unit Graph.
"""
from unit_graph import AmbiguousProperty, Config, UnitConverter
from unit_graph.logging_utils import configure_logging, run_with_error_handling

# A property built from two known factors; m -> in is derived through ft
records = {
    "length": [
        ("m", "meter", "ft", "foot", 3.28084),
        ("ft", "foot", "in", "inch", 12),
    ],
}


def main():
    """Run example."""
    config = Config.default()
    configure_logging(config.log_level)

    # In-memory tables
    converter = UnitConverter.from_records(records)
    for unit_from, unit_to in [("m", "ft"), ("m", "in"), ("in", "m")]:
        result = converter.convert(1, unit_from, unit_to)
        print(f"1 {unit_from} = {result.value:.6g} {unit_to} via {' -> '.join(result.path)}")

    # Bundled tables
    converter = UnitConverter.from_config(config)
    print(f"\nProperties: {', '.join(converter.get_properties())}")

    result = converter.convert(14.7, "psi", "atm")
    print(f"14.7 psi = {result.value:.4f} atm ({result.property}, path {result.path})")

    try:
        converter.convert(1, "ton", "kip")
    except AmbiguousProperty as exc:
        print(f"Ambiguous: {exc.user_message}")
        for candidate in exc.candidates:
            result = converter.convert(1, "ton", "kip", candidate)
            print(f"  {candidate}: 1 ton = {result.value:g} kip")

    print("\nOptimizing...")
    converter.optimize()
    result = converter.get_multiplier("mi", "um")
    print(f"mi -> um multiplier {result.multiplier:.6g}, path {result.path}")


if __name__ == "__main__":
    run_with_error_handling(main)
