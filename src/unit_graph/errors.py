"""
Error hierarchy for unit graph construction and conversion.
"""
from typing import Any, Iterable, List, Mapping, Optional


class UnitGraphError(Exception):
    """Base exception for unit graph failures."""

    def __init__(
        self,
        message: str,
        *,
        user_message: Optional[str] = None,
        context: Optional[Mapping[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.user_message = message if user_message is None else user_message
        self.context = dict(context) if context else {}

    def log_message(self) -> str:
        if not self.context:
            return str(self)
        return f"{self}: {self.context}"


class ConfigError(UnitGraphError):
    """Configuration loading or validation error."""


class LoaderError(ConfigError):
    """A conversion table or graphs folder could not be read."""


class InvalidRecord(UnitGraphError):
    """A conversion record is malformed."""


class InvalidFactor(InvalidRecord):
    """A conversion factor is zero, non-numeric or non-finite."""


class InvalidValue(UnitGraphError):
    """The value to convert is not a real number."""


class DisconnectedGraph(UnitGraphError):
    """A property's unit graph is not weakly connected."""


class UnitNotFound(UnitGraphError):
    """A unit does not exist in the targeted graph."""


class PropertyNotFound(UnitGraphError):
    """A property is not registered."""


class NoPathFound(UnitGraphError):
    """No path connects two units of the same graph."""


class UnitsNotRelated(UnitGraphError):
    """No registered property contains both units."""


class AmbiguousProperty(UnitGraphError):
    """More than one property contains both units."""

    def __init__(self, message: str, candidates: Iterable[str], **kwargs: Any) -> None:
        super().__init__(message, **kwargs)
        self.candidates: List[str] = sorted(candidates)


__all__ = [
    "UnitGraphError",
    "ConfigError",
    "LoaderError",
    "InvalidRecord",
    "InvalidFactor",
    "InvalidValue",
    "DisconnectedGraph",
    "UnitNotFound",
    "PropertyNotFound",
    "NoPathFound",
    "UnitsNotRelated",
    "AmbiguousProperty",
]
