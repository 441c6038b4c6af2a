"""
Run the Mini Unit Graph API server.
"""
import uvicorn

from unit_graph.config import Config
from unit_graph.logging_utils import configure_logging, run_with_error_handling


def main():
    """Start uvicorn with the configured host and port."""
    config = Config.default()
    configure_logging(config.log_level)
    uvicorn.run("unit_graph.api.main:app", host=config.api_host, port=config.api_port)


if __name__ == "__main__":
    run_with_error_handling(main)
