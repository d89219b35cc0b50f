import logging
import sys

DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def setup_logging(verbose: bool = False, fmt: str = DEFAULT_FORMAT) -> None:
    """Configure the root logger to write to stderr. Call once per entry point."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(level=level, format=fmt, handlers=[logging.StreamHandler(sys.stderr)])
