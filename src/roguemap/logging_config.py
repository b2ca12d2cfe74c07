import logging
import os
import sys


def configure_logging(default_level: int = logging.WARNING) -> None:
    """Configure the root logger with the project's format.

    Respects ROGUEMAP_LOG_LEVEL env var if present. Logs go to stderr so the
    headless console keeps stdout for the map.
    """
    level_name = os.getenv("ROGUEMAP_LOG_LEVEL")
    level = default_level
    if level_name:
        level = getattr(logging, level_name.upper(), default_level)

    handler = logging.StreamHandler(stream=sys.stderr)
    handler.setFormatter(logging.Formatter(fmt="[%(asctime)s] [%(levelname)s] %(name)s: %(message)s"))

    root = logging.getLogger()
    root.setLevel(level)
    # Remove existing handlers to avoid duplicates in repeated test runs
    for h in list(root.handlers):
        root.removeHandler(h)
    root.addHandler(handler)
