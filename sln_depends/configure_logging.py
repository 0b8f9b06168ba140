"""Logging setup for the command-line entry point."""

import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"

_installed_handlers: list[logging.Handler] = []


def configure_logging(*, verbose: bool = False, log_file: str | None = None) -> None:
    """Send warnings (or info when verbose) to stderr and everything to ``log_file``.

    Calling it again replaces the handlers installed by the previous call.
    """
    root = logging.getLogger()
    root.setLevel(logging.DEBUG)
    while _installed_handlers:
        handler = _installed_handlers.pop()
        root.removeHandler(handler)
        handler.close()

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(logging.INFO if verbose else logging.WARNING)
    console.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
    _installed_handlers.append(console)

    if log_file:
        # Replaced on every run
        file_handler = logging.FileHandler(log_file, mode="w", encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        _installed_handlers.append(file_handler)

    for handler in _installed_handlers:
        root.addHandler(handler)
