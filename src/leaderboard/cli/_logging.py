import logging
import sys

_PACKAGE_LOGGER = "leaderboard"


def configure_logging(*, verbose: bool = False) -> None:
    """Log leaderboard records to stderr; other libraries only surface warnings.

    ``verbose`` lowers the leaderboard loggers to DEBUG, which traces every
    award granted or skipped.
    """
    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(logging.WARNING)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
    root.addHandler(handler)

    logging.getLogger(_PACKAGE_LOGGER).setLevel(logging.DEBUG if verbose else logging.INFO)
