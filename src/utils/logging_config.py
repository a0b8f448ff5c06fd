"""Simple logging setup - all logs go to stderr so stdout stays clean."""

import logging
import sys


def setup_logging(verbose: bool = False):
    """Setup logging to stderr. Use INFO for verbose runs, WARNING otherwise."""
    level = logging.INFO if verbose else logging.WARNING
    logging.basicConfig(level=level, format="%(message)s", stream=sys.stderr, force=True)
