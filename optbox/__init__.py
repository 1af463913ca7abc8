"""optbox - an optional value container with side-effect-aware combinators."""

from loguru import logger

from optbox.box import Absent, BoxSequence, OptionalBox, Present, wrap
from optbox.exceptions import MissingCallableError, OptionalBoxError
from optbox.logging_config import configure_logging, reset_logging

# Library code stays silent until the application opts in.
logger.disable("optbox")

__version__ = "0.1.0"

__all__ = [
    'OptionalBox',
    'Present',
    'Absent',
    'BoxSequence',
    'wrap',
    'OptionalBoxError',
    'MissingCallableError',
    'configure_logging',
    'reset_logging',
]
