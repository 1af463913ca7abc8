"""optbox exception classes."""


class OptionalBoxError(Exception):
    """Base exception for optbox errors."""
    pass


class MissingCallableError(OptionalBoxError, TypeError):
    """A required callable was not supplied, or a callback is not callable."""

    def __init__(self, operation: str, argument: str):
        self.operation = operation
        self.argument = argument
        super().__init__(f"{operation}() requires a callable '{argument}'")
