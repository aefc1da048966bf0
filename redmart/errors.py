# errors.py


class RedmartError(Exception):
    """Base class for everything this package raises on purpose."""


class UsageError(RedmartError):
    pass


class MalformedInput(RedmartError, ValueError):
    """Token parse failure, bad dimensions or out-of-range elevation."""


class EmptyGrid(RedmartError, ValueError):
    pass


class InternalInvariant(RedmartError, RuntimeError):
    """A solver invariant broke. This is a bug, never a user error."""
