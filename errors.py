# errors.py


class RecsumError(Exception):
    """Base class for errors raised by recsum."""


class ConfigurationError(RecsumError, ValueError):
    """Invalid settings detected before any work starts."""


class TraversalError(RecsumError, OSError):
    """The root path of a walk could not be accessed."""

    def __init__(self, path, reason):
        super().__init__(f"cannot walk '{path}': {reason}")
        self.path = path
        self.reason = reason
