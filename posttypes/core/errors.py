from __future__ import annotations


class PostTypesError(Exception):
    """Base class for every error raised by posttypes."""


class InvalidArgumentError(PostTypesError, TypeError):
    pass


class MissingFieldError(PostTypesError, KeyError):
    def __str__(self) -> str:
        # KeyError quotes its argument; keep the plain message
        return str(self.args[0]) if self.args else ""


class DefinitionsError(PostTypesError, ValueError):
    """Raised when an entity definitions file is malformed."""


class IllegalTransitionError(PostTypesError, ValueError):
    pass
