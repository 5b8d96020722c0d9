"""
Exception classes for namedcollections.

Every error raised by this package derives from :class:`NamedCollectionError`
and from the builtin exception a caller would naturally expect, so both
``except NamedCollectionError`` and ``except KeyError`` (etc.) work.
"""

from __future__ import annotations


class NamedCollectionError(Exception):
    """
    Base exception class for all namedcollections errors.
    """


class InvalidArgumentError(NamedCollectionError, TypeError):
    """
    Raised when a required construction argument is missing or unusable.

    Attributes:
        argument: Name of the offending parameter.
    """

    def __init__(self, argument: str, message: str | None = None) -> None:
        self.argument = argument
        super().__init__(message or f"Argument '{argument}' must not be None.")


class DuplicateKeyError(NamedCollectionError, ValueError):
    """
    Raised in strict mode when two values resolve to the same name.

    This happens when:
    - more than one value resolves to the default slot
    - more than one value resolves to the same non-default name

    Attributes:
        name: The duplicated name, or ``None`` for the default slot.
    """

    def __init__(self, message: str, name: str | None = None) -> None:
        self.name = name
        super().__init__(message)


class NameNotFoundError(NamedCollectionError, KeyError):
    """
    Raised by indexed access when no value exists for the requested name.
    """

    def __init__(self, message: str, name: str | None = None) -> None:
        self.name = name
        super().__init__(message)

    def __str__(self) -> str:
        # KeyError quotes its argument; show the plain message instead
        return str(self.args[0])
