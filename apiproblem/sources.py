"""Error sources an ApiProblem can be built from.

An ApiProblem holds exactly one source. It is either a ``LiteralSource``
wrapping a ready-made detail string, or an ``ErrorObject`` describing a raised
error: its message, numeric code, optional cause and stack frames.
"""

from __future__ import annotations

import traceback
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class LiteralSource:
    """A detail given directly by the caller."""

    value: str


@dataclass(frozen=True, slots=True)
class PreviousError:
    """One link of an error's cause chain."""

    code: int
    message: str
    trace: tuple = ()


@dataclass(frozen=True, slots=True, eq=False)
class ErrorObject:
    """A raised error reduced to the parts an API problem cares about.

    Example:
        try:
            load_order(42)
        except LookupError as exc:
            source = ErrorObject.from_exception(exc)

        source.message   # str(exc)
        source.previous()  # (PreviousError(...), ...) for each chained cause

    Attributes:
        message: Human readable message of the error.
        code: Numeric code; zero or None means "no code".
        cause: The error that led to this one, if any.
        frames: Stack frames captured where the error was raised.
    """

    message: str
    code: int | None = None
    cause: ErrorObject | None = None
    frames: tuple = ()

    @classmethod
    def from_exception(cls, exc: BaseException) -> ErrorObject:
        """Build an error object from a Python exception and its chain.

        The code is taken from ``status_code`` or, failing that, ``code``. The
        cause follows ``__cause__`` and then ``__context__`` unless the context
        was suppressed with ``raise ... from None``.

        Args:
            exc: The exception to convert.

        Returns:
            ErrorObject: The converted error, with its causes converted too.
        """
        chain = []
        seen = set()
        current = exc
        while current is not None and id(current) not in seen:
            seen.add(id(current))
            chain.append(current)
            current = _exception_cause(current)

        error = None
        for item in reversed(chain):
            error = cls(
                message=_exception_message(item),
                code=_exception_code(item),
                cause=error,
                frames=tuple(traceback.extract_tb(item.__traceback__)),
            )
        return error

    def previous(self) -> tuple[PreviousError, ...]:
        """Collect the cause chain below this error, nearest cause first."""
        previous = []
        error = self.cause
        while error is not None:
            previous.append(
                PreviousError(
                    code=int(error.code or 0),
                    message=error.message.strip(),
                    trace=error.frames,
                )
            )
            error = error.cause
        return tuple(previous)


ErrorSource = LiteralSource | ErrorObject


def to_error_source(errors: Any) -> ErrorSource:
    """Classify a constructor argument as one of the two error sources.

    Args:
        errors: A prebuilt source, an exception, or a literal detail.

    Returns:
        ErrorSource: The matching source. Anything that is not an exception is
        kept unchanged as a literal.
    """
    if isinstance(errors, (LiteralSource, ErrorObject)):
        return errors
    if isinstance(errors, BaseException):
        return ErrorObject.from_exception(errors)
    return LiteralSource(errors)


def _exception_cause(exc: BaseException) -> BaseException | None:
    if exc.__cause__ is not None:
        return exc.__cause__
    if exc.__suppress_context__:
        return None
    return exc.__context__


def _exception_message(exc: BaseException) -> str:
    # KeyError.__str__ returns the repr of its key.
    if isinstance(exc, KeyError) and len(exc.args) == 1:
        return str(exc.args[0])
    return str(exc)


def _exception_code(exc: BaseException) -> int:
    code = getattr(exc, "status_code", None)
    if code is None:
        code = getattr(exc, "code", None)
    if code is None:
        return 0
    try:
        return int(code)
    except (TypeError, ValueError):
        return 0
