import logging
from typing import Any

from .sources import ErrorObject, ErrorSource, to_error_source
from .utils import InvalidArgumentException

logger = logging.getLogger(__name__)

DEFAULT_ERROR_STATUS = 500


class ApiProblem:
    """Object describing an API problem payload.

    An ApiProblem pairs an HTTP status code with a human readable description
    of what went wrong. The description is either a literal string or a raised
    exception. When an exception is given, both the status and the errors text
    are derived from it each time they are read.

    Only two properties are exposed, ``status`` and ``errors``. They can be
    read as attributes, with ``get()`` or by subscription, in any letter case.
    Asking for any other name raises InvalidArgumentException.

    Example:
        # Literal detail
        problem = ApiProblem(400, "Bad input")
        problem.to_dict()  # {"status": 400, "errors": "Bad input"}

        # Detail derived from an exception
        try:
            raise ProblemException(" Not found ", status_code=404)
        except ProblemException as exc:
            problem = ApiProblem(400, exc)

        problem.get("STATUS")  # 404
        problem["errors"]      # "Not found"

        # Collect the cause chain as well
        problem = ApiProblem(500, exc).set_detail_includes_stack_trace(True)

    Attributes:
        status: The resolved HTTP status code.
        errors: The resolved error description.
    """

    __slots__ = ("_status", "_source", "_include_stack_trace")

    def __init__(self, status: int | None, errors: str | BaseException | ErrorSource):
        """Initialize an ApiProblem.

        Nothing is validated or resolved here; resolution happens on read.

        Args:
            status: HTTP status code used when ``errors`` is a literal.
            errors: A literal description, an exception, or a prebuilt source.
        """
        self._status = status
        self._source = to_error_source(errors)
        self._include_stack_trace = False

    def set_detail_includes_stack_trace(self, flag: bool) -> "ApiProblem":
        """Set whether resolving the errors of an exception walks its cause chain.

        Args:
            flag: True to collect previous errors and their stack traces.

        Returns:
            ApiProblem: This instance, to allow chaining.
        """
        self._include_stack_trace = bool(flag)
        return self

    def get(self, name: str) -> Any:
        """Read a property by name.

        Args:
            name: ``status`` or ``errors``, in any letter case.

        Returns:
            The resolved value of the property.

        Raises:
            InvalidArgumentException: If the name is not an exposed property.
        """
        resolvers = {
            "status": self._resolve_status,
            "errors": self._resolve_errors,
        }
        resolver = resolvers.get(name.lower())
        if resolver is None:
            raise InvalidArgumentException(name)
        return resolver()

    __getitem__ = get

    def __getattr__(self, name: str) -> Any:
        # Only reached for names not found on the instance or its class.
        return self.get(name)

    @property
    def status(self) -> int | None:
        return self._resolve_status()

    @property
    def errors(self) -> str:
        return self._resolve_errors()

    def to_dict(self) -> dict[str, Any]:
        """Return the status and errors as a dictionary, in that order."""
        return {
            "status": self._resolve_status(),
            "errors": self._resolve_errors(),
        }

    def _resolve_status(self) -> int | None:
        if isinstance(self._source, ErrorObject):
            return self._source.code or DEFAULT_ERROR_STATUS
        return self._status

    def _resolve_errors(self) -> str:
        if not isinstance(self._source, ErrorObject):
            return self._source.value

        message = self._source.message.strip()
        if not self._include_stack_trace:
            return message

        # Previous errors are collected but not yet part of the payload.
        previous = self._source.previous()
        logger.debug("Collected %d previous error(s) for API problem", len(previous))
        return message

    def __repr__(self):
        return f"<ApiProblem status={self._resolve_status()!r} errors={self._resolve_errors()!r}>"
