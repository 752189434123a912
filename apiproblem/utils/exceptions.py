from typing import Any


class InvalidArgumentException(ValueError, AttributeError):
    """Raised when an API problem is asked for a property it does not expose.

    Only ``status`` and ``errors`` can be read from an ApiProblem. Any other
    name raises this exception. It is also an AttributeError so that
    ``getattr(problem, name, default)`` and ``hasattr()`` keep working.

    Attributes:
        name: The property name that was requested.
    """

    def __init__(self, name: str):
        super().__init__(f'Invalid property name "{name}"')
        self.name = name


class ProblemException(Exception):
    """Exception class for signalling an API problem from application code.

    Raise it wherever a request cannot be fulfilled. The code that catches it
    turns it into an ApiProblem with ``to_problem()`` and renders that.

    Example:
        # Raise with an explicit status code
        raise ProblemException("Order 42 does not exist", status_code=404)

        # Raise with the default status code (500)
        raise ProblemException("Something went wrong")

        # Convert a caught exception into a problem payload
        try:
            ...
        except ProblemException as exc:
            payload = exc.to_problem().to_dict()

    Attributes:
        details: Error details that will be reported to the client.
        status_code: HTTP status code for the problem (defaults to 500).
        DEFAULT_STATUS_CODE: Class attribute defining the default status code (500).
    """

    DEFAULT_STATUS_CODE = 500

    def __init__(self, details: Any, status_code: int = None):
        """Initialize the ProblemException.

        Args:
            details: Error details that will be reported to the client.
            status_code: HTTP status code (defaults to 500 if not provided).
        """
        super().__init__(details)
        self.details = details
        self.status_code = status_code or self.DEFAULT_STATUS_CODE

    @property
    def code(self) -> int:
        """Alias of ``status_code`` read when building an error source."""
        return self.status_code

    def to_problem(self, include_stack_trace: bool = False):
        """Wrap this exception in an ApiProblem.

        Args:
            include_stack_trace: Whether the cause chain should be collected
                when the problem's errors are resolved.

        Returns:
            ApiProblem: A problem whose status and errors come from this exception.
        """
        from ..problem import ApiProblem

        return ApiProblem(self.status_code, self).set_detail_includes_stack_trace(
            include_stack_trace
        )
