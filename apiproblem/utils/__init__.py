from .exceptions import InvalidArgumentException, ProblemException

__all__ = [
    "InvalidArgumentException",
    "ProblemException",
]
