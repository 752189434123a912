from .constants import PROBLEM_STATUS_TITLES, status_title
from .problem import ApiProblem
from .sources import ErrorObject, ErrorSource, LiteralSource, PreviousError
from .utils import InvalidArgumentException, ProblemException

__all__ = [
    "ApiProblem",
    "ErrorObject",
    "ErrorSource",
    "InvalidArgumentException",
    "LiteralSource",
    "PROBLEM_STATUS_TITLES",
    "PreviousError",
    "ProblemException",
    "status_title",
]
