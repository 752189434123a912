from apiproblem.problem import ApiProblem
from apiproblem.utils.exceptions import InvalidArgumentException, ProblemException


def test_problem_exception_default_status_code():
    exc = ProblemException("An error occurred")
    assert exc.details == "An error occurred"
    assert exc.status_code == 500
    assert exc.code == 500


def test_problem_exception_custom_status_code():
    exc = ProblemException("Not Found", status_code=404)
    assert exc.details == "Not Found"
    assert exc.status_code == 404
    assert exc.code == 404


def test_problem_exception_to_problem():
    problem = ProblemException(" Payment needed ", status_code=402).to_problem()

    assert isinstance(problem, ApiProblem)
    assert problem.to_dict() == {"status": 402, "errors": "Payment needed"}


def test_problem_exception_to_problem_with_stack_trace():
    try:
        try:
            raise TimeoutError("upstream")
        except TimeoutError as exc:
            raise ProblemException("Gateway timed out", status_code=504) from exc
    except ProblemException as exc:
        problem = exc.to_problem(include_stack_trace=True)

    assert problem.status == 504
    assert problem.errors == "Gateway timed out"


def test_invalid_argument_exception_message():
    exc = InvalidArgumentException("Title")
    assert str(exc) == 'Invalid property name "Title"'
    assert exc.name == "Title"
