import pytest

from apiproblem.constants import PROBLEM_STATUS_TITLES, status_title


def test_common_titles():
    assert PROBLEM_STATUS_TITLES[404] == "Not Found"
    assert PROBLEM_STATUS_TITLES[500] == "Internal Server Error"
    assert PROBLEM_STATUS_TITLES[418] == "I'm a teapot"
    assert PROBLEM_STATUS_TITLES[408] == "Request Time-out"


def test_table_covers_client_and_server_ranges_only():
    assert all(400 <= code <= 431 or 500 <= code <= 511 for code in PROBLEM_STATUS_TITLES)
    assert len(PROBLEM_STATUS_TITLES) == 37


@pytest.mark.parametrize("code", [200, 302, 420, 430, 509, 599])
def test_unlisted_codes_are_absent(code):
    assert code not in PROBLEM_STATUS_TITLES
    assert status_title(code) is None


def test_status_title_lookup():
    assert status_title(429) == "Too Many Requests"
    assert status_title(511) == "Network Authentication Required"


def test_table_is_read_only():
    with pytest.raises(TypeError):
        PROBLEM_STATUS_TITLES[599] = "Custom"
    with pytest.raises(TypeError):
        del PROBLEM_STATUS_TITLES[404]
