"""
Self Check Tests
================
Reference scenarios, assert_equals reporting, and the main entry point.
"""
import logging
from unittest.mock import patch

import pytest

from pathjoin.services.self_check import SelfCheckError, assert_equals, run_self_check


def test_run_self_check_posix():
    assert run_self_check("posix") == 10


def test_run_self_check_windows():
    assert run_self_check("windows") == 10


def test_assert_equals_logs_ok(caplog):
    caplog.set_level(logging.INFO, logger="pathjoin")
    assert_equals("foo/bar", "foo/bar")
    assert "OK: foo/bar" in caplog.text


def test_assert_equals_compares_text():
    with pytest.raises(SelfCheckError):
        assert_equals("foo/bar/", "foo/bar")


def test_assert_equals_failure_message():
    with pytest.raises(SelfCheckError) as exc:
        assert_equals("foo", "bar")
    assert str(exc.value) == "Expected foo to equal to bar, but the expectations have failed"


def test_self_check_error_is_not_assertion_error():
    assert not issubclass(SelfCheckError, AssertionError)


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield root
    for handler in root.handlers[:]:
        root.removeHandler(handler)
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)


def test_main_success(restore_root_logger):
    import main
    assert main.main() == 0


def test_main_failure(restore_root_logger):
    import main
    with patch("main.run_self_check", side_effect=SelfCheckError("Expected a to equal to b")):
        assert main.main() == 1


def test_main_does_not_swallow_assertion_error(restore_root_logger):
    import main
    with patch("main.run_self_check", side_effect=AssertionError("bug")):
        with pytest.raises(AssertionError):
            main.main()
