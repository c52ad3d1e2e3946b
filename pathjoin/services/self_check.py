"""
Self Check
==========
Runs the reference join scenarios and reports each one.

Scenarios:
    - basic and multi-segment concatenation
    - empty segment is a no-op
    - trailing separator is not doubled
    - absolute segment resets the result
    - str / bytes / bytearray / memoryview / PathLike inputs agree

Every passing check is logged as "OK: <path>". The first failing check
raises SelfCheckError and stops the run.
"""
import logging
from pathlib import PurePath

from pathjoin.utils.path_utils import join_path, path_module

logger = logging.getLogger(__name__)


class SelfCheckError(Exception):
    """A reference scenario produced an unexpected path."""


def assert_equals(first: str, second: str) -> None:
    """Raise SelfCheckError unless both paths have the same text."""
    if first != second:
        raise SelfCheckError(
            f"Expected {first} to equal to {second}, but the expectations have failed"
        )
    logger.info(f"OK: {first}")


def run_self_check(flavour: str = "posix") -> int:
    """
    Run every scenario under the given flavour.

    Returns
    -------
    int
        Number of checks that passed.
    """
    sep = path_module(flavour).sep

    checks = [
        (join_path("foo", "bar", flavour=flavour), f"foo{sep}bar"),
        (join_path("foo", "bar", "baz", flavour=flavour), f"foo{sep}bar{sep}baz"),
        (join_path("foo", "", "baz", flavour=flavour), f"foo{sep}baz"),
        (join_path("foo/", "baz", flavour=flavour), "foo/baz"),
        (join_path("foo", "/baz", flavour=flavour), "/baz"),
    ]

    s1, s2 = "foo", "bar"
    b1, b2 = s1.encode(), s2.encode()
    for first, second in [
        (s1, s2),
        (b1, b2),
        (bytearray(b1), bytearray(b2)),
        (memoryview(b1), memoryview(b2)),
        (PurePath(s1), PurePath(s2)),
    ]:
        checks.append((join_path(first, second, flavour=flavour), f"foo{sep}bar"))

    passed = 0
    for actual, expected in checks:
        assert_equals(actual, expected)
        passed += 1

    logger.info(f"Self check passed: {passed}/{len(checks)} ({flavour})")
    return passed
