from collections.abc import Callable, Generator
from typing import Any

import pytest

pytest_plugins = ["pytester"]


class NoErrTB:
    """TB that fails the test on any interaction."""

    def helper(self) -> None:
        pytest.fail("unexpected helper() call")

    def errorf(self, format: str, *args: Any) -> None:
        pytest.fail(f"unexpected error: {format % args if args else format}")


class FakeTB:
    """TB that records what an assertion reported."""

    def __init__(self, expected: str):
        self.expected = expected
        self.helper_calls = 0
        self.messages: list[str] = []

    def helper(self) -> None:
        self.helper_calls += 1

    def errorf(self, format: str, *args: Any) -> None:
        self.messages.append(format % args if args else format)

    def verify(self) -> None:
        assert self.messages == [self.expected], "incorrect error messages"
        assert self.helper_calls == 1, "helper() must be called exactly once"


@pytest.fixture
def noerr() -> NoErrTB:
    return NoErrTB()


@pytest.fixture
def fake() -> Generator[Callable[[str], FakeTB], None, None]:
    """Factory of FakeTBs, each verified to have reported ``expected`` exactly once."""
    created: list[FakeTB] = []

    def make(expected: str) -> FakeTB:
        f = FakeTB(expected)
        created.append(f)
        return f

    yield make
    for f in created:
        f.verify()
