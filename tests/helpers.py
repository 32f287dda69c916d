import sys

from returns.pipeline import is_successful
from returns.unsafe import unsafe_perform_io


def python(code: str) -> tuple[str, ...]:
    """argv running `code` with the current interpreter."""
    return (sys.executable, "-c", code)


def value(result):
    assert is_successful(result), unsafe_perform_io(result.failure())
    return unsafe_perform_io(result.unwrap())


def failure(result):
    assert not is_successful(result), "expected a failure"
    return unsafe_perform_io(result.failure())
