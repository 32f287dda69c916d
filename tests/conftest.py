import pytest


@pytest.fixture
def no_spawn(monkeypatch):
    """Fails the test as soon as anything tries to start a process."""

    def popen(*args, **kwargs):
        raise AssertionError(f"unexpected spawn: {args!r}")

    monkeypatch.setattr("pyoscmd.domain.process.subprocess.Popen", popen)
