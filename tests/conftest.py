import pytest

from dais_cmdline import BaseExecutor, ExecutionResult, UnixPlatform, WindowsPlatform, platforms, set_path


class FakeExecutor(BaseExecutor):
    def __init__(self, output="", returncode=0):
        self.output = output
        self.returncode = returncode
        self.commands = []

    def execute(self, command):
        self.commands.append(command)
        return ExecutionResult(output=self.output, returncode=self.returncode)


@pytest.fixture(autouse=True)
def reset_default_path():
    set_path(None)
    yield
    set_path(None)


@pytest.fixture
def unix():
    return UnixPlatform()


@pytest.fixture
def windows():
    return WindowsPlatform()


@pytest.fixture
def fake_executor():
    return FakeExecutor(output="correct value")


@pytest.fixture
def make_executor():
    return FakeExecutor


@pytest.fixture
def null_device(monkeypatch, tmp_path):
    """Point the platform probe at a path the test controls."""
    device = tmp_path / "null"
    monkeypatch.setattr(platforms, "NULL_DEVICE", str(device))
    return device
