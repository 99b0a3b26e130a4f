import pytest

from occtl.login import LoginInvoker
from occtl.store import ConfigStore


class RecordingInvoker(LoginInvoker):
    """Stands in for oc login; remembers every call."""

    def __init__(self):
        super().__init__(binary="oc")
        self.calls = []

    def invoke(self, url, username):
        self.calls.append((url, username))


@pytest.fixture
def config_path(tmp_path):
    return tmp_path / "occtl" / "config.yaml"


@pytest.fixture
def store(config_path):
    return ConfigStore(config_path)


@pytest.fixture
def invoker():
    return RecordingInvoker()
