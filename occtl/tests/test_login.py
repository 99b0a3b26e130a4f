import os
import subprocess

import pytest

from occtl.config import Config
from occtl.exceptions import InvocationError
from occtl.login import (
    ExecLoginInvoker,
    SpawnLoginInvoker,
    build_login_command,
    get_invoker,
)

MISSING_BINARY = "occtl-test-no-such-login-tool"


def test_build_login_command():
    assert build_login_command("oc", "https://api.dev", "alice") == [
        "oc", "login", "https://api.dev", "-u", "alice"
    ]


def test_exec_replaces_process(monkeypatch):
    calls = []
    monkeypatch.setattr("occtl.login.os.execvp", lambda file, args: calls.append((file, args)))

    ExecLoginInvoker(binary="oc").invoke("https://api.dev", "alice")

    assert calls == [("oc", ["oc", "login", "https://api.dev", "-u", "alice"])]


@pytest.mark.skipif(os.name != "posix", reason="exec strategy is POSIX only")
def test_exec_missing_binary_raises():
    with pytest.raises(InvocationError) as exc:
        ExecLoginInvoker(binary=MISSING_BINARY).invoke("https://api.dev", "alice")
    assert exc.value.command[0] == MISSING_BINARY
    assert MISSING_BINARY in str(exc.value)


def test_spawn_exits_with_child_code(monkeypatch):
    calls = []

    def fake_run(cmd):
        calls.append(cmd)
        return subprocess.CompletedProcess(cmd, 3)

    monkeypatch.setattr("occtl.login.subprocess.run", fake_run)
    with pytest.raises(SystemExit) as exc:
        SpawnLoginInvoker(binary="oc").invoke("https://api.dev", "alice")

    assert exc.value.code == 3
    assert calls == [["oc", "login", "https://api.dev", "-u", "alice"]]


def test_spawn_missing_binary_raises():
    with pytest.raises(InvocationError):
        SpawnLoginInvoker(binary=MISSING_BINARY).invoke("https://api.dev", "alice")


def test_invoker_uses_configured_binary(monkeypatch):
    monkeypatch.setattr(Config, "LOGIN_BINARY", "/opt/bin/oc")
    assert get_invoker("spawn").binary == "/opt/bin/oc"
    assert get_invoker("spawn", binary="kubectl-oc").binary == "kubectl-oc"


def test_get_invoker_strategies(monkeypatch):
    assert isinstance(get_invoker("exec"), ExecLoginInvoker)
    assert isinstance(get_invoker("SPAWN"), SpawnLoginInvoker)

    monkeypatch.setattr(Config, "LOGIN_STRATEGY", "spawn")
    assert isinstance(get_invoker(), SpawnLoginInvoker)

    with pytest.raises(ValueError):
        get_invoker("teleport")


@pytest.mark.skipif(os.name != "posix", reason="auto picks exec on POSIX")
def test_auto_prefers_exec_on_posix():
    assert isinstance(get_invoker("auto"), ExecLoginInvoker)


def test_config_validate(monkeypatch):
    monkeypatch.setattr(Config, "LOGIN_STRATEGY", "auto")
    monkeypatch.setattr(Config, "LOGIN_BINARY", "oc")
    Config.validate()

    monkeypatch.setattr(Config, "LOGIN_STRATEGY", "teleport")
    with pytest.raises(ValueError, match="OCCTL_LOGIN_STRATEGY"):
        Config.validate()

    monkeypatch.setattr(Config, "LOGIN_STRATEGY", "exec")
    monkeypatch.setattr(Config, "LOGIN_BINARY", "")
    with pytest.raises(ValueError, match="OCCTL_LOGIN_BINARY"):
        Config.validate()
