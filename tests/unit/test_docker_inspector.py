"""
Unit tests for the docker CLI wrapper.
"""
import subprocess

import pytest

from d2r.errors import InspectionFailed, ToolUnavailable
from d2r.RUNNERS import docker_inspector
from d2r.RUNNERS.docker_inspector import DockerInspector


class FakeRun:
    """Stands in for subprocess.run and records the commands it was given."""

    def __init__(self, returncode=0, stdout="[]", stderr="", raises=None):
        self.returncode = returncode
        self.stdout = stdout
        self.stderr = stderr
        self.raises = raises
        self.calls = []

    def __call__(self, command, **kwargs):
        self.calls.append((command, kwargs))
        if self.raises:
            raise self.raises
        return subprocess.CompletedProcess(command, self.returncode, self.stdout, self.stderr)


@pytest.fixture
def fake_run(monkeypatch):
    def install(**kwargs):
        fake = FakeRun(**kwargs)
        monkeypatch.setattr(docker_inspector.subprocess, "run", fake)
        return fake
    return install


def test_inspect_container(fake_run):
    fake = fake_run(stdout='[{"Id": "abc"}]')
    assert DockerInspector().inspect_container("web") == '[{"Id": "abc"}]'
    command, kwargs = fake.calls[0]
    assert command == ["docker", "container", "inspect", "web"]
    assert kwargs["shell"] is False
    assert kwargs["timeout"] is None


def test_inspect_image_with_custom_binary(fake_run):
    fake = fake_run()
    DockerInspector(docker_bin="podman", timeout=5).inspect_image("alpine:3.20")
    command, kwargs = fake.calls[0]
    assert command == ["podman", "image", "inspect", "alpine:3.20"]
    assert kwargs["timeout"] == 5


def test_error_prefix_is_stripped(fake_run):
    fake_run(returncode=1, stdout="[]", stderr="Error: No such container: nope\n")
    with pytest.raises(InspectionFailed) as excinfo:
        DockerInspector().inspect_container("nope")
    assert str(excinfo.value) == "No such container: nope"


def test_stderr_without_exit_status(fake_run):
    fake_run(returncode=0, stderr="Error response from daemon: boom")
    with pytest.raises(InspectionFailed, match="response from daemon: boom"):
        DockerInspector().inspect_container("web")


def test_silent_failure(fake_run):
    fake_run(returncode=125, stderr="")
    with pytest.raises(InspectionFailed, match="status 125"):
        DockerInspector().inspect_container("web")


def test_missing_binary(fake_run):
    fake_run(raises=FileNotFoundError(2, "No such file or directory"))
    with pytest.raises(ToolUnavailable, match="docker is not installed"):
        DockerInspector().inspect_container("web")


def test_timeout(fake_run):
    fake_run(raises=subprocess.TimeoutExpired(["docker"], 2))
    with pytest.raises(InspectionFailed, match="timed out"):
        DockerInspector(timeout=2).inspect_container("web")
