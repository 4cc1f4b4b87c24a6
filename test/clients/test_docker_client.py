import subprocess

import pytest

from windows_images.clients.docker_client import DockerClient


class DummyResult:
    def __init__(self, returncode):
        self.returncode = returncode


@pytest.fixture
def client():
    return DockerClient()


def test_tag_and_push(monkeypatch, client):
    calls = []

    def run(cmd, check=False):
        calls.append(cmd)
        return DummyResult(0)

    monkeypatch.setattr(subprocess, "run", run)
    client.tag("jenkins/jenkins:a", "jenkins/jenkins:b")
    client.push("jenkins/jenkins:b")
    assert calls == [
        ["docker", "tag", "jenkins/jenkins:a", "jenkins/jenkins:b"],
        ["docker", "push", "jenkins/jenkins:b"],
    ]


def test_push_failure(monkeypatch, client):
    monkeypatch.setattr(subprocess, "run", lambda cmd, check=False: DummyResult(1))
    with pytest.raises(RuntimeError, match="push failed for jenkins/jenkins:b"):
        client.push("jenkins/jenkins:b")


def test_push_when_docker_missing(monkeypatch, client):
    def run(cmd, check=False):
        raise FileNotFoundError("docker")
    monkeypatch.setattr(subprocess, "run", run)
    with pytest.raises(RuntimeError, match="Could not run docker"):
        client.push("jenkins/jenkins:b")
