import io
import logging
import os
import subprocess

import pytest

from box_stop import config, runtime, utils


class FakeRunner:
    """Replacement for subprocess.run that records commands and returns canned statuses."""

    def __init__(self, returncodes=None):
        self.returncodes = returncodes or {}
        self.commands = []

    def __call__(self, command_parts, check=False, **kwargs):
        self.commands.append(list(command_parts))
        subcommand = next((p for p in command_parts if p in self.returncodes), None)
        returncode = self.returncodes.get(subcommand, 0)
        if check and returncode != 0:
            raise subprocess.CalledProcessError(returncode, command_parts, stderr=b"error")
        return subprocess.CompletedProcess(command_parts, returncode, stdout=b"", stderr=b"")

    def subcommands(self, name):
        return [cmd for cmd in self.commands if name in cmd]


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    for var in [
        config.ENV_CONTAINER_NAME,
        config.ENV_NON_INTERACTIVE,
        config.ENV_VERBOSE,
        config.ENV_CONTAINER_MANAGER,
    ]:
        monkeypatch.delenv(var, raising=False)
    yield
    utils.logger.setLevel(logging.WARNING)


@pytest.fixture
def regular_user(monkeypatch):
    monkeypatch.setattr(os, "geteuid", lambda: 1000)


@pytest.fixture
def root_user(monkeypatch):
    monkeypatch.setattr(os, "geteuid", lambda: 0)


@pytest.fixture
def installed(monkeypatch):
    """Executables found in PATH. Tests may change the dict."""
    paths = {"podman": "/usr/bin/podman", "docker": "/usr/bin/docker"}
    probed = []

    def which(name):
        probed.append(name)
        return paths.get(name)

    monkeypatch.setattr(runtime.shutil, "which", which)
    paths["probed"] = probed
    return paths


@pytest.fixture
def runner(monkeypatch):
    fake = FakeRunner()
    monkeypatch.setattr(utils.subprocess, "run", fake)
    return fake


@pytest.fixture
def stdin(monkeypatch):
    def set_input(text):
        monkeypatch.setattr("sys.stdin", io.StringIO(text))

    return set_input
