from __future__ import annotations

import socket
from pathlib import Path

import pytest
from hypothesis import settings

from qmlbench_notifier.config import NotifierConfig

_ALLOWED_MARKERS = {"unit", "integration", "slow"}
_ENV_KEYS = (
    "QMLBENCH_SMTP_SERVER",
    "QMLBENCH_SENDER",
    "QMLBENCH_ERROR_MARGIN",
    "QMLBENCH_MAIL_PROGRAM",
    "QMLBENCH_LOG_FORMAT",
)

settings.register_profile("qmlbench", deadline=None, max_examples=60)
settings.load_profile("qmlbench")


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        names = {mark.name for mark in item.iter_markers()}
        if not names.intersection(_ALLOWED_MARKERS):
            item.add_marker("unit")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in _ENV_KEYS:
        monkeypatch.delenv(key, raising=False)


@pytest.fixture(autouse=True)
def no_network_for_unit(request: pytest.FixtureRequest, monkeypatch: pytest.MonkeyPatch) -> None:
    if request.node.get_closest_marker("integration") or request.node.get_closest_marker("slow"):
        return

    def _blocked(*_args: object, **_kwargs: object) -> socket.socket:
        raise RuntimeError("network disabled in unit tests")

    def _blocked_connect(*_args: object, **_kwargs: object) -> None:
        raise RuntimeError("network disabled in unit tests")

    monkeypatch.setattr(socket, "create_connection", _blocked)
    monkeypatch.setattr(socket.socket, "connect", _blocked_connect)


@pytest.fixture
def workspace(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """A cwd holding a ``results`` directory and a ``benchmarks`` tree of scene files."""
    (tmp_path / "results").mkdir()
    (tmp_path / "benchmarks").mkdir()
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def config(workspace: Path) -> NotifierConfig:
    return NotifierConfig(directory=str(workspace / "results"), recipient="qa@example.com")
