"""Shared fixtures: a fixed reference time, a scripted resolver and an
isolated configuration directory."""

from pathlib import Path
from typing import Iterator, Optional

import pendulum
import pytest

from humantime import configuration
from humantime.repository.configuration import CONFIGURATION_REPO


class FakeResolver:
    """Resolver returning scripted answers and recording what it was asked."""

    def __init__(self, answers: Optional[dict[str, pendulum.DateTime]] = None) -> None:
        self.answers = answers or {}
        self.calls: list[tuple[str, pendulum.DateTime]] = []

    def resolve(
        self,
        text: str,
        reference: pendulum.DateTime,
    ) -> Optional[pendulum.DateTime]:
        self.calls.append((text, reference))
        return self.answers.get(text)


@pytest.fixture
def now() -> pendulum.DateTime:
    """Thursday 2026-01-15 18:00 UTC."""
    return pendulum.datetime(2026, 1, 15, 18, 0, 0, tz="UTC")


@pytest.fixture
def fake_resolver() -> FakeResolver:
    return FakeResolver()


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    config_path = tmp_path / "config"
    monkeypatch.setattr(configuration, "CONFIG_PATH", config_path)
    monkeypatch.setattr(configuration, "APP_CONFIG_PATH", config_path / "config.yaml")
    CONFIGURATION_REPO.reload()
    yield config_path
    CONFIGURATION_REPO.reload()
