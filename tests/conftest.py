from __future__ import annotations

from pathlib import Path

import pytest

from tests._fixtures.fake_github import FakeGitHub
from tests._fixtures.portfolio_builder import PortfolioBuilder


@pytest.fixture
def portfolio(tmp_path: Path) -> PortfolioBuilder:
    """Provide a temporary portfolio root rooted at the pytest tmp_path."""
    return PortfolioBuilder(tmp_path)


@pytest.fixture
def fake_github(monkeypatch: pytest.MonkeyPatch) -> FakeGitHub:
    """Patch urlopen in the GitHub client with an in-memory API."""
    for key in ("FOLIOGEN_GITHUB_TOKEN", "GITHUB_TOKEN", "GH_TOKEN"):
        monkeypatch.delenv(key, raising=False)
    fake = FakeGitHub()
    monkeypatch.setattr("foliogen.github.client.urlopen", fake.urlopen)
    return fake
