from __future__ import annotations

import pytest

from weather.services import PROVIDER_REGISTRY

from .fakes import FakeProvider


@pytest.fixture
def fake_provider(monkeypatch: pytest.MonkeyPatch) -> FakeProvider:
    provider = FakeProvider()
    monkeypatch.setitem(PROVIDER_REGISTRY, "weatherapi", provider)
    return provider
