import pytest

from vtag.encoding import registry


@pytest.fixture(autouse=True)
def reset_default_encoder(monkeypatch):
    monkeypatch.setattr(registry, "_default_encoder", None)
    yield
