import pytest

from solovay_strassen import config
from solovay_strassen.web import create_app


@pytest.fixture
def thread_pool(monkeypatch):
    """Run oracle trials on threads; process pools are exercised in test_oracle only."""
    monkeypatch.setattr(config, "EXECUTOR", "thread")


@pytest.fixture
def client(thread_pool):
    app = create_app()
    app.config.update(TESTING=True)
    return app.test_client()
