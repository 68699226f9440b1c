import pytest
import uvicorn
from fastapi.testclient import TestClient

import app.main as main_module
from app.core.config import settings


@pytest.fixture(scope="function")
def startup_calls(monkeypatch) -> list:
    """Record startup task runs instead of touching the database."""
    calls = []
    monkeypatch.setattr(main_module, "run_startup_tasks", lambda: calls.append(True))
    return calls


def test_lifespan_runs_startup_tasks_when_enabled(monkeypatch, startup_calls):
    monkeypatch.setattr(settings, "run_startup_tasks", True)

    with TestClient(main_module.app) as client:
        assert client.get("/health").status_code == 200

    assert startup_calls == [True]


def test_lifespan_skips_startup_tasks_when_disabled(monkeypatch, startup_calls):
    monkeypatch.setattr(settings, "run_startup_tasks", False)

    with TestClient(main_module.app) as client:
        assert client.get("/health").status_code == 200

    assert startup_calls == []


def test_run_serves_app_on_configured_address(monkeypatch):
    served = {}

    def fake_run(target, **kwargs):
        served["target"] = target
        served.update(kwargs)

    monkeypatch.setattr(uvicorn, "run", fake_run)
    monkeypatch.setattr(settings, "api_host", "127.0.0.1")
    monkeypatch.setattr(settings, "api_port", 9000)

    main_module.run()

    assert served == {"target": "app.main:app", "host": "127.0.0.1", "port": 9000}
