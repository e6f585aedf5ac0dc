from pathlib import Path

from fastapi import FastAPI

from budget_planner.core.config import Settings, get_settings
from budget_planner.main import create_app
from budget_planner.services.plan_store import PlanStore


def test_create_app_registers_plan_routes() -> None:
    app = create_app()
    assert isinstance(app, FastAPI)
    paths = {getattr(route, "path", None) for route in app.routes}
    assert {"/plan", "/plan/", "/plan/{section_id:path}", "/item/{section_id:path}", "/income"} <= paths


def test_create_app_uses_supplied_store() -> None:
    store = PlanStore.seeded()
    app = create_app(store=store)
    assert app.state.plan_store is store


def test_each_app_gets_its_own_store() -> None:
    assert create_app().state.plan_store is not create_app().state.plan_store


def test_get_settings_uses_default_configuration(monkeypatch) -> None:
    for name in ("PLANNER_HOST", "PLANNER_PORT", "LOG_LEVEL", "LOG_DIR"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()

    settings = get_settings()

    assert settings.server.host == "0.0.0.0"
    assert settings.server.port == 4321
    assert settings.log_level == "INFO"
    assert settings.log_dir is None
    get_settings.cache_clear()


def test_settings_read_environment_overrides(monkeypatch) -> None:
    monkeypatch.setenv("PLANNER_HOST", "127.0.0.1")
    monkeypatch.setenv("PLANNER_PORT", "8080")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("LOG_DIR", "var/logs")

    settings = Settings.from_env()

    assert settings.server.host == "127.0.0.1"
    assert settings.server.port == 8080
    assert settings.log_level == "DEBUG"
    assert settings.log_dir == Path("var/logs")
