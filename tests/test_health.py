"""Basic health check tests."""

from fastapi.testclient import TestClient
from typer.testing import CliRunner


def test_import_kitchenmate():
    """Test that kitchenmate package can be imported."""
    import kitchenmate
    assert kitchenmate.__version__ == "1.0.0"


def test_health_endpoint():
    from kitchenmate.web.app import app

    with TestClient(app) as client:
        response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_settings_read_environment(monkeypatch):
    from kitchenmate.config import Settings

    monkeypatch.setenv("KITCHENMATE_MODEL", "gpt-4.1")
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    settings = Settings(_env_file=None)
    assert settings.kitchenmate_model == "gpt-4.1"
    assert settings.log_level == "DEBUG"
    assert settings.is_development


def test_cli_version():
    from kitchenmate.main import app

    result = CliRunner().invoke(app, ["version"])
    assert result.exit_code == 0
    assert "KitchenMate version 1.0.0" in result.stdout


def test_cli_health_with_key(monkeypatch):
    from kitchenmate.config import get_settings
    from kitchenmate.main import app

    monkeypatch.setenv("OPENAI_API_KEY", "sk-test")
    get_settings.cache_clear()
    try:
        result = CliRunner().invoke(app, ["health"])
    finally:
        get_settings.cache_clear()
    assert result.exit_code == 0
    assert "OpenAI API key configured" in result.stdout
