import pytest
from fastapi.testclient import TestClient

from todo_api.main import create_app
from todo_api.settings import get_settings


@pytest.fixture
def clean_env(monkeypatch):
    for name in ("INITIALIZE_SAMPLE_DATA", "CORS_ALLOW_ORIGINS", "LOG_LEVEL", "LOG_FILE", "HOST", "PORT"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


class TestInitializeSampleData:
    def test_defaults_to_true_when_unset(self, clean_env):
        assert get_settings().initialize_sample_data is True

    @pytest.mark.parametrize("value", ["false", "0", "FALSE", "no", "off"])
    def test_falsy_values(self, clean_env, value):
        clean_env.setenv("INITIALIZE_SAMPLE_DATA", value)
        assert get_settings().initialize_sample_data is False

    @pytest.mark.parametrize("value", ["true", "1", "yes", " On "])
    def test_truthy_values(self, clean_env, value):
        clean_env.setenv("INITIALIZE_SAMPLE_DATA", value)
        assert get_settings().initialize_sample_data is True

    @pytest.mark.parametrize("value", ["maybe", ""])
    def test_unparsable_value_falls_back_to_true(self, clean_env, value):
        clean_env.setenv("INITIALIZE_SAMPLE_DATA", value)
        assert get_settings().initialize_sample_data is True


class TestOtherSettings:
    def test_defaults(self, clean_env):
        settings = get_settings()
        assert settings.cors_allow_origins == ["*"]
        assert settings.log_level == "INFO"
        assert settings.log_file is None
        assert (settings.host, settings.port) == ("0.0.0.0", 8000)

    def test_origins_list_and_level(self, clean_env):
        clean_env.setenv("CORS_ALLOW_ORIGINS", "http://a.test, http://b.test,")
        clean_env.setenv("LOG_LEVEL", "debug")
        settings = get_settings()
        assert settings.cors_allow_origins == ["http://a.test", "http://b.test"]
        assert settings.log_level == "DEBUG"

    @pytest.mark.parametrize("value", ["abc", "0", "70000"])
    def test_bad_port_falls_back(self, clean_env, value):
        clean_env.setenv("PORT", value)
        assert get_settings().port == 8000


class TestCreateAppFromEnvironment:
    def test_sample_data_disabled(self, clean_env):
        clean_env.setenv("INITIALIZE_SAMPLE_DATA", "false")
        app = create_app()
        assert app.state.store.user_count == 0
        assert app.state.store.todo_count == 0

        with TestClient(app) as client:
            body = client.get("/api/data/status").json()
        assert body["userCount"] == 0
        assert body["todoCount"] == 0
        assert body["configuration"] == {"initializeSampleData": False}

    def test_sample_data_enabled_by_default(self, clean_env):
        app = create_app()
        assert app.state.store.user_count == 3

        with TestClient(app) as client:
            body = client.get("/api/data/status").json()
        assert body["configuration"] == {"initializeSampleData": True}
