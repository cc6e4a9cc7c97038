import pytest

from wirebox.config.logger import get_logger
from wirebox.config.settings import AppSettings, ContainerSettings, Settings
from wirebox.registry import get_container, new_container, reset_container
from wirebox.shared.container import Container


@pytest.fixture(autouse=True)
def reset_default_container():
    reset_container()
    yield
    reset_container()


class TestRegistry:

    def test_new_container_returns_container(self):
        assert isinstance(new_container(), Container)

    def test_new_container_is_always_new(self):
        first, second = new_container(), new_container()
        assert first is not second
        first.add("name", "value")
        assert not second.has("name")

    def test_get_container_is_a_singleton(self):
        assert get_container() is get_container()

    def test_reset_container(self):
        first = get_container()
        first.add("name", "value")
        reset_container()
        second = get_container()
        assert second is not first
        assert not second.has("name")

    def test_new_container_honours_settings(self):
        settings = Settings(container=ContainerSettings(thread_safe=False, track_retrievals=False))
        container = new_container(settings)
        container.add("name", "value")
        container.get("name")
        assert container.retrieval_counts() == {}

    def test_new_container_uses_logger_from_given_settings(self):
        first = new_container(Settings(app=AppSettings(app_name="wirebox.first")))
        second = new_container(Settings(app=AppSettings(app_name="wirebox.second", log_level="DEBUG")))
        assert first.logger.name == "wirebox.first"
        assert second.logger.name == "wirebox.second"

    def test_new_container_without_settings_shares_process_logger(self):
        assert new_container().logger is get_logger()
        assert new_container().logger is get_logger()


class TestSettings:

    def test_defaults(self, monkeypatch):
        for var in ("WIREBOX_APP_NAME", "WIREBOX_LOG_LEVEL", "WIREBOX_CONTAINER_THREAD_SAFE"):
            monkeypatch.delenv(var, raising=False)
        settings = Settings()
        assert settings.app.app_name == "wirebox"
        assert settings.app.log_level == "WARNING"
        assert settings.container.thread_safe is True

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("WIREBOX_LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("WIREBOX_CONTAINER_THREAD_SAFE", "false")
        settings = Settings()
        assert settings.app.log_level == "DEBUG"
        assert settings.container.thread_safe is False

    def test_app_settings_fields(self):
        assert set(AppSettings.model_fields) == {"app_name", "log_file", "log_level", "json_logs"}
