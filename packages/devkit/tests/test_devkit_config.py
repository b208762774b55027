from devkit.config import DEFAULT_DATABASE_URL, ServiceSettings, load_settings


def test_load_settings_reads_env(monkeypatch) -> None:
    monkeypatch.setenv("DATABASE_URL", "sqlite:///./example.db")
    settings = load_settings("school-service")

    assert settings.SERVICE_NAME == "school-service"
    assert settings.DATABASE_URL == "sqlite:///./example.db"


def test_load_settings_defaults_to_embedded_store(monkeypatch) -> None:
    monkeypatch.delenv("DATABASE_URL", raising=False)
    settings = load_settings("school-service")

    assert settings.DATABASE_URL == DEFAULT_DATABASE_URL


def test_load_settings_builds_service_subclass(monkeypatch) -> None:
    class ExampleSettings(ServiceSettings):
        EXAMPLE_FLAG: bool = False

    monkeypatch.setenv("EXAMPLE_FLAG", "true")
    settings = load_settings("example-service", ExampleSettings)

    assert isinstance(settings, ExampleSettings)
    assert settings.SERVICE_NAME == "example-service"
    assert settings.EXAMPLE_FLAG is True
