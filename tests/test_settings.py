"""Settings loading tests."""

import pytest

from football_cli.errors import ConfigurationError, UnknownCompetitionError
from football_cli.settings import CONFIG_ENV_VAR, load_settings


@pytest.fixture(autouse=True)
def isolated_cwd(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)


def test_defaults():
    settings = load_settings()

    assert settings.base_url == "https://api.football-data.org/v4/"
    assert settings.token_env_var == "X_AUTH_TOKEN"
    assert settings.token_header == "X-Auth-Token"
    assert settings.timeout == 10.0
    assert settings.env_file == ".env"
    assert settings.persist_token is True
    assert settings.menu_max_attempts == 5
    assert settings.default_competition == "Premier League"


def test_yaml_overrides_are_merged(tmp_path):
    config = tmp_path / "custom.yaml"
    config.write_text(
        "api:\n"
        "  base_url: http://localhost:8080/v4\n"
        "  timeout: null\n"
        "credentials:\n"
        "  persist: false\n"
        "default_competition: Serie A\n"
    )

    settings = load_settings(str(config))

    assert settings.base_url == "http://localhost:8080/v4/"
    assert settings.timeout is None
    assert settings.token_header == "X-Auth-Token"
    assert settings.persist_token is False
    assert settings.default_competition == "Serie A"


def test_env_var_path(tmp_path, monkeypatch):
    config = tmp_path / "env.yaml"
    config.write_text("menu:\n  max_attempts: 2\n")
    monkeypatch.setenv(CONFIG_ENV_VAR, str(config))

    assert load_settings().menu_max_attempts == 2


def test_default_config_location(tmp_path):
    (tmp_path / "config").mkdir()
    (tmp_path / "config" / "football_cli.yaml").write_text("default_competition: Bundesliga\n")

    assert load_settings().default_competition == "Bundesliga"


def test_empty_file_uses_defaults(tmp_path):
    config = tmp_path / "empty.yaml"
    config.write_text("")

    assert load_settings(str(config)).default_competition == "Premier League"


def test_missing_file():
    with pytest.raises(ConfigurationError):
        load_settings("does-not-exist.yaml")


def test_non_mapping_file(tmp_path):
    config = tmp_path / "list.yaml"
    config.write_text("- one\n- two\n")

    with pytest.raises(ConfigurationError):
        load_settings(str(config))


def test_unknown_default_competition(tmp_path):
    config = tmp_path / "bad.yaml"
    config.write_text("default_competition: Eredivisie\n")

    with pytest.raises(UnknownCompetitionError):
        load_settings(str(config))


def test_non_integer_max_attempts(tmp_path):
    config = tmp_path / "menu.yaml"
    config.write_text("menu:\n  max_attempts: many\n")

    with pytest.raises(ConfigurationError) as exc_info:
        load_settings(str(config))
    assert "Invalid setting" in str(exc_info.value)


def test_non_numeric_timeout(tmp_path):
    config = tmp_path / "timeout.yaml"
    config.write_text("api:\n  timeout: soon\n")

    with pytest.raises(ConfigurationError):
        load_settings(str(config))


def test_section_that_is_not_a_mapping(tmp_path):
    config = tmp_path / "scalar.yaml"
    config.write_text("api: football-data\n")

    with pytest.raises(ConfigurationError):
        load_settings(str(config))


def test_empty_section_keeps_defaults(tmp_path):
    config = tmp_path / "empty-api.yaml"
    config.write_text("api:\nmenu:\n")

    settings = load_settings(str(config))

    assert settings.base_url == "https://api.football-data.org/v4/"
    assert settings.menu_max_attempts == 5
