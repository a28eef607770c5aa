import pytest

from halfsearch.config import Settings, load_settings
from halfsearch.errors import ConfigError


def test_defaults_without_file():
    settings = load_settings(environ={})
    assert settings == Settings()
    assert settings.search.strict is False
    assert settings.search.default_algorithm == "bounded_binary_search"
    assert settings.logging.level == "WARNING"


def test_yaml_file(tmp_path):
    path = tmp_path / "halfsearch.yaml"
    path.write_text("search:\n  strict: true\nlogging:\n  level: DEBUG\n")
    settings = load_settings(path, environ={})
    assert settings.search.strict is True
    assert settings.search.recursive is False
    assert settings.logging.level == "DEBUG"


def test_env_overrides_file(tmp_path):
    path = tmp_path / "halfsearch.yaml"
    path.write_text("search:\n  strict: true\n  recursive: true\n")
    env = {
        "HALFSEARCH_SEARCH__STRICT": "false",
        "HALFSEARCH_LOGGING__JSON_FORMAT": "true",
        "OTHER_SEARCH__STRICT": "true",
    }
    settings = load_settings(path, environ=env)
    assert settings.search.strict is False
    assert settings.search.recursive is True
    assert settings.logging.json_format is True


def test_config_path_from_environment(tmp_path, monkeypatch):
    path = tmp_path / "conf.yml"
    path.write_text("search:\n  default_algorithm: classic_binary_search\n")
    monkeypatch.setenv("HALFSEARCH_CONFIG", str(path))
    assert load_settings().search.default_algorithm == "classic_binary_search"


def test_missing_file(tmp_path):
    with pytest.raises(ConfigError):
        load_settings(tmp_path / "absent.yaml", environ={})


def test_non_mapping_yaml(tmp_path):
    path = tmp_path / "list.yaml"
    path.write_text("- 1\n- 2\n")
    with pytest.raises(ConfigError):
        load_settings(path, environ={})


def test_malformed_yaml(tmp_path):
    path = tmp_path / "broken.yaml"
    path.write_text("search: [unclosed\n")
    with pytest.raises(ConfigError):
        load_settings(path, environ={})


def test_invalid_value():
    with pytest.raises(ConfigError):
        load_settings(environ={"HALFSEARCH_SEARCH__STRICT": "[1, 2]"})


@pytest.mark.parametrize("level", ["debug", "Info", "WARNING", "error", "critical"])
def test_log_level_normalized(level):
    settings = load_settings(environ={"HALFSEARCH_LOGGING__LEVEL": level})
    assert settings.logging.level == level.upper()


def test_unknown_log_level_from_yaml(tmp_path):
    path = tmp_path / "loud.yaml"
    path.write_text("logging:\n  level: loud\n")
    with pytest.raises(ConfigError) as excinfo:
        load_settings(path, environ={})
    assert "unknown log level" in str(excinfo.value)


def test_unknown_log_level_from_env():
    with pytest.raises(ConfigError):
        load_settings(environ={"HALFSEARCH_LOGGING__LEVEL": "bogus"})


def test_json_format_env_override():
    settings = load_settings(environ={"HALFSEARCH_LOGGING__JSON_FORMAT": "true"})
    assert settings.logging.json_format is True


@pytest.mark.parametrize("env", [
    {"HALFSEARCH_SEARCH__STRICT": "true", "HALFSEARCH_SEARCH__STRICT__X": "1"},
    {"HALFSEARCH_SEARCH__STRICT__X": "1", "HALFSEARCH_SEARCH__STRICT": "true"},
])
def test_conflicting_env_keys(env):
    with pytest.raises(ConfigError):
        load_settings(environ=env)
