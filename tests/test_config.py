from navietta.config import AppConfig, GeoNamesConfig, LLMConfig, get_config, reset_config


def test_defaults():
    config = AppConfig()

    assert config.geocoding.base_url == "http://api.geonames.org/searchJSON"
    assert config.geocoding.max_rows == 5
    assert config.geocoding.feature_classes == ("P", "A")
    assert config.geocoding.timeout_seconds is None
    assert config.validation.report_all_failures is False
    assert config.llm.model == "claude-sonnet-4-20250514"
    assert not config.llm.is_configured


def test_geonames_username_from_plain_env(monkeypatch):
    monkeypatch.setenv("GEONAMES_USERNAME", "traveller")
    assert GeoNamesConfig().username == "traveller"


def test_anthropic_key_from_env(monkeypatch):
    monkeypatch.setenv("ANTHROPIC_API_KEY", "sk-live")

    config = LLMConfig()

    assert config.is_configured
    assert config.api_key.get_secret_value() == "sk-live"
    assert "sk-live" not in repr(config)


def test_empty_key_is_not_configured():
    assert not LLMConfig(api_key="").is_configured


def test_report_all_failures_from_env(monkeypatch):
    monkeypatch.setenv("NAV_VALIDATION_REPORT_ALL_FAILURES", "true")
    assert AppConfig().validation.report_all_failures is True


def test_get_config_is_cached():
    assert get_config() is get_config()
    first = get_config()
    reset_config()
    assert get_config() is not first
