import pytest
from pydantic import ValidationError

from flowkit.core.config import Settings, settings


@pytest.fixture
def clean_env(monkeypatch):
    for name in ("FLOWKIT_MAX_CREATE_LENGTH", "FLOWKIT_CLOSE_TOLERANCE", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


def test_defaults(clean_env):
    loaded = Settings.load()
    assert loaded.MAX_CREATE_LENGTH == 10000
    assert loaded.CLOSE_TOLERANCE == 1e-15
    assert loaded.LOG_LEVEL == "INFO"


def test_environment_overrides(clean_env):
    clean_env.setenv("FLOWKIT_MAX_CREATE_LENGTH", "250")
    clean_env.setenv("FLOWKIT_CLOSE_TOLERANCE", "0.001")
    clean_env.setenv("LOG_LEVEL", "debug")

    loaded = Settings.load()

    assert loaded.MAX_CREATE_LENGTH == 250
    assert loaded.CLOSE_TOLERANCE == 0.001
    assert loaded.LOG_LEVEL == "DEBUG"


def test_negative_cap_is_rejected(clean_env):
    clean_env.setenv("FLOWKIT_MAX_CREATE_LENGTH", "-1")
    with pytest.raises(ValidationError):
        Settings.load()


def test_non_numeric_tolerance_is_rejected(clean_env):
    clean_env.setenv("FLOWKIT_CLOSE_TOLERANCE", "tiny")
    with pytest.raises(ValidationError):
        Settings.load()


def test_module_settings_instance():
    assert isinstance(settings, Settings)


def test_unknown_log_level_is_rejected(clean_env):
    clean_env.setenv("LOG_LEVEL", "verbose")
    with pytest.raises(ValidationError):
        Settings.load()


@pytest.mark.parametrize("level", ["debug", "Warning", "CRITICAL"])
def test_log_level_is_case_insensitive(clean_env, level):
    clean_env.setenv("LOG_LEVEL", level)
    assert Settings.load().LOG_LEVEL == level.upper()
