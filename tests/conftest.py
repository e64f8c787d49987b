"""Shared test fixtures for scriptkit tests."""
import pytest

from scriptkit.core.config import ENV_VARS, reset_config


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Keep the user's config file and SCRIPTKIT_* variables out of tests."""
    for env_var in ENV_VARS.values():
        monkeypatch.delenv(env_var, raising=False)
    monkeypatch.setenv("SCRIPTKIT_CONFIG", str(tmp_path / "no-config.yml"))
    reset_config()
    yield
    reset_config()
