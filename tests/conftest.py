"""Shared fixtures: isolate tests from the user's config file and env."""

import pytest

from typology import config as config_module
from typology.cli.commands import config_cmd


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Point the config file at a temp dir and clear cached config."""
    config_dir = tmp_path / "config"
    config_file = config_dir / "config.json"
    monkeypatch.setattr(config_module, "CONFIG_DIR", config_dir)
    monkeypatch.setattr(config_module, "CONFIG_FILE", config_file)
    monkeypatch.setattr(config_cmd, "CONFIG_FILE", config_file)
    for var in (
        "TYPOLOGY_RESOLUTION_MODE",
        "TYPOLOGY_CLI_MODE",
        "TYPOLOGY_CLI_ATTRIBUTES",
    ):
        monkeypatch.delenv(var, raising=False)
    config_module.reset_config()
    yield config_file
    config_module.reset_config()
