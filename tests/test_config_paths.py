"""Tests for the config_paths module."""

import os
from pathlib import Path
from unittest.mock import patch

from scim_core.config_paths import (
    APP_NAME,
    CONFIG_FILENAME,
    ENV_CONFIG_PATH,
    describe_config_sources,
    get_config_path,
    get_user_config_dir,
    get_user_config_path,
)


def test_user_config_dir_contains_app_name() -> None:
    """Test that the user config directory contains the app name."""
    assert APP_NAME in str(get_user_config_dir())


def test_user_config_path_uses_filename() -> None:
    assert get_user_config_path().name == CONFIG_FILENAME


def test_env_var_takes_precedence(tmp_path: Path) -> None:
    env_file = tmp_path / "env.yml"
    env_file.write_text("endpoints: {}")
    user_dir = tmp_path / "user"
    user_dir.mkdir()
    (user_dir / CONFIG_FILENAME).write_text("endpoints: {}")

    with patch.dict(os.environ, {ENV_CONFIG_PATH: str(env_file)}), patch(
        "scim_core.config_paths.platformdirs.user_config_dir", return_value=str(user_dir)
    ):
        assert get_config_path() == str(env_file)


def test_env_var_ignored_when_missing(tmp_path: Path) -> None:
    user_dir = tmp_path / "user"
    user_dir.mkdir()
    (user_dir / CONFIG_FILENAME).write_text("endpoints: {}")

    with patch.dict(os.environ, {ENV_CONFIG_PATH: str(tmp_path / "nope.yml")}), patch(
        "scim_core.config_paths.platformdirs.user_config_dir", return_value=str(user_dir)
    ):
        assert get_config_path() == str(user_dir / CONFIG_FILENAME)


def test_no_config_found(tmp_path: Path) -> None:
    env = {k: v for k, v in os.environ.items() if k != ENV_CONFIG_PATH}
    with patch.dict(os.environ, env, clear=True), patch(
        "scim_core.config_paths.platformdirs.user_config_dir", return_value=str(tmp_path / "empty")
    ):
        assert get_config_path() is None
        sources = describe_config_sources()

    assert sources["env_var"] == ENV_CONFIG_PATH
    assert sources["env_value"] is None
    assert sources["resolved"] is None
    assert sources["user_path"] == str(tmp_path / "empty" / CONFIG_FILENAME)
