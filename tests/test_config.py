"""Tests for environment-driven settings."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterator
from unittest.mock import patch

import pytest

from tonpayload.config import Settings
from tonpayload.errors import ConfigurationError


@pytest.fixture()
def clean_env() -> Iterator[None]:
    """Run with no TONPAYLOAD_* variables; restore the environment afterwards."""
    with patch.dict(os.environ):
        for name in list(os.environ):
            if name.startswith("TONPAYLOAD_"):
                del os.environ[name]
        yield


@pytest.fixture()
def missing_env(tmp_path: Path) -> Path:
    return tmp_path / "absent" / ".env"


class TestSettings:
    def test_defaults(self, clean_env: None, missing_env: Path) -> None:
        settings = Settings.from_env(missing_env)
        assert settings == Settings()
        assert settings.url_safe is True
        assert settings.bounceable is True
        assert settings.testnet is False
        assert settings.forward_ton_amount == "0"

    def test_environment_variables(self, clean_env: None, missing_env: Path) -> None:
        os.environ.update(
            {
                "TONPAYLOAD_TESTNET": "yes",
                "TONPAYLOAD_URL_SAFE": "0",
                "TONPAYLOAD_BOUNCEABLE": "False",
                "TONPAYLOAD_FORWARD_TON": "0.05",
            }
        )
        settings = Settings.from_env(missing_env)
        assert settings.testnet is True
        assert settings.url_safe is False
        assert settings.bounceable is False
        assert settings.forward_ton_amount == "0.05"

    def test_env_file(self, clean_env: None, tmp_path: Path) -> None:
        env_file = tmp_path / ".env"
        env_file.write_text("TONPAYLOAD_TESTNET=true\nTONPAYLOAD_FORWARD_TON=0.1\n", encoding="utf-8")
        settings = Settings.from_env(env_file)
        assert settings.testnet is True
        assert settings.forward_ton_amount == "0.1"

    def test_process_env_wins_over_file(self, clean_env: None, tmp_path: Path) -> None:
        env_file = tmp_path / ".env"
        env_file.write_text("TONPAYLOAD_TESTNET=true\n", encoding="utf-8")
        os.environ["TONPAYLOAD_TESTNET"] = "off"
        assert Settings.from_env(env_file).testnet is False

    def test_blank_flag_uses_default(self, clean_env: None, missing_env: Path) -> None:
        os.environ["TONPAYLOAD_BOUNCEABLE"] = "  "
        assert Settings.from_env(missing_env).bounceable is True

    def test_bad_flag(self, clean_env: None, missing_env: Path) -> None:
        os.environ["TONPAYLOAD_URL_SAFE"] = "maybe"
        with pytest.raises(ConfigurationError) as exc_info:
            Settings.from_env(missing_env)
        assert exc_info.value.exit_code == 6
        assert exc_info.value.details["variable"] == "TONPAYLOAD_URL_SAFE"

    @pytest.mark.parametrize("value", ["-1", "abc", "0.0000000001"])
    def test_bad_forward_amount(self, clean_env: None, missing_env: Path, value: str) -> None:
        os.environ["TONPAYLOAD_FORWARD_TON"] = value
        with pytest.raises(ConfigurationError):
            Settings.from_env(missing_env)
