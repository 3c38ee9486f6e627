"""
Settings for the tonpayload command line.

Values come from the process environment, optionally seeded from
~/.tonpayload/.env. Real environment variables win over the file.

Variables:
- TONPAYLOAD_TESTNET:     default test-only flag for friendly addresses
- TONPAYLOAD_URL_SAFE:    default URL-safe flag for friendly addresses
- TONPAYLOAD_BOUNCEABLE:  default bounceable flag for friendly addresses
- TONPAYLOAD_FORWARD_TON: default forward TON amount for payloads
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from .errors import ConfigurationError, TonPayloadError
from .transfer.coins import to_nano

# Default config directory
TONPAYLOAD_DIR = Path.home() / ".tonpayload"
TONPAYLOAD_ENV = TONPAYLOAD_DIR / ".env"

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


def _env_flag(name: str, default: bool) -> bool:
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    value = raw.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise ConfigurationError(f"{name} must be a boolean, got {raw!r}", {"variable": name})


@dataclass(frozen=True)
class Settings:
    testnet: bool = False
    url_safe: bool = True
    bounceable: bool = True
    forward_ton_amount: str = "0"

    @classmethod
    def from_env(cls, env_path: Optional[Path] = None) -> "Settings":
        """
        Load settings from the environment.

        Args:
            env_path: Path to .env file (default: ~/.tonpayload/.env)

        Raises:
            ConfigurationError: If a variable has an invalid value
        """
        env_path = env_path or TONPAYLOAD_ENV
        if env_path.exists():
            load_dotenv(env_path, override=False)

        forward = os.environ.get("TONPAYLOAD_FORWARD_TON", cls.forward_ton_amount).strip() or "0"
        try:
            to_nano(forward)
        except TonPayloadError as exc:
            raise ConfigurationError(
                f"TONPAYLOAD_FORWARD_TON is not a valid TON amount: {forward!r}",
                {"variable": "TONPAYLOAD_FORWARD_TON"},
            ) from exc

        return cls(
            testnet=_env_flag("TONPAYLOAD_TESTNET", cls.testnet),
            url_safe=_env_flag("TONPAYLOAD_URL_SAFE", cls.url_safe),
            bounceable=_env_flag("TONPAYLOAD_BOUNCEABLE", cls.bounceable),
            forward_ton_amount=forward,
        )
