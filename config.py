import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()

DEFAULT_GEMINI_URL = (
    "https://generativelanguage.googleapis.com/v1beta/models/"
    "gemini-2.0-flash:generateContent"
)
DEFAULT_API_URL = "http://localhost:9090/api/email/generate"
DEFAULT_TIMEOUT = 60.0


class ConfigError(Exception):
    """Raised when a required setting is missing from the environment."""


def _float_env(name: str, default: float) -> float:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        raise ConfigError(f"{name} must be a number, got {raw!r}")


@dataclass(frozen=True)
class ProviderConfig:
    """Where and how to reach the Gemini generateContent endpoint."""

    api_url: str
    api_key: str
    timeout: float = DEFAULT_TIMEOUT

    @classmethod
    def from_env(cls) -> "ProviderConfig":
        api_key = os.getenv("GEMINI_API_KEY")
        if not api_key:
            raise ConfigError("GEMINI_API_KEY is not set; cannot call Gemini.")
        return cls(
            api_url=os.getenv("GEMINI_API_URL", DEFAULT_GEMINI_URL),
            api_key=api_key,
            timeout=_float_env("GEMINI_TIMEOUT", DEFAULT_TIMEOUT),
        )


@dataclass(frozen=True)
class ClientConfig:
    api_url: str = DEFAULT_API_URL
    timeout: float = DEFAULT_TIMEOUT

    @classmethod
    def from_env(cls) -> "ClientConfig":
        return cls(
            api_url=os.getenv("EMAIL_WRITER_API_URL", DEFAULT_API_URL),
            timeout=_float_env("EMAIL_WRITER_TIMEOUT", DEFAULT_TIMEOUT),
        )
