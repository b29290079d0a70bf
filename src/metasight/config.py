from dotenv import load_dotenv
from dataclasses import dataclass
from pathlib import Path
import json
import os

from metasight.constants import (
    DEFAULT_PROXY_URL,
    DEFAULT_TIMEOUT_SECONDS,
    DEFAULT_USER_AGENT,
)

load_dotenv()  # Loads variables from .env file


class Settings:
    """
    Manages application settings loaded from environment variables.
    """
    PROXY_URL = os.getenv("METASIGHT_PROXY_URL", DEFAULT_PROXY_URL)
    TIMEOUT = int(os.getenv("METASIGHT_TIMEOUT", str(DEFAULT_TIMEOUT_SECONDS)))
    USER_AGENT = os.getenv("METASIGHT_USER_AGENT", DEFAULT_USER_AGENT)
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")


settings = Settings()


@dataclass
class Config:
    """Configuration for MetaSight."""
    proxy_url: str = DEFAULT_PROXY_URL
    user_agent: str = DEFAULT_USER_AGENT
    timeout: int = DEFAULT_TIMEOUT_SECONDS

    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration from environment variables.

        Returns:
            Config: Configuration instance with values from environment
        """
        return cls(
            proxy_url=os.getenv("METASIGHT_PROXY_URL", DEFAULT_PROXY_URL),
            user_agent=os.getenv("METASIGHT_USER_AGENT", DEFAULT_USER_AGENT),
            timeout=int(os.getenv("METASIGHT_TIMEOUT", str(DEFAULT_TIMEOUT_SECONDS))),
        )


@dataclass
class AnalysisThresholds:
    """Configurable bounds for the report's metric cards."""

    # Title length (exclusive bounds)
    title_min: int = 30
    title_max: int = 60

    # Meta description length (exclusive bounds)
    description_min: int = 120
    description_max: int = 160

    @classmethod
    def from_env(cls) -> "AnalysisThresholds":
        """Load thresholds from environment variables.

        Environment variables should be prefixed with SEO_THRESHOLD_
        e.g., SEO_THRESHOLD_TITLE_MAX=70

        Returns:
            AnalysisThresholds with values from environment
        """
        thresholds = cls()
        prefix = "SEO_THRESHOLD_"

        for field_name in thresholds.__dataclass_fields__:
            env_key = f"{prefix}{field_name.upper()}"
            env_value = os.getenv(env_key)

            if env_value is not None:
                try:
                    setattr(thresholds, field_name, int(env_value))
                except ValueError:
                    pass  # Keep default if conversion fails

        return thresholds

    @classmethod
    def from_file(cls, path: str) -> "AnalysisThresholds":
        """Load thresholds from a JSON file.

        Values may be numbers or numeric strings; anything else keeps the
        default, like from_env(). A missing file gives the defaults.
        """
        thresholds = cls()
        file_path = Path(path)
        if not file_path.exists():
            return thresholds

        data = json.loads(file_path.read_text(encoding="utf-8"))
        values = data.get("thresholds", data)

        for field_name in thresholds.__dataclass_fields__:
            if field_name not in values:
                continue
            try:
                setattr(thresholds, field_name, int(values[field_name]))
            except (TypeError, ValueError):
                pass  # Keep default if conversion fails

        return thresholds

    def to_dict(self) -> dict:
        """Convert thresholds to dictionary.

        Returns:
            Dictionary of all threshold values
        """
        return {
            field_name: getattr(self, field_name)
            for field_name in self.__dataclass_fields__
        }


# Global default thresholds instance
default_thresholds = AnalysisThresholds()
