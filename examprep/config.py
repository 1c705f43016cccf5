# =============================================================================
# CONFIGURATION - examprep
# =============================================================================
# Settings read from environment variables (and a local .env file)
# =============================================================================

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import find_dotenv, load_dotenv

from .exceptions import ConfigError
from .models.enums import ExplanationMode

DEFAULT_ASSETS_DIR = "assets"
DEFAULT_HINT_KEYWORD = "hint"
DEFAULT_LOG_LEVEL = "WARNING"

_TRUE_VALUES = {"1", "true", "yes", "on"}
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class StudyConfig:
    """Runtime settings for a study session."""

    assets_dir: Path = Path(DEFAULT_ASSETS_DIR)
    hint_keyword: str = DEFAULT_HINT_KEYWORD
    log_level: str = DEFAULT_LOG_LEVEL
    show_explanation: ExplanationMode = ExplanationMode.INCORRECT
    shuffle_choices: bool = False

    def __post_init__(self) -> None:
        self.assets_dir = Path(self.assets_dir)

        if not self.hint_keyword or not self.hint_keyword.strip():
            raise ConfigError(message="Hint keyword must not be empty")
        self.hint_keyword = self.hint_keyword.strip()

        try:
            self.show_explanation = ExplanationMode(self.show_explanation)
        except ValueError as e:
            allowed = [mode.value for mode in ExplanationMode]
            raise ConfigError(
                message=f"Unknown explanation mode {self.show_explanation!r}, expected one of {allowed}",
                details={"value": self.show_explanation, "allowed": allowed},
            ) from e

        self.log_level = self.log_level.upper()
        if self.log_level not in LOG_LEVELS:
            raise ConfigError(
                message=f"Unknown log level {self.log_level!r}",
                details={"value": self.log_level, "allowed": list(LOG_LEVELS)},
            )

    @classmethod
    def from_env(cls) -> "StudyConfig":
        """Build config from EXAMPREP_* environment variables."""
        return cls(
            assets_dir=Path(os.getenv("EXAMPREP_ASSETS_DIR", DEFAULT_ASSETS_DIR)),
            hint_keyword=os.getenv("EXAMPREP_HINT_KEYWORD", DEFAULT_HINT_KEYWORD),
            log_level=os.getenv("EXAMPREP_LOG_LEVEL", DEFAULT_LOG_LEVEL),
            show_explanation=os.getenv(
                "EXAMPREP_SHOW_EXPLANATION", ExplanationMode.INCORRECT.value
            ),
            shuffle_choices=os.getenv("EXAMPREP_SHUFFLE_CHOICES", "false").lower()
            in _TRUE_VALUES,
        )


_config: Optional[StudyConfig] = None


def get_config() -> StudyConfig:
    """Return the process-wide config, loading .env on first use."""
    global _config
    if _config is None:
        load_dotenv(find_dotenv(usecwd=True))
        _config = StudyConfig.from_env()
    return _config


def reset_config() -> None:
    """Forget the cached config (used by tests)."""
    global _config
    _config = None
