"""
Process-wide configuration management.

Settings are loaded from multiple sources with a clear priority order:

    1. Environment variables (highest priority) - for containerized deployments
    2. Config file (config/linguist.ini) - for static deployments
    3. Built-in defaults (lowest priority) - the reference behaviour

Configuration is loaded once at module import time and cached. The
LinguistConfig dataclass provides typed access to all settings. The
distortion layer freezes the ``[distortion]`` section into a
``DistortionConfig`` the first time it is needed.

Usage:
    from linguist.config import config

    print(config.distortion.min_proficiency)
    print(config.languages.default_language)

Environment Variable Mapping:
    LINGUIST_MIN_PROFICIENCY      -> distortion.min_proficiency
    LINGUIST_PROFICIENCY_PENALTY  -> distortion.proficiency_penalty
    LINGUIST_PENALTY_DIRECTION    -> distortion.penalty_direction
    LINGUIST_CLAMP_SKILL          -> distortion.clamp_skill
    LINGUIST_DEFAULT_LANGUAGE     -> languages.default_language
    LINGUIST_ROSTER_PATH          -> languages.roster_path
    LINGUIST_LOG_LEVEL            -> logging.level
    LINGUIST_LOG_FORMAT           -> logging.format
"""

import configparser
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Literal

from linguist.distortion.config import parse_flag

logger = logging.getLogger(__name__)

# =============================================================================
# PATH CONFIGURATION
# =============================================================================

# Project root directory (contains src/, config/, data/)
PROJECT_ROOT = Path(__file__).parent.parent.parent

# Config file paths
CONFIG_DIR = PROJECT_ROOT / "config"
CONFIG_FILE = CONFIG_DIR / "linguist.ini"
CONFIG_EXAMPLE = CONFIG_DIR / "linguist.example.ini"


# =============================================================================
# CONFIGURATION DATACLASSES
# =============================================================================


@dataclass
class DistortionSettings:
    """Comprehension threshold and penalty."""

    min_proficiency: int = 70
    proficiency_penalty: int = 10
    penalty_direction: Literal["add", "subtract"] = "add"
    clamp_skill: bool = True


@dataclass
class LanguageSettings:
    """Speaker defaults and demo roster location."""

    default_language: str = "english"
    roster_path: str = "data/roster.yaml"

    @property
    def absolute_roster_path(self) -> Path:
        """Get absolute path to the roster file."""
        p = Path(self.roster_path)
        if p.is_absolute():
            return p
        return PROJECT_ROOT / p


@dataclass
class LoggingSettings:
    """Logging configuration."""

    level: str = "WARNING"
    format: Literal["simple", "detailed", "json"] = "simple"


@dataclass
class LinguistConfig:
    """
    Complete configuration.

    Aggregates all settings sections. Access via the module-level `config`
    singleton.
    """

    distortion: DistortionSettings = field(default_factory=DistortionSettings)
    languages: LanguageSettings = field(default_factory=LanguageSettings)
    logging: LoggingSettings = field(default_factory=LoggingSettings)


# =============================================================================
# CONFIGURATION LOADING
# =============================================================================


def _parse_bool(value: str) -> bool:
    """Parse a string value to boolean."""
    return parse_flag(value)


def _parse_direction(value: str) -> str | None:
    """Normalise a penalty direction; None if unrecognised."""
    val = value.strip().lower()
    if val in ("add", "subtract"):
        return val
    logger.warning("Ignoring unknown penalty_direction %r; keeping the previous value.", value)
    return None


def _load_from_ini(parser: configparser.ConfigParser, cfg: LinguistConfig) -> None:
    """Load configuration from parsed INI file into LinguistConfig."""
    # Distortion section
    if parser.has_section("distortion"):
        if parser.has_option("distortion", "min_proficiency"):
            cfg.distortion.min_proficiency = parser.getint("distortion", "min_proficiency")
        if parser.has_option("distortion", "proficiency_penalty"):
            cfg.distortion.proficiency_penalty = parser.getint(
                "distortion", "proficiency_penalty"
            )
        if parser.has_option("distortion", "penalty_direction"):
            direction = _parse_direction(parser.get("distortion", "penalty_direction"))
            if direction:
                cfg.distortion.penalty_direction = direction  # type: ignore[assignment]
        if parser.has_option("distortion", "clamp_skill"):
            cfg.distortion.clamp_skill = _parse_bool(parser.get("distortion", "clamp_skill"))

    # Languages section
    if parser.has_section("languages"):
        if parser.has_option("languages", "default_language"):
            cfg.languages.default_language = parser.get("languages", "default_language")
        if parser.has_option("languages", "roster_path"):
            cfg.languages.roster_path = parser.get("languages", "roster_path")

    # Logging section
    if parser.has_section("logging"):
        if parser.has_option("logging", "level"):
            cfg.logging.level = parser.get("logging", "level").upper()
        if parser.has_option("logging", "format"):
            val = parser.get("logging", "format").lower()
            if val in ("simple", "detailed", "json"):
                cfg.logging.format = val  # type: ignore[assignment]


def _apply_env_overrides(cfg: LinguistConfig) -> None:
    """Apply environment variable overrides to configuration."""
    # Distortion settings
    if env_min := os.getenv("LINGUIST_MIN_PROFICIENCY"):
        cfg.distortion.min_proficiency = int(env_min)
    if env_penalty := os.getenv("LINGUIST_PROFICIENCY_PENALTY"):
        cfg.distortion.proficiency_penalty = int(env_penalty)
    if env_direction := os.getenv("LINGUIST_PENALTY_DIRECTION"):
        direction = _parse_direction(env_direction)
        if direction:
            cfg.distortion.penalty_direction = direction  # type: ignore[assignment]
    if env_clamp := os.getenv("LINGUIST_CLAMP_SKILL"):
        cfg.distortion.clamp_skill = _parse_bool(env_clamp)

    # Language settings
    if env_language := os.getenv("LINGUIST_DEFAULT_LANGUAGE"):
        cfg.languages.default_language = env_language
    if env_roster := os.getenv("LINGUIST_ROSTER_PATH"):
        cfg.languages.roster_path = env_roster

    # Logging settings
    if env_log := os.getenv("LINGUIST_LOG_LEVEL"):
        cfg.logging.level = env_log.upper()
    if env_format := os.getenv("LINGUIST_LOG_FORMAT"):
        val = env_format.lower()
        if val in ("simple", "detailed", "json"):
            cfg.logging.format = val  # type: ignore[assignment]


def load_config() -> LinguistConfig:
    """
    Load configuration from all sources with proper priority.

    Priority (highest wins):
        1. Environment variables
        2. config/linguist.ini
        3. config/linguist.example.ini (fallback for development)
        4. Built-in defaults

    Returns:
        LinguistConfig: Fully populated configuration object.
    """
    cfg = LinguistConfig()

    # Determine which config file to use
    config_file = None
    if CONFIG_FILE.exists():
        config_file = CONFIG_FILE
    elif CONFIG_EXAMPLE.exists():
        config_file = CONFIG_EXAMPLE

    if config_file:
        parser = configparser.ConfigParser()
        parser.read(config_file)
        _load_from_ini(parser, cfg)

    _apply_env_overrides(cfg)

    return cfg


def reload_config() -> "LinguistConfig":
    """
    Reload configuration from disk and environment.

    This updates the module-level `config` singleton and drops the cached
    default pipeline so the next module-level compose/interpret call picks
    up the new distortion settings.

    Returns:
        LinguistConfig: The newly loaded configuration.
    """
    global config
    config = load_config()

    from linguist.distortion.service import reset_default_pipeline

    reset_default_pipeline()
    return config


# =============================================================================
# MODULE-LEVEL SINGLETON
# =============================================================================

# Load configuration once at module import time
config = load_config()


# =============================================================================
# UTILITY FUNCTIONS
# =============================================================================


def get_config_status() -> dict:
    """
    Get configuration status for diagnostics.

    Returns a dictionary with configuration source information.
    """
    return {
        "config_file_exists": CONFIG_FILE.exists(),
        "config_file_path": str(CONFIG_FILE),
        "using_example": not CONFIG_FILE.exists() and CONFIG_EXAMPLE.exists(),
        "min_proficiency": config.distortion.min_proficiency,
        "proficiency_penalty": config.distortion.proficiency_penalty,
        "penalty_direction": config.distortion.penalty_direction,
        "default_language": config.languages.default_language,
    }


def print_config_summary() -> None:
    """Print a summary of current configuration to stdout."""
    status = get_config_status()
    print("\n" + "=" * 60)
    print("LINGUIST CONFIGURATION")
    print("=" * 60)
    print(f"Config file: {status['config_file_path']}")
    print(f"File exists: {status['config_file_exists']}")
    if status["using_example"]:
        print("NOTE: Using example config (copy to linguist.ini to customise)")
    print("-" * 60)
    print(f"Min proficiency:   {config.distortion.min_proficiency}")
    print(f"Penalty:           {config.distortion.proficiency_penalty}")
    print(f"Penalty direction: {config.distortion.penalty_direction}")
    print(f"Clamp skill:       {config.distortion.clamp_skill}")
    print(f"Default language:  {config.languages.default_language}")
    print(f"Roster:            {config.languages.absolute_roster_path}")
    print(f"Log level:         {config.logging.level} ({config.logging.format})")
    print("=" * 60 + "\n")
