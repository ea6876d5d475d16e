"""Configuration management for typology.

Two sections:
- resolver: how rule graphs are evaluated ("eager" or "lazy")
- cli: output mode and the attributes `typology profile` shows

Config resolution order (highest priority first):
1. Programmatic (TypologyConfig constructed in code, set via configure())
2. Environment variables (TYPOLOGY_RESOLUTION_MODE, TYPOLOGY_CLI_MODE, ...)
3. Config file (~/.config/typology/config.json, managed by `typology config`)
4. Hardcoded defaults
"""

import json
import logging
import os
from dataclasses import dataclass, field, asdict
from pathlib import Path
from typing import Any


logger = logging.getLogger(__name__)


# =============================================================================
# Config file location
# =============================================================================

CONFIG_DIR = Path.home() / ".config" / "typology"
CONFIG_FILE = CONFIG_DIR / "config.json"

RESOLUTION_MODES = ("eager", "lazy")
CLI_MODES = ("human", "agent")

DEFAULT_CLI_ATTRIBUTES = [
    "dominant",
    "auxiliary",
    "tertiary",
    "inferior",
    "temperament",
    "ratio",
]


# =============================================================================
# Config dataclasses
# =============================================================================


@dataclass
class ResolverConfig:
    """Rule graph evaluation settings.

    - eager: evaluate every rule on each pass
    - lazy: evaluate only requested attributes and their dependencies
    """

    mode: str = "eager"


@dataclass
class CliConfig:
    """CLI output settings."""

    mode: str = "human"  # "agent" = JSON output, no rich formatting
    attributes: list[str] = field(
        default_factory=lambda: list(DEFAULT_CLI_ATTRIBUTES)
    )


# =============================================================================
# Main config class
# =============================================================================


@dataclass
class TypologyConfig:
    """Top-level typology configuration.

    Examples:
        # Package use: no files needed
        config = TypologyConfig(resolver=ResolverConfig(mode="lazy"))

        # CLI use: loads from ~/.config/typology/config.json
        config = TypologyConfig.load()
    """

    resolver: ResolverConfig = field(default_factory=ResolverConfig)
    cli: CliConfig = field(default_factory=CliConfig)

    @classmethod
    def load(cls) -> "TypologyConfig":
        """Load config from file + env vars.

        Priority: env var values > config.json values > defaults.
        """
        config = cls()

        # Layer 1: Load from config file if it exists
        if CONFIG_FILE.exists():
            try:
                with open(CONFIG_FILE) as f:
                    data = json.load(f)
                if isinstance(data, dict):
                    _apply_dict(config, data)
                else:
                    logger.warning(
                        "Ignoring config %s: expected a JSON object, got %s",
                        CONFIG_FILE,
                        type(data).__name__,
                    )
            except (json.JSONDecodeError, OSError) as exc:
                logger.warning("Failed to load config from %s: %s", CONFIG_FILE, exc)

        # Layer 2: Env var overrides
        if val := os.environ.get("TYPOLOGY_RESOLUTION_MODE"):
            _set_choice(
                config.resolver,
                "mode",
                val,
                RESOLUTION_MODES,
                "TYPOLOGY_RESOLUTION_MODE",
            )
        if val := os.environ.get("TYPOLOGY_CLI_MODE"):
            _set_choice(config.cli, "mode", val, CLI_MODES, "TYPOLOGY_CLI_MODE")
        if val := os.environ.get("TYPOLOGY_CLI_ATTRIBUTES"):
            config.cli.attributes = parse_attribute_list(val)

        return config

    def save(self) -> None:
        """Save config to ~/.config/typology/config.json."""
        CONFIG_DIR.mkdir(parents=True, exist_ok=True)
        with open(CONFIG_FILE, "w") as f:
            json.dump(self.to_dict(), f, indent=2)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dict for display."""
        return {
            "resolver": asdict(self.resolver),
            "cli": asdict(self.cli),
        }


# =============================================================================
# Config dict application
# =============================================================================


def parse_attribute_list(value: str) -> list[str]:
    """Split a comma-separated attribute list, dropping blanks."""
    return [name.strip() for name in value.split(",") if name.strip()]


def _set_choice(
    target: Any, key: str, value: str, choices: tuple[str, ...], source: str
) -> None:
    if value in choices:
        setattr(target, key, value)
    else:
        logger.warning(
            "Invalid %s=%r (expected one of %s), ignoring", source, value, choices
        )


def _apply_dict(config: TypologyConfig, data: dict) -> None:
    """Apply a dict of values onto a TypologyConfig."""
    resolver = data.get("resolver")
    if isinstance(resolver, dict) and "mode" in resolver:
        _set_choice(
            config.resolver, "mode", resolver["mode"], RESOLUTION_MODES, "resolver.mode"
        )
    cli = data.get("cli")
    if isinstance(cli, dict):
        if "mode" in cli:
            _set_choice(config.cli, "mode", cli["mode"], CLI_MODES, "cli.mode")
        attributes = cli.get("attributes")
        if isinstance(attributes, str):
            config.cli.attributes = parse_attribute_list(attributes)
        elif isinstance(attributes, list):
            config.cli.attributes = [str(name) for name in attributes]


# =============================================================================
# Global config singleton
# =============================================================================

_config: TypologyConfig | None = None


def get_config() -> TypologyConfig:
    """Get the global TypologyConfig instance.

    First call loads from file + env vars. Subsequent calls return cached instance.
    Use configure() to replace the global config programmatically.
    """
    global _config
    if _config is None:
        _config = TypologyConfig.load()
    return _config


def configure(config: TypologyConfig) -> None:
    """Set the global TypologyConfig programmatically.

    Use this when typology is used as a package:
        from typology.config import configure, TypologyConfig, ResolverConfig
        configure(TypologyConfig(resolver=ResolverConfig(mode="lazy")))
    """
    global _config
    _config = config


def reset_config() -> None:
    """Reset the global config (forces reload on next get_config())."""
    global _config
    _config = None
