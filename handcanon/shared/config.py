"""
Configuration schema for canonicalization.

Defaults are defined as Pydantic field defaults. YAML files provide overrides only.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from handcanon.game.cards import Street
from handcanon.shared.dicts import deep_merge_dicts

BOARD_SIZES = tuple(street.board_size for street in Street)


class StrictFrozenModel(BaseModel):
    """Base for all config models: immutable, extra keys forbidden."""

    model_config = ConfigDict(frozen=True, extra="forbid")


class HandShapeConfig(StrictFrozenModel):
    """Which hand shapes are accepted at the canonicalization boundary."""

    private_size: Literal[2] = Field(default=2)
    shared_sizes: tuple[int, ...] = Field(default=BOARD_SIZES)

    @field_validator("shared_sizes")
    @classmethod
    def shared_sizes_are_board_sizes(cls, sizes: tuple[int, ...]) -> tuple[int, ...]:
        if not sizes:
            raise ValueError("shared_sizes must not be empty")
        invalid = sorted(set(sizes) - set(BOARD_SIZES))
        if invalid:
            raise ValueError(f"shared_sizes must be drawn from {list(BOARD_SIZES)}, got {invalid}")
        return tuple(sorted(set(sizes)))


class SystemConfig(StrictFrozenModel):
    """System-level configuration."""

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(default="INFO")


class Config(StrictFrozenModel):
    """
    Complete canonicalization configuration.

    All defaults are defined here in Python. YAML files provide only overrides.
    """

    hand: HandShapeConfig = Field(default_factory=HandShapeConfig)
    system: SystemConfig = Field(default_factory=SystemConfig)

    def to_dict(self) -> dict[str, Any]:
        """Serialize config to a plain dict."""
        return self.model_dump()

    @classmethod
    def default(cls) -> "Config":
        """Return a Config populated with all defaults."""
        return cls()

    def merge(self, overrides: dict[str, Any]) -> "Config":
        """Return a new Config with the provided overrides merged in."""
        merged = deep_merge_dicts(self.model_dump(), overrides)
        return Config.model_validate(merged)

    @classmethod
    def from_dict(cls, config_dict: dict[str, Any]) -> "Config":
        """Create Config from a dict merged over defaults."""
        merged = deep_merge_dicts(cls().model_dump(), config_dict)
        return cls.model_validate(merged)
