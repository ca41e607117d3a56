"""Configuration models for mapkit operations."""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from .types import MergeTarget, UniqueKeyStrategy


class MergeOptions(BaseModel):
    """Options controlling how two mappings are merged."""

    target: MergeTarget = Field(
        default=MergeTarget.KEYS_AND_VALUES,
        description="Whether shared entries combine their keys, their values, or both.",
    )
    omit_unshared: bool = Field(
        default=False,
        description="Drop entries whose key appears in only one of the two mappings.",
    )

    @field_validator("target", mode="before")
    @classmethod
    def _normalize_target(cls, value: object) -> object:
        if isinstance(value, str) and not isinstance(value, MergeTarget):
            return MergeTarget(value)
        return value


class UniqueKeyOptions(BaseModel):
    """Options controlling unique key synthesis."""

    strategy: UniqueKeyStrategy = Field(
        default=UniqueKeyStrategy.INTEGER_SUFFIX,
        description="How a taken key is modified until it no longer collides.",
    )

    @field_validator("strategy", mode="before")
    @classmethod
    def _normalize_strategy(cls, value: object) -> object:
        if isinstance(value, str) and not isinstance(value, UniqueKeyStrategy):
            return UniqueKeyStrategy(value)
        return value


class MapkitConfig(BaseModel):
    """Top-level defaults used by :class:`mapkit.toolkit.MapToolkit`."""

    merge: MergeOptions = Field(default_factory=MergeOptions)
    unique_key: UniqueKeyOptions = Field(default_factory=UniqueKeyOptions)
    strip_leading_only: bool = Field(
        default=False,
        description="Strip only a leading prefix occurrence instead of every occurrence.",
    )


__all__ = ["MapkitConfig", "MergeOptions", "UniqueKeyOptions"]
