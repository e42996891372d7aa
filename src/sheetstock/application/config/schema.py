"""Pydantic models for the sheetstock configuration file.

Example configuration::

    {
      "schema_version": "1.0",
      "store": {"path": "inventory.json"},
      "cutting": {"default_policy": "proportional_shrink"}
    }
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

from sheetstock.domain.value_objects import RemnantPolicy

# Version 1.0: store path and default remnant policy
SUPPORTED_VERSIONS: frozenset[str] = frozenset({"1.0"})


class StoreConfig(BaseModel):
    """Where the inventory is persisted."""

    model_config = ConfigDict(extra="forbid")

    path: Path = Field(
        default=Path("inventory.json"), description="Path of the JSON inventory file"
    )


class CuttingConfig(BaseModel):
    """Defaults for cut commits."""

    model_config = ConfigDict(extra="forbid")

    default_policy: RemnantPolicy = Field(
        default=RemnantPolicy.FULL_FOOTPRINT,
        description="Leftover policy used when a commit does not name one",
    )


class SheetstockConfiguration(BaseModel):
    """Root configuration model."""

    model_config = ConfigDict(extra="forbid")

    schema_version: str = Field(default="1.0")
    store: StoreConfig = Field(default_factory=StoreConfig)
    cutting: CuttingConfig = Field(default_factory=CuttingConfig)

    @field_validator("schema_version")
    @classmethod
    def validate_schema_version(cls, v: str) -> str:
        if v not in SUPPORTED_VERSIONS:
            supported = ", ".join(sorted(SUPPORTED_VERSIONS))
            raise ValueError(
                f"Unsupported schema version {v!r}. Supported versions: {supported}"
            )
        return v
