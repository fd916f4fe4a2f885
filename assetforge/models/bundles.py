"""Bundle definition models, loaded once per invocation and never mutated."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator


class BundleSpec(BaseModel):
    """A named, ordered group of file patterns.

    Patterns are expanded in the order given. A file matched by two
    patterns is included twice; nothing is deduplicated.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str = Field(min_length=1)
    patterns: list[str] = Field(min_length=1)

    @field_validator("name")
    @classmethod
    def _name_is_filename_safe(cls, value: str) -> str:
        if value.strip() != value or "/" in value or "\\" in value:
            raise ValueError("bundle name must not contain path separators or surrounding whitespace")
        if value in {".", ".."}:
            raise ValueError("bundle name must not be '.' or '..'")
        return value

    @field_validator("patterns")
    @classmethod
    def _patterns_not_blank(cls, value: list[str]) -> list[str]:
        if any(not p.strip() for p in value):
            raise ValueError("patterns must be non-empty strings")
        return value


class BundleConfig(BaseModel):
    """Project-level bundle configuration.

    Loaded from ``assetforge.toml`` or ``pyproject.toml`` [tool.assetforge].
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    bundles: list[BundleSpec] = []
    output_dir: Path | None = None

    @field_validator("bundles")
    @classmethod
    def _names_unique(cls, value: list[BundleSpec]) -> list[BundleSpec]:
        seen: set[str] = set()
        for spec in value:
            if spec.name in seen:
                raise ValueError(f"duplicate bundle name {spec.name!r}")
            seen.add(spec.name)
        return value

    def get(self, name: str) -> BundleSpec:
        for spec in self.bundles:
            if spec.name == name:
                return spec
        raise KeyError(name)
