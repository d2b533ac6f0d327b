"""Pydantic configuration schema for CLI YAML input."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, Field, ValidationError

IdPolicy = Literal["max_plus_one", "monotonic"]


class StoreConfig(BaseModel):
    seed: Literal["default", "empty"] = "default"
    id_policy: IdPolicy = "max_plus_one"


class MatchSettings(BaseModel):
    limit: int = Field(default=3, ge=0)
    seed: int | None = None


class AppConfig(BaseModel):
    store: StoreConfig = Field(default_factory=StoreConfig)
    match: MatchSettings = Field(default_factory=MatchSettings)

    def to_settings(self) -> dict[str, Any]:
        settings: dict[str, Any] = {}
        store_settings = self.store.model_dump(exclude_defaults=True)
        if store_settings:
            settings["store"] = store_settings
        match_settings = self.match.model_dump(exclude_defaults=True)
        if match_settings:
            settings["match"] = match_settings
        return settings


def load_config(raw: Any) -> AppConfig:
    if not isinstance(raw, dict):
        raise ValidationError.from_exception_data(
            "AppConfig",
            [{"type": "dict_type", "loc": ("config",), "input": raw}],
        )
    return AppConfig.model_validate(raw)
