"""Configuration Pydantic models — pure schema, no infrastructure defaults."""

from __future__ import annotations

import hashlib

from pydantic import BaseModel, Field, field_validator

from office_template_sync.l1_entities.sync_result import SyncStrategyKind


class SyncConfig(BaseModel):
    folder: str
    download_url: str
    strategy: SyncStrategyKind
    hash_algorithm: str
    templates: list[str] = Field(default_factory=list)

    @field_validator('hash_algorithm')
    @classmethod
    def _validate_hash_algorithm(cls, value: str) -> str:
        name = value.lower()
        if name not in hashlib.algorithms_available or name.startswith('shake_'):  # shake digests need a length
            raise ValueError(f'Unknown hash algorithm: {value}')
        return name


class AppConfig(BaseModel):
    sync: SyncConfig
    directories: dict[str, str] = Field(default_factory=dict)  # application kind value → base templates dir
