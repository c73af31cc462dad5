"""Runtime configuration models for the text-normalization service."""

from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field


class ProcessingConfig(BaseModel):
    max_lines: int = Field(default=200, ge=1)


class ApiConfig(BaseModel):
    allowed_origins: List[str] = Field(
        default_factory=lambda: ["http://localhost:5173", "http://127.0.0.1:5173"]
    )
    max_body_chars: int = Field(default=200_000, ge=1)


class RuntimeConfig(BaseModel):
    metadata: dict = Field(default_factory=dict)
    processing: ProcessingConfig = Field(default_factory=ProcessingConfig)
    api: ApiConfig = Field(default_factory=ApiConfig)

    @property
    def config_version(self) -> str:
        return str(self.metadata.get("config_version", ""))
