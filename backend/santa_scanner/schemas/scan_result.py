from __future__ import annotations
from typing import Literal
from pydantic import BaseModel, ConfigDict, Field, field_validator
from uuid import UUID
from datetime import datetime

Verdict = Literal["NAUGHTY", "NICE"]


class ScanResultCreate(BaseModel):
    name: str = Field(min_length=1, max_length=100)
    verdict: Verdict
    message: str = Field(default="", max_length=1000)
    score: int = Field(ge=0, le=100)
    country: str | None = Field(default=None, pattern="^[A-Za-z]{2}$")

    @field_validator("name")
    @classmethod
    def _strip_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("name must not be blank")
        return v

    @field_validator("country")
    @classmethod
    def _upper_country(cls, v: str | None) -> str | None:
        return v.upper() if v else v


class ScanResultPublic(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str
    verdict: Verdict
    message: str
    score: int
    country: str | None = None
    timestamp: datetime


class LeaderboardMetadata(BaseModel):
    total: int
    timestamp: datetime
    source: Literal["database", "cache"]


class LeaderboardPayload(BaseModel):
    data: list[ScanResultPublic]
    metadata: LeaderboardMetadata
