from __future__ import annotations
from pydantic import BaseModel, Field


class QuestionOption(BaseModel):
    text: str
    naughty_points: int = Field(alias="naughtyPoints")

    model_config = {"populate_by_name": True}


class Question(BaseModel):
    id: int
    text: str
    options: list[QuestionOption]
