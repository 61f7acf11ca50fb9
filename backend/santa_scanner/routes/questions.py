from __future__ import annotations
from fastapi import APIRouter, Response
from santa_scanner.data.questions import QUESTIONS
from santa_scanner.schemas.question import Question

router = APIRouter(prefix="/api", tags=["questions"])

@router.get("/questions", response_model=list[Question])
async def list_questions(response: Response):
    response.headers["Cache-Control"] = "public, max-age=3600"
    return QUESTIONS
