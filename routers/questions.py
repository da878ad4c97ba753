from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, Request
from fastapi.responses import PlainTextResponse

from deps.store import get_store
from errors import QuestionsError
from pagination import extract_pagination
from schemas.questions import Question
from store import Store

router = APIRouter(tags=["questions"])


@router.get("/questions", response_model=List[Question])
async def list_questions(request: Request, store: Store = Depends(get_store)):
    params = dict(request.query_params)
    if not params:
        return await store.list_all()

    # any query string means pagination; bail before touching the store
    pagination = extract_pagination(params)

    # materialize once so the bounds check and slice see the same snapshot
    qs = await store.list_all()
    if pagination.start > pagination.end or pagination.end > len(qs):
        raise QuestionsError.invalid_range(pagination.start, pagination.end, len(qs))
    return qs[pagination.start : pagination.end]


@router.post("/questions", response_class=PlainTextResponse)
async def add_question(question: Question, store: Store = Depends(get_store)):
    # last writer wins on duplicate ids
    await store.insert(question)
    return "Question added"
