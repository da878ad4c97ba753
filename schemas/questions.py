# questions-api/schemas/questions.py
from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, RootModel


class QuestionId(RootModel[str]):
    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return self.root


class Question(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: QuestionId
    title: str
    content: str
    tags: Optional[List[str]] = None
