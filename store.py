# questions-api/store.py

from __future__ import annotations

import asyncio
import json
import logging
import os
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Any, AsyncIterator, Dict, Iterable, List, Optional

from schemas.questions import Question, QuestionId

logger = logging.getLogger(__name__)

_BASE = Path(__file__).resolve().parent
_DEFAULT_SEED = _BASE / "questions.json"


def seed_path() -> Path:
    return Path(os.getenv("QUESTIONS_FILE") or _DEFAULT_SEED)


class ReadWriteLock:
    """
    Many readers or one writer, on top of asyncio.Condition.

    A waiting writer holds off new readers so it can't be starved.
    """

    def __init__(self) -> None:
        self._cond = asyncio.Condition()
        self._readers = 0
        self._writer = False
        self._writers_waiting = 0

    @asynccontextmanager
    async def read(self) -> AsyncIterator[None]:
        async with self._cond:
            await self._cond.wait_for(lambda: not self._writer and not self._writers_waiting)
            self._readers += 1
        try:
            yield
        finally:
            async with self._cond:
                self._readers -= 1
                if not self._readers:
                    self._cond.notify_all()

    @asynccontextmanager
    async def write(self) -> AsyncIterator[None]:
        async with self._cond:
            self._writers_waiting += 1
            try:
                await self._cond.wait_for(lambda: not self._writer and not self._readers)
            finally:
                self._writers_waiting -= 1
                # wake readers held back by us if we were cancelled while waiting
                self._cond.notify_all()
            self._writer = True
        try:
            yield
        finally:
            async with self._cond:
                self._writer = False
                self._cond.notify_all()


def _iter_seed(data: Any) -> Iterable[Any]:
    # Accept both {"<id>": {...}, ...} and [{...}, ...]
    if isinstance(data, dict):
        return data.values()
    if isinstance(data, list):
        return data
    raise ValueError(f"seed must be a JSON object or array, got {type(data).__name__}")


def load_seed(path: Path) -> Dict[QuestionId, Question]:
    """
    Parse the seed document into an id -> question mapping.

    Nothing is skipped. A missing file, broken JSON or an invalid record
    raises, and the app refuses to start.
    """
    with path.open("r", encoding="utf-8") as f:
        data = json.load(f)

    questions: Dict[QuestionId, Question] = {}
    for raw in _iter_seed(data):
        q = Question.model_validate(raw)
        questions[q.id] = q
    return questions


class Store:
    def __init__(self, questions: Optional[Dict[QuestionId, Question]] = None) -> None:
        self._questions: Dict[QuestionId, Question] = dict(questions or {})
        self._lock = ReadWriteLock()

    @classmethod
    def from_file(cls, path: Optional[Path] = None) -> "Store":
        path = path or seed_path()
        questions = load_seed(path)
        logger.info("loaded %d questions from %s", len(questions), path)
        return cls(questions)

    async def list_all(self) -> List[Question]:
        async with self._lock.read():
            return list(self._questions.values())

    async def insert(self, question: Question) -> None:
        async with self._lock.write():
            replaced = question.id in self._questions
            self._questions[question.id] = question
        logger.info("stored question %s (replaced=%s)", question.id, replaced)

    async def count(self) -> int:
        async with self._lock.read():
            return len(self._questions)
