import time
from typing import List
from pydantic import BaseModel, Field


def now_ms() -> int:
    return int(time.time() * 1000)


class ChatRequest(BaseModel):
    message: str


class ChatResponse(BaseModel):
    answer: str
    references: List[str] = []
    timestamp: int = Field(default_factory=now_ms)
