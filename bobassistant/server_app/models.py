from __future__ import annotations

from typing import Any, Dict, List

from pydantic import BaseModel, Field


class DecodeResponse(BaseModel):
    code: int = 200
    status: str = "success"
    sensor: str
    type: str
    msg: Dict[str, Any] = Field(default_factory=dict)


class ErrorResponse(BaseModel):
    error: str


class LogEvent(BaseModel):
    event: str
    level: str
    logger: str = ""
    ts: float
    details: Dict[str, Any] = Field(default_factory=dict)


class LogsResponse(BaseModel):
    events: List[LogEvent] = Field(default_factory=list)
