from __future__ import annotations

from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, Field


Variant = Literal["classic", "unique"]


class ColorOut(BaseModel):
    key: str
    name: str


class PaletteResp(BaseModel):
    colors: List[ColorOut]
    codeLength: int
    maxTurns: int


class NewGameReq(BaseModel):
    variant: Variant = "classic"
    seed: Optional[int] = None


class SessionReq(BaseModel):
    sessionId: str


class PickReq(BaseModel):
    sessionId: str
    # Unknown keys are accepted and treated as no selection
    color: str = Field(..., max_length=32)


class GetStateResp(BaseModel):
    state: Dict[str, Any]


class StateEnvelope(BaseModel):
    sessionId: str
    state: Dict[str, Any]


class RevealResp(BaseModel):
    secret: List[ColorOut]
