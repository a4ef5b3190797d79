from typing import List, Literal, Optional

from pydantic import BaseModel

from schemas.transpose import Notation


class IntervalResponse(BaseModel):
    from_key: str
    to_key: str
    interval_semitones: int
    signed_semitones: int


class KeyInfoResponse(BaseModel):
    key: str
    root: str
    is_minor: bool
    preferred_notation: Notation
    relative_key: str
    parallel_key: str
    scale: List[str]


class ScaleResponse(BaseModel):
    root: str
    mode: Literal["major", "minor"]
    notation: Notation
    notes: List[str]


class KeyStepRequest(BaseModel):
    key: str
    steps: int
    notation: Optional[Notation] = None


class KeyStepResponse(BaseModel):
    key: str
    steps: int
    notation: Notation
    result: str
