from typing import List, Optional, Union

from pydantic import BaseModel

from services.pitch import Notation


class NoteTransposeRequest(BaseModel):
    note: str
    semitones: int
    notation: Optional[Notation] = None


class ChordTransposeRequest(BaseModel):
    chord: str
    semitones: int
    notation: Optional[Notation] = None


class ProgressionTransposeRequest(BaseModel):
    progression: Union[str, List[str]]
    semitones: int
    notation: Optional[Notation] = None


class KeyChangeRequest(BaseModel):
    progression: Union[str, List[str]]
    from_key: str
    to_key: str


class TransposeResponse(BaseModel):
    input: Union[str, List[str]]
    semitones: int
    notation: Notation
    result: Union[str, List[str]]


class KeyChangeResponse(BaseModel):
    input: Union[str, List[str]]
    from_key: str
    to_key: str
    interval_semitones: int
    notation: Notation
    result: Union[str, List[str]]


class NotesResponse(BaseModel):
    notation: Notation
    notes: List[str]
