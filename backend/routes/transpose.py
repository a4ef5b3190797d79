import logging
from typing import List, Literal, Optional, Union

from fastapi import APIRouter, HTTPException

from config import settings
from schemas.keys import (
    IntervalResponse,
    KeyInfoResponse,
    KeyStepRequest,
    KeyStepResponse,
    ScaleResponse,
)
from schemas.transpose import (
    ChordTransposeRequest,
    KeyChangeRequest,
    KeyChangeResponse,
    Notation,
    NoteTransposeRequest,
    NotesResponse,
    ProgressionTransposeRequest,
    TransposeResponse,
)
from services.keys import (
    interval,
    is_minor_key,
    key_root,
    major_scale,
    minor_scale,
    parallel_key,
    preferred_notation,
    relative_key,
    signed_interval,
    step_key,
    transpose_to_key,
)
from services.pitch import is_note, notes_for
from services.transposition import (
    parse_progression,
    transpose_chord,
    transpose_note,
    transpose_progression,
)

router = APIRouter()
logger = logging.getLogger(__name__)


def _validate_key(value: str, field: str) -> None:
    if not is_note(key_root(value)):
        logger.warning("Rejected %s=%r", field, value)
        raise HTTPException(status_code=400, detail=f"Invalid {field}: {value!r}")


def _validate_progression_length(progression: Union[str, List[str]]) -> None:
    count = len(parse_progression(progression).chords)
    if count > settings.max_progression_chords:
        logger.warning("Rejected progression with %d chords", count)
        raise HTTPException(
            status_code=400,
            detail=f"Progression has {count} chords; the limit is {settings.max_progression_chords}",
        )


@router.get("/notes")
def list_notes(notation: Optional[Notation] = None) -> dict:
    notation = notation or settings.default_notation
    return NotesResponse(notation=notation, notes=list(notes_for(notation))).model_dump()


@router.post("/transpose/note")
def transpose_single_note(req: NoteTransposeRequest) -> dict:
    notation = req.notation or settings.default_notation
    return TransposeResponse(
        input=req.note,
        semitones=req.semitones,
        notation=notation,
        result=transpose_note(req.note, req.semitones, notation),
    ).model_dump()


@router.post("/transpose/chord")
def transpose_single_chord(req: ChordTransposeRequest) -> dict:
    notation = req.notation or settings.default_notation
    return TransposeResponse(
        input=req.chord,
        semitones=req.semitones,
        notation=notation,
        result=transpose_chord(req.chord, req.semitones, notation),
    ).model_dump()


@router.post("/transpose/progression")
def transpose_chord_progression(req: ProgressionTransposeRequest) -> dict:
    _validate_progression_length(req.progression)
    notation = req.notation or settings.default_notation

    result = transpose_progression(req.progression, req.semitones, notation)
    logger.info("Transposed progression by %d semitones (%s)", req.semitones, notation)
    return TransposeResponse(
        input=req.progression,
        semitones=req.semitones,
        notation=notation,
        result=result,
    ).model_dump()


@router.post("/transpose/to-key")
def change_key(req: KeyChangeRequest) -> dict:
    _validate_key(req.from_key, "from_key")
    _validate_key(req.to_key, "to_key")
    _validate_progression_length(req.progression)

    result = transpose_to_key(req.progression, req.from_key, req.to_key)
    logger.info("Moved progression from %s to %s", req.from_key, req.to_key)
    return KeyChangeResponse(
        input=req.progression,
        from_key=req.from_key,
        to_key=req.to_key,
        interval_semitones=interval(req.from_key, req.to_key),
        notation=preferred_notation(req.to_key),
        result=result,
    ).model_dump()


@router.get("/interval")
def get_interval(from_key: str, to_key: str) -> dict:
    _validate_key(from_key, "from_key")
    _validate_key(to_key, "to_key")
    return IntervalResponse(
        from_key=from_key,
        to_key=to_key,
        interval_semitones=interval(from_key, to_key),
        signed_semitones=signed_interval(from_key, to_key),
    ).model_dump()


@router.get("/keys")
def get_key_info(key: str) -> dict:
    _validate_key(key, "key")
    root = key_root(key)
    minor = is_minor_key(key)
    return KeyInfoResponse(
        key=key,
        root=root,
        is_minor=minor,
        preferred_notation=preferred_notation(key),
        relative_key=relative_key(key),
        parallel_key=parallel_key(key),
        scale=minor_scale(root) if minor else major_scale(root),
    ).model_dump()


@router.get("/keys/scale")
def get_scale(
    root: str,
    mode: Literal["major", "minor"] = "major",
    notation: Optional[Notation] = None,
) -> dict:
    _validate_key(root, "root")
    root = key_root(root)
    if mode == "minor":
        notation = notation or preferred_notation(root + "m")
        notes = minor_scale(root, notation)
    else:
        notation = notation or preferred_notation(root)
        notes = major_scale(root, notation)
    return ScaleResponse(root=root, mode=mode, notation=notation, notes=notes).model_dump()


@router.post("/keys/step")
def step_key_root(req: KeyStepRequest) -> dict:
    _validate_key(req.key, "key")
    notation = req.notation or preferred_notation(req.key)
    return KeyStepResponse(
        key=req.key,
        steps=req.steps,
        notation=notation,
        result=step_key(req.key, req.steps, notation),
    ).model_dump()
