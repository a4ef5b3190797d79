import re
from types import MappingProxyType
from typing import Literal, Tuple

Notation = Literal["sharp", "flat"]

# Chromatic scale from C, index == pitch class
NOTES_SHARP: Tuple[str, ...] = (
    "C", "C#", "D", "D#", "E", "F",
    "F#", "G", "G#", "A", "A#", "B",
)
NOTES_FLAT: Tuple[str, ...] = (
    "C", "Db", "D", "Eb", "E", "F",
    "Gb", "G", "Ab", "A", "Bb", "B",
)

ENHARMONIC_TO_SHARP = MappingProxyType({
    "Db": "C#",
    "Eb": "D#",
    "Gb": "F#",
    "Ab": "G#",
    "Bb": "A#",
    "Cb": "B",
    "Fb": "E",
    "B#": "C",
    "E#": "F",
})

ENHARMONIC_TO_FLAT = MappingProxyType({
    "C#": "Db",
    "D#": "Eb",
    "F#": "Gb",
    "G#": "Ab",
    "A#": "Bb",
    "B#": "C",
    "E#": "F",
    "Cb": "B",
    "Fb": "E",
})

# Root is a capital letter optionally followed by # or b
NOTE_RE = re.compile(r"^([A-G][#b]?)")


def leading_note(text: str) -> str | None:
    """Return the note token at the start of ``text`` ('Bbm7' -> 'Bb')."""
    m = NOTE_RE.match(text)
    return m.group(1) if m else None


def is_note(text: str) -> bool:
    return leading_note(text) == text


def note_index(note: str) -> int:
    """Return the pitch class (0-11) of the note at the start of ``note``.

    Anything after the note token is ignored, so keys and chord symbols
    resolve to their root. Returns -1 if no note token is found.
    """
    root = leading_note(note)
    if root is None:
        return -1
    return NOTES_SHARP.index(ENHARMONIC_TO_SHARP.get(root, root))


def _respell(note: str, table) -> str:
    root = leading_note(note)
    if root is None:
        return note
    return table.get(root, root) + note[len(root):]


def normalize_to_sharp(note: str) -> str:
    """Respell the leading note with sharps, keeping any suffix ('Bbm' -> 'A#m')."""
    return _respell(note, ENHARMONIC_TO_SHARP)


def normalize_to_flat(note: str) -> str:
    """Respell the leading note with flats, keeping any suffix ('C#7' -> 'Db7')."""
    return _respell(note, ENHARMONIC_TO_FLAT)


def notes_for(notation: str) -> Tuple[str, ...]:
    return NOTES_FLAT if notation == "flat" else NOTES_SHARP
