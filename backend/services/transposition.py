import logging
import re
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple, Union

from services.pitch import Notation, note_index, notes_for

logger = logging.getLogger(__name__)

# Chord = root + quality, quality may end with "/<bass note>"
_CHORD_RE = re.compile(r"([A-G][#b]?)(.*)")
_SLASH_BASS_RE = re.compile(r"(.*)/([A-G][#b]?)")
_PROGRESSION_SPLIT_RE = re.compile(r"[\s,]+")

COMMA_SEPARATOR = ", "
SPACE_SEPARATOR = " "


@dataclass(frozen=True)
class ParsedChord:
    root: str
    quality: str
    bass: Optional[str] = None

    def render(self) -> str:
        if self.bass is None:
            return self.root + self.quality
        return f"{self.root}{self.quality}/{self.bass}"


@dataclass(frozen=True)
class ChordList:
    """Progression given as a sequence of chord symbols."""

    chords: Tuple[str, ...]


@dataclass(frozen=True)
class ChordText:
    """Progression given as free text, with the separator it was written with."""

    chords: Tuple[str, ...]
    separator: str


ParsedProgression = Union[ChordList, ChordText]


def transpose_note(note: str, semitones: int, notation: Notation = "sharp") -> str:
    """Transpose a single note by a number of semitones.

    The result is always spelled from the ``notation`` table, so a zero
    shift still converts 'Bb' to 'A#' under sharp notation. Unrecognized
    notes are returned unchanged.
    """
    index = note_index(note)
    if index == -1:
        return note
    return notes_for(notation)[(index + semitones) % 12]


def parse_chord(chord: str) -> Optional[ParsedChord]:
    """Split a chord symbol into root, quality and optional bass note.

    Returns None if the symbol does not start with a note.
    """
    m = _CHORD_RE.fullmatch(chord)
    if not m:
        return None

    root, rest = m.groups()
    slash = _SLASH_BASS_RE.fullmatch(rest)
    if slash:
        quality, bass = slash.groups()
        return ParsedChord(root=root, quality=quality, bass=bass)
    return ParsedChord(root=root, quality=rest)


def transpose_chord(chord: str, semitones: int, notation: Notation = "sharp") -> str:
    """Transpose a chord symbol; quality/extensions are kept byte-for-byte."""
    parsed = parse_chord(chord)
    if parsed is None:
        logger.debug("Leaving unparseable chord as-is: %r", chord)
        return chord

    bass = parsed.bass
    if bass is not None:
        bass = transpose_note(bass, semitones, notation)
    return ParsedChord(
        root=transpose_note(parsed.root, semitones, notation),
        quality=parsed.quality,
        bass=bass,
    ).render()


def parse_progression(progression: Union[str, Sequence[str]]) -> ParsedProgression:
    if isinstance(progression, str):
        chords = tuple(c for c in _PROGRESSION_SPLIT_RE.split(progression) if c)
        separator = COMMA_SEPARATOR if "," in progression else SPACE_SEPARATOR
        return ChordText(chords=chords, separator=separator)
    return ChordList(chords=tuple(progression))


def render_progression(parsed: ParsedProgression) -> Union[str, List[str]]:
    if isinstance(parsed, ChordText):
        return parsed.separator.join(parsed.chords)
    return list(parsed.chords)


def transpose_progression(
    progression: Union[str, Sequence[str]],
    semitones: int,
    notation: Notation = "sharp",
) -> Union[str, List[str]]:
    """Transpose every chord in a progression.

    A list comes back as a list. A string comes back as a string, joined
    with ", " if the input contained a comma and with a space otherwise.
    """
    parsed = parse_progression(progression)
    chords = tuple(transpose_chord(c, semitones, notation) for c in parsed.chords)
    if isinstance(parsed, ChordText):
        return render_progression(ChordText(chords=chords, separator=parsed.separator))
    return render_progression(ChordList(chords=chords))