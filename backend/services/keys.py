import re
from typing import List, Optional, Sequence, Tuple, Union

from services.pitch import Notation, note_index, notes_for
from services.transposition import transpose_note, transpose_progression

# Keys that prefer flat spelling. A static table, not a circle-of-fifths walk.
FLAT_KEYS = frozenset({"F", "Bb", "Eb", "Ab", "Db", "Gb", "Cb"})
FLAT_MINOR_KEYS = frozenset({"Dm", "Gm", "Cm", "Fm", "Bbm", "Ebm", "Abm"})

# Semitone offsets from the tonic
MAJOR_SCALE_STEPS: Tuple[int, ...] = (0, 2, 4, 5, 7, 9, 11)
MINOR_SCALE_STEPS: Tuple[int, ...] = (0, 2, 3, 5, 7, 8, 10)

_KEY_PREFIX_RE = re.compile(r"^[A-G][#b]?m?")
_MINOR_SUFFIX_RE = re.compile(r"m(in)?$")


def interval(from_note: str, to_note: str) -> int:
    """Return the upward distance in semitones (0-11) from one note/key to another.

    Directional: interval('C', 'A') is 9, not -3. Returns 0 if either
    side cannot be parsed.
    """
    from_index = note_index(from_note)
    to_index = note_index(to_note)
    if from_index == -1 or to_index == -1:
        return 0
    return (to_index - from_index) % 12


def signed_interval(from_note: str, to_note: str) -> int:
    """Like interval(), but shifts larger than a tritone are reported downward (-5..6)."""
    semitones = interval(from_note, to_note)
    return semitones - 12 if semitones > 6 else semitones


def preferred_notation(key: str) -> Notation:
    m = _KEY_PREFIX_RE.match(key)
    if not m:
        return "sharp"

    prefix = m.group(0)
    if prefix in FLAT_KEYS or prefix in FLAT_MINOR_KEYS:
        return "flat"
    if "b" in prefix:
        return "flat"
    return "sharp"


def _scale(root: str, steps: Sequence[int], notation: Notation) -> List[str]:
    return [transpose_note(root, step, notation) for step in steps]


def major_scale(root: str, notation: Optional[Notation] = None) -> List[str]:
    return _scale(root, MAJOR_SCALE_STEPS, notation or preferred_notation(root))


def minor_scale(root: str, notation: Optional[Notation] = None) -> List[str]:
    """Natural minor scale; defaults to the spelling preferred for the minor key."""
    return _scale(root, MINOR_SCALE_STEPS, notation or preferred_notation(root + "m"))


def is_minor_key(key: str) -> bool:
    return key.endswith("m") or key.endswith("min")


def key_root(key: str) -> str:
    """Strip a trailing 'm'/'min' from a key ('F#min' -> 'F#')."""
    return _MINOR_SUFFIX_RE.sub("", key)


def relative_key(key: str) -> str:
    """Return the relative major of a minor key, or the relative minor of a major key."""
    root = key_root(key)
    notation = preferred_notation(root)
    if is_minor_key(key):
        return transpose_note(root, 3, notation)
    return transpose_note(root, 9, notation) + "m"


def parallel_key(key: str) -> str:
    root = key_root(key)
    if is_minor_key(key):
        return root
    return root + "m"


def step_key(key: str, steps: int, notation: Optional[Notation] = None) -> str:
    """Move a key up or down by semitones, keeping it major or minor.

    Unrecognized keys are returned unchanged.
    """
    root = key_root(key)
    index = note_index(root)
    if index == -1:
        return key

    new_root = notes_for(notation or preferred_notation(key))[(index + steps) % 12]
    return new_root + "m" if is_minor_key(key) else new_root


def transpose_to_key(
    progression: Union[str, Sequence[str]],
    from_key: str,
    to_key: str,
) -> Union[str, List[str]]:
    """Move a progression from one key to another, spelled for the target key."""
    return transpose_progression(
        progression,
        interval(from_key, to_key),
        preferred_notation(to_key),
    )
