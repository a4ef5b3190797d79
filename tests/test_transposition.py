import pytest

from services.pitch import NOTES_FLAT, NOTES_SHARP, note_index
from services.transposition import (
    ChordList,
    ChordText,
    ParsedChord,
    parse_chord,
    parse_progression,
    render_progression,
    transpose_chord,
    transpose_note,
    transpose_progression,
)

ALL_NOTES = sorted(set(NOTES_SHARP) | set(NOTES_FLAT) | {"Cb", "Fb", "B#", "E#"})


def test_transpose_note_up_and_down():
    assert transpose_note("C", 2) == "D"
    assert transpose_note("C", -1) == "B"
    assert transpose_note("A", 3) == "C"
    assert transpose_note("B", 1, "flat") == "C"
    assert transpose_note("C", 1, "flat") == "Db"
    assert transpose_note("C", -25) == "B"


def test_transpose_note_respells_at_zero():
    assert transpose_note("Bb", 0, "sharp") == "A#"
    assert transpose_note("A#", 0, "flat") == "Bb"


def test_transpose_note_passes_unknown_through():
    assert transpose_note("H", 4) == "H"
    assert transpose_note("", 4) == ""


@pytest.mark.parametrize("note", ALL_NOTES)
@pytest.mark.parametrize("octaves", [-3, -1, 1, 2, 10])
def test_full_octaves_keep_pitch_class(note, octaves):
    assert transpose_note(note, 12 * octaves, "sharp") == transpose_note(note, 0, "sharp")


@pytest.mark.parametrize("note", ALL_NOTES)
@pytest.mark.parametrize("semitones", [-13, -5, 1, 7, 11, 30])
def test_there_and_back_gives_sharp_spelling(note, semitones):
    there = transpose_note(note, semitones, "sharp")
    assert transpose_note(there, -semitones, "sharp") == NOTES_SHARP[note_index(note)]


def test_parse_chord():
    assert parse_chord("Am7") == ParsedChord(root="A", quality="m7")
    assert parse_chord("F#") == ParsedChord(root="F#", quality="")
    assert parse_chord("Bb/D") == ParsedChord(root="Bb", quality="", bass="D")
    assert parse_chord("Cmaj7/G#") == ParsedChord(root="C", quality="maj7", bass="G#")


def test_parse_chord_splits_on_last_slash():
    assert parse_chord("C6/9/E") == ParsedChord(root="C", quality="6/9", bass="E")
    # trailing text after the slash is not a bass note
    assert parse_chord("C6/9") == ParsedChord(root="C", quality="6/9")


@pytest.mark.parametrize("chord", ["??", "", "am7", "/E", "x7"])
def test_parse_chord_no_match(chord):
    assert parse_chord(chord) is None


def test_parsed_chord_render():
    assert ParsedChord(root="D", quality="m7", bass="C").render() == "Dm7/C"
    assert ParsedChord(root="D", quality="sus4").render() == "Dsus4"


def test_transpose_chord_scenarios():
    assert transpose_chord("Am7", 3, "sharp") == "Cm7"
    assert transpose_chord("Bb/D", 2, "sharp") == "C/E"
    assert transpose_chord("F#m7b5", 1, "flat") == "Gm7b5"
    assert transpose_chord("Dm7/C", -2, "flat") == "Cm7/Bb"


@pytest.mark.parametrize("semitones", range(-12, 13))
def test_transpose_chord_keeps_quality(semitones):
    result = transpose_chord("Cmaj7", semitones)
    assert result.endswith("maj7")
    assert result[: -len("maj7")] == transpose_note("C", semitones)


def test_transpose_chord_passes_malformed_through():
    assert transpose_chord("??", 5, "sharp") == "??"
    assert transpose_chord("N.C.", 5) == "N.C."
    assert transpose_chord("", 5) == ""


def test_parse_progression_captures_shape():
    assert parse_progression(["Am", "F"]) == ChordList(chords=("Am", "F"))
    assert parse_progression("Am  F\tC") == ChordText(chords=("Am", "F", "C"), separator=" ")
    assert parse_progression("Am,F , C") == ChordText(chords=("Am", "F", "C"), separator=", ")


def test_render_progression():
    assert render_progression(ChordList(chords=("A", "B"))) == ["A", "B"]
    assert render_progression(ChordText(chords=("A", "B"), separator=", ")) == "A, B"


def test_transpose_progression_space_separated():
    assert transpose_progression("Am F C G", 2, "sharp") == "Bm G D A"


def test_transpose_progression_comma_separated():
    assert transpose_progression("Am, F, C", 2, "sharp") == "Bm, G, D"
    assert transpose_progression("Am,F C", 2, "sharp") == "Bm, G, D"


def test_transpose_progression_list_stays_list():
    result = transpose_progression(["Am7", "D7", "Gmaj7"], -2, "flat")
    assert result == ["Gm7", "C7", "Fmaj7"]


def test_transpose_progression_collapses_runs_and_blanks():
    assert transpose_progression("  C \n\n G  ", 1) == "C# G#"
    assert transpose_progression("", 3) == ""
    assert transpose_progression([], 3) == []


def test_transpose_progression_leaves_unknown_tokens():
    assert transpose_progression("C | G", 2) == "D | A"
