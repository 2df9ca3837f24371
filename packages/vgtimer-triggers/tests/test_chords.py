"""Tests for key-chord parsing."""
import pytest
from vgtimer_triggers import ChordError, chord_from_parts, parse_chord


class TestParseChord:
    @pytest.mark.parametrize(
        "text, chord",
        [
            ("ctrl+f9", "ctrl+f9"),
            ("control F9", "ctrl+f9"),
            ("CTRL + F10", "ctrl+f10"),
            ("8", "8"),
            ("MINUS", "-"),
            ("-", "-"),
            ("shift ctrl a", "ctrl+shift+a"),
            ("alt+shift+ctrl+meta+x", "ctrl+shift+alt+meta+x"),
            ("cmd+k", "meta+k"),
            ("F24", "f24"),
            ("page_up", "pageup"),
            ("esc", "escape"),
        ],
    )
    def test_canonical_forms(self, text, chord):
        assert parse_chord(text) == chord

    def test_duplicate_modifiers_collapse(self):
        assert parse_chord("ctrl control f9") == "ctrl+f9"

    @pytest.mark.parametrize(
        "text",
        [None, "", "   ", "+", "ctrl", "ctrl+", "f25", "f0", "nosuchkey", "a b", "ctrl+a+b"],
    )
    def test_invalid_chords(self, text):
        with pytest.raises(ChordError):
            parse_chord(text)

    def test_chord_error_is_value_error(self):
        with pytest.raises(ValueError):
            parse_chord("hyper+q")


class TestChordFromParts:
    def test_backend_names(self):
        assert chord_from_parts("f9", {"ctrl"}) == "ctrl+f9"
        assert chord_from_parts("-") == "-"
        assert chord_from_parts("page up") == "pageup"

    def test_matches_parse_chord(self):
        assert chord_from_parts("F10", {"control"}) == parse_chord("control F10")

    def test_unknown_parts(self):
        with pytest.raises(ChordError):
            chord_from_parts("left shift")
        with pytest.raises(ChordError):
            chord_from_parts("a", {"hyper"})
