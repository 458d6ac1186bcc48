"""Unit tests for text normalization."""

import pytest

from polyglot.search.normalize import build_search_text, normalize


class TestNormalize:
    """Tests for normalize."""

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("  Café ", "cafe"),
            ("ÉCOLE", "ecole"),
            ("Ñandú", "nandu"),
            ("caffè", "caffe"),
            ("buenos días", "buenos dias"),
            ("plain", "plain"),
            ("", ""),
        ],
    )
    def test_strips_accents_case_and_whitespace(self, raw: str, expected: str) -> None:
        assert normalize(raw) == expected

    def test_none_is_empty(self) -> None:
        assert normalize(None) == ""

    def test_non_strings_are_stringified(self) -> None:
        assert normalize(42) == "42"
        assert normalize(3.5) == "3.5"

    def test_idempotent(self) -> None:
        once = normalize("  Crème Brûlée  ")
        assert normalize(once) == once == "creme brulee"

    def test_inner_whitespace_is_kept(self) -> None:
        assert normalize(" a  b ") == "a  b"

    def test_precomposed_and_decomposed_agree(self) -> None:
        assert normalize("caf\u00e9") == normalize("cafe\u0301") == "cafe"


class TestBuildSearchText:
    """Tests for build_search_text."""

    def test_joins_non_empty_fields(self) -> None:
        assert build_search_text(["Apple", None, "", "Pomme"]) == "apple | pomme"

    def test_all_empty(self) -> None:
        assert build_search_text([None, "", None]) == ""

    def test_normalizes_whole_text(self) -> None:
        assert build_search_text(["Café", " Caffè "]) == "cafe |  caffe"
