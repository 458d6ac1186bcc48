"""Unit tests for output formatters."""

import json
from io import StringIO

import pytest

from polyglot.corpus.models import Corpus
from polyglot.output import (
    JSONFormatter,
    OutputData,
    OutputFormat,
    PlainFormatter,
    RichFormatter,
    card_to_dict,
    get_formatter,
)
from polyglot.study import Card, render_card

ROWS = [
    {"index": 0, "type": "noun", "english": "apple"},
    {"index": 12, "type": "verb", "english": "to eat"},
]


@pytest.fixture
def noun_card(sample_corpus: Corpus) -> Card:
    return render_card(sample_corpus[0])


@pytest.fixture
def adjective_card(sample_corpus: Corpus) -> Card:
    return render_card(sample_corpus[2])


class TestOutputData:
    """Tests for OutputData dataclass."""

    def test_create_output_data(self) -> None:
        """Test creating output data."""
        data = OutputData(content="apple")
        assert data.content == "apple"
        assert data.title is None
        assert data.metadata == {}
        assert data.error is None
        assert data.success is True

    def test_from_error(self) -> None:
        """Test creating error output data."""
        data = OutputData.from_error("Word list not found", title="search")
        assert data.success is False
        assert data.error == "Word list not found"
        assert data.title == "search"
        assert data.content == ""

    def test_from_content(self) -> None:
        """Test creating content output data."""
        data = OutputData.from_content(["apple"], title="search", matcher="offline")
        assert data.success is True
        assert data.content == ["apple"]
        assert data.metadata == {"matcher": "offline"}


class TestCardToDict:
    """Tests for the plain-data card view."""

    def test_noun(self, noun_card: Card) -> None:
        data = card_to_dict(noun_card)
        assert data["kind"] == "noun"
        assert data["front"] == "apple"
        assert data["back"][0] == {
            "language": "French",
            "code": "fr",
            "text": "la pomme",
            "forms": [{"label": None, "text": "la pomme", "speak_lang": "fr-FR"}],
        }

    def test_adjective_forms(self, adjective_card: Card) -> None:
        french = card_to_dict(adjective_card)["back"][0]
        assert [form["label"] for form in french["forms"]] == ["M", "F"]


class TestPlainFormatter:
    """Tests for PlainFormatter."""

    def test_format_type(self) -> None:
        assert PlainFormatter().format_type == OutputFormat.PLAIN

    def test_format_string(self) -> None:
        """Test formatting a string with a title."""
        output = PlainFormatter().format(OutputData(content="apple", title="Word"))
        assert output == "Word\n----\n\napple"

    def test_format_list_and_dict(self) -> None:
        formatter = PlainFormatter()
        assert formatter.format(OutputData(content=["a", "b"])) == "a\nb"
        assert formatter.format(OutputData(content={"Entries": 6})) == "Entries: 6"

    def test_format_error(self) -> None:
        output = PlainFormatter().format(OutputData.from_error("boom"))
        assert output == "Error: boom"

    def test_metadata_only_when_verbose(self) -> None:
        data = OutputData.from_content("apple", matcher="offline")
        assert "matcher" not in PlainFormatter().format(data)
        assert "matcher: offline" in PlainFormatter(verbose=True).format(data)

    def test_format_table(self) -> None:
        output = PlainFormatter().format_table(ROWS)
        assert output.splitlines() == [
            "index  type  english",
            "-----  ----  -------",
            "0      noun  apple",
            "12     verb  to eat",
        ]

    def test_format_table_columns_and_title(self) -> None:
        output = PlainFormatter().format_table(ROWS, columns=["english"], title="Hits")
        assert output.splitlines() == ["Hits", "", "english", "-------", "apple", "to eat"]

    def test_format_empty_table(self) -> None:
        assert PlainFormatter().format_table([]) == ""

    def test_format_card(self, noun_card: Card) -> None:
        output = PlainFormatter().format_card(noun_card)
        assert output.splitlines() == [
            "[noun] apple",
            "",
            "French   la pomme",
            "Spanish  la manzana",
            "Italian  la mela",
            "Latin    malum",
        ]

    def test_format_card_front_only(self, noun_card: Card) -> None:
        assert PlainFormatter().format_card(noun_card, flipped=False) == "[noun] apple"

    def test_format_adjective_card(self, adjective_card: Card) -> None:
        lines = PlainFormatter().format_card(adjective_card).splitlines()
        assert lines[2] == "French   M: grand  F: grande"
        assert lines[-1] == "Root     magnus"

    def test_print_routes_errors(self) -> None:
        """Test that errors go to the error stream."""
        out, err = StringIO(), StringIO()
        formatter = PlainFormatter(stream=out, error_stream=err)

        formatter.print_content("apple")
        formatter.print_error("boom")

        assert out.getvalue() == "apple\n"
        assert err.getvalue() == "Error: boom\n"

    def test_write(self) -> None:
        out = StringIO()
        PlainFormatter(stream=out).write("la pomme")
        assert out.getvalue() == "la pomme\n"


class TestJSONFormatter:
    """Tests for JSONFormatter."""

    def test_format_success(self) -> None:
        data = OutputData.from_content({"count": 1}, title="search", matcher="offline")
        parsed = json.loads(JSONFormatter().format(data))
        assert parsed == {
            "success": True,
            "title": "search",
            "content": {"count": 1},
            "metadata": {"matcher": "offline"},
        }

    def test_format_error(self) -> None:
        parsed = json.loads(JSONFormatter().format(OutputData.from_error("boom")))
        assert parsed == {"success": False, "error": "boom"}

    def test_keeps_unicode(self) -> None:
        output = JSONFormatter().format(OutputData(content="café"))
        assert "café" in output

    def test_compact(self) -> None:
        output = JSONFormatter(indent=None).format(OutputData(content="x"))
        assert "\n" not in output

    def test_format_table(self) -> None:
        parsed = json.loads(JSONFormatter().format_table(ROWS, columns=["english"]))
        assert parsed["count"] == 2
        assert parsed["rows"] == ROWS
        assert parsed["columns"] == ["english"]

    def test_format_card(self, noun_card: Card) -> None:
        parsed = json.loads(JSONFormatter().format_card(noun_card))
        assert parsed == card_to_dict(noun_card)

    def test_format_card_front_only(self, noun_card: Card) -> None:
        parsed = json.loads(JSONFormatter().format_card(noun_card, flipped=False))
        assert parsed == {"kind": "noun", "front": "apple"}


class TestRichFormatter:
    """Tests for RichFormatter."""

    def test_format_type(self) -> None:
        assert RichFormatter().format_type == OutputFormat.RICH

    def test_format_content(self) -> None:
        output = RichFormatter(width=60).format(
            OutputData(content={"Entries": 6}, title="Word list")
        )
        assert "Word list" in output
        assert "Entries" in output

    def test_format_error(self) -> None:
        output = RichFormatter(width=60).format(OutputData.from_error("boom"))
        assert "Error: boom" in output

    def test_format_table(self) -> None:
        output = RichFormatter(width=80).format_table(ROWS)
        assert "english" in output
        assert "to eat" in output

    def test_format_empty_table(self) -> None:
        assert RichFormatter().format_table([]) == ""

    def test_format_card(self, noun_card: Card) -> None:
        output = RichFormatter(width=60).format_card(noun_card)
        assert "apple" in output
        assert "la pomme" in output
        assert "Latin" in output

    def test_format_card_front_only(self, noun_card: Card) -> None:
        output = RichFormatter(width=60).format_card(noun_card, flipped=False)
        assert "apple" in output
        assert "la pomme" not in output

    def test_write_without_color(self) -> None:
        out = StringIO()
        RichFormatter(stream=out, width=60, color=False).write("[bold]la pomme[/bold]")
        assert out.getvalue() == "[bold]la pomme[/bold]\n"


class TestGetFormatter:
    """Tests for get_formatter factory."""

    @pytest.mark.parametrize(
        ("format_type", "expected"),
        [
            ("plain", PlainFormatter),
            ("JSON", JSONFormatter),
            (OutputFormat.RICH, RichFormatter),
        ],
    )
    def test_get_formatter(self, format_type: str, expected: type) -> None:
        assert isinstance(get_formatter(format_type), expected)

    def test_passes_options(self) -> None:
        formatter = get_formatter("json", verbose=True, indent=None)
        assert formatter.verbose is True

    def test_unknown_format(self) -> None:
        with pytest.raises(ValueError):
            get_formatter("xml")
