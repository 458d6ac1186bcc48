"""Unit tests for study decks and card layouts."""

from polyglot.corpus.models import Entry, EntryKind
from polyglot.study import Deck, front_text, render_card


class TestDeck:
    """Tests for Deck navigation."""

    def test_unshuffled_order(self) -> None:
        deck = Deck([3, 1, 2], 10, shuffle=False)
        assert deck.cards == [3, 1, 2]
        assert deck.current == 3

    def test_shuffle_is_a_permutation(self) -> None:
        deck = Deck(range(20), 20, seed=7)
        assert sorted(deck.cards) == list(range(20))

    def test_seed_is_reproducible(self) -> None:
        assert Deck(range(20), 20, seed=7).cards == Deck(range(20), 20, seed=7).cards

    def test_next_wraps(self) -> None:
        deck = Deck([0, 1, 2], 3, shuffle=False)
        assert deck.next() == 1
        assert deck.next() == 2
        assert deck.next() == 0
        assert deck.position == 0

    def test_prev_wraps(self) -> None:
        deck = Deck([0, 1, 2], 3, shuffle=False)
        assert deck.prev() == 2
        assert deck.position == 2

    def test_progress_counts_seen_cards(self) -> None:
        deck = Deck([0, 1, 2, 3], 8, shuffle=False)
        assert deck.progress == 1 / 8
        deck.next()
        deck.prev()
        assert deck.progress == 2 / 8
        assert deck.seen == {0, 1}

    def test_reshuffle_resets_position(self) -> None:
        deck = Deck(range(10), 10, seed=1)
        deck.next()
        deck.next()
        current = deck.reshuffle()
        assert deck.position == 0
        assert current == deck.cards[0]
        assert sorted(deck.cards) == list(range(10))

    def test_seen_survives_reshuffle(self) -> None:
        deck = Deck([0, 1, 2], 3, shuffle=False)
        deck.next()
        deck.reshuffle()
        assert {0, 1} <= deck.seen

    def test_empty_deck(self) -> None:
        deck = Deck([], 5)
        assert deck.current is None
        assert deck.next() is None
        assert deck.prev() is None
        assert deck.reshuffle() is None
        assert deck.progress == 0.0
        assert len(deck) == 0

    def test_zero_corpus_size(self) -> None:
        assert Deck([0], 0).progress == 0.0


class TestFrontText:
    """Tests for the card front."""

    def test_noun_drops_leading_article(self) -> None:
        assert front_text(Entry(type="noun", en="the apple")) == "apple"
        assert front_text(Entry(type="noun", en="The House")) == "House"

    def test_article_inside_word_kept(self) -> None:
        assert front_text(Entry(type="noun", en="theatre")) == "theatre"

    def test_other_kinds_unchanged(self) -> None:
        assert front_text(Entry(type="phrase", en="the end")) == "the end"

    def test_missing_english(self) -> None:
        assert front_text(Entry(type="noun")) == ""


class TestRenderCard:
    """Tests for render_card layouts."""

    def test_noun(self) -> None:
        entry = Entry(
            type="noun",
            en="the apple",
            fr="pomme",
            fr_art="la",
            es="manzana",
            es_art="la",
            it="mela",
            it_art="la",
            lat="malum",
        )
        card = render_card(entry)
        assert card.kind is EntryKind.NOUN
        assert card.front == "apple"
        assert card.echo == "the apple"
        assert [row.label for row in card.rows] == ["French", "Spanish", "Italian", "Latin"]
        assert card.rows[0].text == "la pomme"
        assert card.rows[0].forms[0].speak_lang == "fr-FR"
        assert card.rows[3].text == "malum"
        assert card.rows[3].forms[0].speak_text == ""

    def test_noun_without_article(self) -> None:
        card = render_card(Entry(type="noun", en="the water", es="agua"))
        assert card.rows[1].text == "agua"

    def test_adjective(self) -> None:
        entry = Entry(
            type="adj",
            en="big",
            fr_m="grand",
            fr_f="grande",
            es_m="grande",
            es_f="grande",
            lat="magnus",
        )
        card = render_card(entry)
        assert card.kind is EntryKind.ADJECTIVE
        french = card.rows[0]
        assert [form.label for form in french.forms] == ["M", "F"]
        assert french.text == "grand / grande"
        assert card.rows[-1].label == "Root"
        assert card.rows[-1].text == "magnus"

    def test_verb(self) -> None:
        card = render_card(Entry(type="verb", en="to eat", it="mangiare"))
        assert card.kind is EntryKind.VERB
        assert card.front == "to eat"
        assert card.rows[2].text == "mangiare"
        assert card.rows[2].forms[0].speak_lang == "it-IT"

    def test_unknown_type_renders_as_phrase(self) -> None:
        card = render_card(Entry(type="idiom", en="break a leg", fr="merde"))
        assert card.kind is EntryKind.PHRASE
        assert card.rows[0].text == "merde"

    def test_missing_fields_render_empty(self) -> None:
        card = render_card(Entry(type="phrase"))
        assert card.front == ""
        assert all(row.text == "" for row in card.rows)
