"""Unit tests for the offline matcher."""

import pytest

from polyglot.corpus.models import Corpus
from polyglot.search.offline import (
    MatchTier,
    OfflineMatcher,
    offline_search,
    score_entries,
    score_text,
)


def corpus_of(*texts: str) -> Corpus:
    return Corpus.from_records({"en": text} for text in texts)


class TestScoreText:
    """Tests for score_text tiers."""

    def test_substring_scores_by_position(self) -> None:
        assert score_text("apple", ["apple"], "red apple") == (
            pytest.approx(4 / 10000),
            MatchTier.SUBSTRING,
        )

    def test_substring_at_start_scores_zero(self) -> None:
        assert score_text("apple", ["apple"], "apple pie") == (0.0, MatchTier.SUBSTRING)

    def test_token_overlap(self) -> None:
        query = "red fruit basket"
        score, tier = score_text(query, query.split(), "a fruit bowl that is red")
        assert tier is MatchTier.TOKEN_OVERLAP
        assert score == pytest.approx(1 - 2 / 3)

    def test_short_query_tokens_count_toward_denominator(self) -> None:
        query = "an old hat"
        score, tier = score_text(query, query.split(), "old boots")
        assert tier is MatchTier.TOKEN_OVERLAP
        assert score == pytest.approx(1 - 1 / 3)

    def test_edit_distance(self) -> None:
        score, tier = score_text("aple", ["aple"], "a red apple fruit")
        assert tier is MatchTier.EDIT_DISTANCE
        assert 2.0 <= score <= 2.2
        assert score == pytest.approx(2.1)

    def test_no_match(self) -> None:
        assert score_text("zzzzz", ["zzzzz"], "apple") is None

    def test_empty_text(self) -> None:
        assert score_text("apple", ["apple"], "") is None

    def test_tiers_do_not_overlap(self) -> None:
        substring, _ = score_text("app", ["app"], "zzzz zzzz app")
        overlap, _ = score_text("app zzq", ["app", "zzq"], "apple")
        edit, _ = score_text("aple", ["aple"], "apple")
        assert substring < 1 <= 2 <= edit
        assert 0 <= overlap < 1


class TestOfflineSearch:
    """Tests for offline_search ranking."""

    def test_substring_hits_ranked_by_position(self) -> None:
        corpus = corpus_of("the red apple", "a fruit basket with apple seeds")
        assert offline_search("apple", corpus) == [0, 1]

    def test_no_match_returns_empty(self) -> None:
        assert offline_search("zzzzz", corpus_of("apple", "banana")) == []

    def test_empty_corpus(self) -> None:
        assert offline_search("apple", Corpus()) == []

    def test_substring_before_edit_distance(self) -> None:
        corpus = corpus_of("an aple tree", "red apples", "apple")
        assert offline_search("apple", corpus) == [2, 1, 0]

    def test_substring_before_partial_overlap(self) -> None:
        corpus = corpus_of("only red here", "a red box")
        assert offline_search("red box", corpus) == [1, 0]

    def test_ties_keep_corpus_order(self) -> None:
        corpus = corpus_of("red fruit x", "fruit red", "fruit red too")
        # Full token overlap and a substring at 0 both score 0.0
        assert offline_search("fruit red", corpus) == [0, 1, 2]

    def test_results_are_unique_and_in_range(self) -> None:
        corpus = corpus_of("apple", "apples", "maple", "aple", "pineapple")
        result = offline_search("aple", corpus)
        assert len(result) == len(set(result))
        assert all(0 <= i < len(corpus) for i in result)

    def test_edit_distance_limited_to_leading_tokens(self) -> None:
        text = " ".join(["zzzz"] * 80 + ["apple"])
        corpus = corpus_of(text)
        assert offline_search("aple", corpus) == []
        assert offline_search("apple", corpus) == [0]

    def test_accents_do_not_matter(self) -> None:
        corpus = Corpus.from_records([{"en": "coffee", "fr": "café"}])
        assert offline_search("cafe", corpus) == [0]


class TestScoreEntries:
    """Tests for score_entries."""

    def test_scores_sorted_ascending(self) -> None:
        corpus = corpus_of("an aple tree", "red apple", "apple")
        matches = score_entries("apple", corpus)
        scores = [m.score for m in matches]
        assert scores == sorted(scores)
        assert [m.index for m in matches] == [2, 1, 0]
        assert matches[-1].tier is MatchTier.EDIT_DISTANCE


class TestOfflineMatcher:
    """Tests for OfflineMatcher."""

    def test_name(self) -> None:
        assert OfflineMatcher(Corpus()).name == "offline"

    def test_search(self, sample_corpus: Corpus) -> None:
        matcher = OfflineMatcher(sample_corpus)
        assert matcher.search("pomme")[0] == 0

    def test_cafe_prefers_substring(self, sample_corpus: Corpus) -> None:
        result = OfflineMatcher(sample_corpus).search("cafe")
        assert result[0] == 5

    def test_custom_max_distance(self) -> None:
        corpus = corpus_of("apple")
        assert OfflineMatcher(corpus, max_distance=0).search("aple") == []
        assert OfflineMatcher(corpus, max_distance=1).search("aple") == [0]
