"""Tests for tokenizer and keyword_parser modules."""
import pytest

from icon_search.errors import EmptyInputError, KeywordInputError, SentenceInputError
from icon_search.keyword_parser import KeywordParser, ParserThresholds
from icon_search.tokenizer import tokenize


@pytest.fixture
def parser():
    return KeywordParser()


class TestTokenize:
    def test_splits_on_punctuation_and_lowercases(self):
        assert tokenize("Layout-Grid_Line") == ["layout", "grid", "line"]

    def test_drops_empty_pieces(self):
        assert tokenize("  ,, home ;; ") == ["home"]

    def test_empty_text(self):
        assert tokenize("") == []

    def test_unicode_words(self):
        assert tokenize("导航 / 菜单") == ["导航", "菜单"]

    def test_keeps_combining_marks_inside_words(self):
        assert tokenize("हिन्दी") == ["हिन्दी"]
        assert tokenize("ภาษาไทย, العَرَبِيَّة") == ["ภาษาไทย", "العَرَبِيَّة"]

    def test_keeps_decomposed_accents(self):
        assert tokenize("Cafe\u0301 menu") == ["cafe\u0301", "menu"]


class TestParse:
    def test_splits_comma_separated_and_normalises_case(self, parser):
        assert parser.parse("Layout, GRID, design") == ["layout", "grid", "design"]

    def test_unicode_punctuation(self, parser):
        assert parser.parse("导航 / 菜单; UI") == ["导航", "菜单", "ui"]

    def test_newline_separated(self, parser):
        assert parser.parse("home\noffice") == ["home", "office"]

    def test_deduplicates(self, parser):
        assert parser.parse("sun, Sun, SUN, beach") == ["sun", "beach"]

    def test_keyword_list(self, parser):
        assert set(parser.parse("summer, sun, beach, ocean")) == {"summer", "sun", "beach", "ocean"}

    def test_deterministic(self, parser):
        assert parser.parse("grid, layout") == parser.parse("grid, layout")

    def test_short_space_separated(self, parser):
        assert parser.parse("home office building") == ["home", "office", "building"]

    def test_devanagari_keywords(self, parser):
        assert parser.parse("हिन्दी किताब") == ["हिन्दी", "किताब"]


class TestEmptyInput:
    @pytest.mark.parametrize("raw", ["", "   ", "\n\t"])
    def test_blank_input(self, parser, raw):
        with pytest.raises(EmptyInputError):
            parser.parse(raw)

    def test_only_punctuation(self, parser):
        with pytest.raises(EmptyInputError, match="must not be empty"):
            parser.parse(", ; -")

    def test_errors_are_value_errors(self, parser):
        with pytest.raises(ValueError):
            parser.parse("")


class TestSentenceDetection:
    def test_rejects_sentence_with_stop_words(self, parser):
        with pytest.raises(SentenceInputError, match="not full sentences"):
            parser.parse("please show me a home icon")

    def test_rejects_four_plain_words(self, parser):
        with pytest.raises(SentenceInputError):
            parser.parse("find me some layouts")

    def test_rejects_six_tokens_without_delimiters(self, parser):
        # Three whitespace fields but six tokens
        with pytest.raises(SentenceInputError):
            parser.parse("a-b c-d e-f")

    def test_stop_word_inside_delimited_list(self, parser):
        with pytest.raises(SentenceInputError):
            parser.parse("please, pause")

    def test_twenty_delimited_keywords_allowed(self, parser):
        raw = ", ".join(f"keyword{i}" for i in range(20))
        assert len(parser.parse(raw)) == 20

    def test_twenty_one_delimited_keywords_rejected(self, parser):
        raw = ", ".join(f"keyword{i}" for i in range(21))
        with pytest.raises(SentenceInputError):
            parser.parse(raw)

    def test_semicolon_counts_as_delimiter(self, parser):
        assert parser.parse("home; office; city; park") == ["home", "office", "city", "park"]

    def test_sentence_error_is_keyword_input_error(self, parser):
        with pytest.raises(KeywordInputError):
            parser.parse("tell me about icons")


class TestThresholds:
    def test_custom_delimited_cap(self):
        parser = KeywordParser(ParserThresholds(max_delimited_keywords=2))
        assert parser.parse("sun, moon") == ["sun", "moon"]
        with pytest.raises(SentenceInputError):
            parser.parse("sun, moon, star")

    def test_custom_stop_words(self):
        parser = KeywordParser(ParserThresholds(stop_words=frozenset({"sun"})))
        assert parser.parse("icon") == ["icon"]
        with pytest.raises(SentenceInputError):
            parser.parse("sun")
