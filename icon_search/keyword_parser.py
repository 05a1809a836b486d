"""Parsing of raw keyword input into a validated keyword list."""
import re
from dataclasses import dataclass, field
from typing import FrozenSet, List

from icon_search.errors import EmptyInputError, SentenceInputError
from icon_search.tokenizer import tokenize


STOP_WORDS: FrozenSet[str] = frozenset({
    "about",
    "for",
    "from",
    "have",
    "here",
    "icon",
    "icons",
    "please",
    "show",
    "tell",
    "that",
    "the",
    "what",
    "with",
})

SEGMENT_SEPARATOR = re.compile(r"[\n,]")
DELIMITER = re.compile(r"[,;\n]")

EMPTY_INPUT_MESSAGE = "Keyword input must not be empty."
SENTENCE_INPUT_MESSAGE = "Keyword input must be provided as short keywords, not full sentences."


@dataclass(frozen=True)
class ParserThresholds:
    """Limits used to tell keyword lists apart from sentences."""
    max_delimited_keywords: int = 20  # Tokens allowed when input has delimiters
    max_space_separated_words: int = 4  # Words without delimiters that make a sentence
    max_tokens_without_delimiters: int = 6  # Tokens without delimiters that make a sentence
    stop_words: FrozenSet[str] = field(default_factory=lambda: STOP_WORDS)


class KeywordParser:
    """Turns a raw request string into normalized, deduplicated keywords."""

    def __init__(self, thresholds: ParserThresholds = ParserThresholds()):
        self.thresholds = thresholds

    def parse(self, raw: str) -> List[str]:
        """Parse raw input into keywords.

        Args:
            raw: Keyword string, e.g. "summer, sun, beach"

        Returns:
            Lowercase keywords in first-seen order, without duplicates

        Raises:
            EmptyInputError: If the input is blank or has no tokens
            SentenceInputError: If the input reads like a sentence
        """
        if not raw or not raw.strip():
            raise EmptyInputError(EMPTY_INPUT_MESSAGE)

        tokens = [
            token
            for segment in SEGMENT_SEPARATOR.split(raw)
            for token in tokenize(segment)
        ]

        if not tokens:
            raise EmptyInputError(EMPTY_INPUT_MESSAGE)

        if self._looks_like_sentence(raw, tokens):
            raise SentenceInputError(SENTENCE_INPUT_MESSAGE)

        return list(dict.fromkeys(tokens))

    def _looks_like_sentence(self, raw: str, tokens: List[str]) -> bool:
        limits = self.thresholds

        # Stop words disqualify the input even inside a delimited list
        if any(token in limits.stop_words for token in tokens):
            return True

        if DELIMITER.search(raw):
            return len(tokens) > limits.max_delimited_keywords

        space_separated = raw.strip().split()
        return (
            len(space_separated) >= limits.max_space_separated_words
            or len(tokens) >= limits.max_tokens_without_delimiters
        )
