"""Exceptions raised by the icon search engine."""


class IconSearchError(Exception):
    """Base class for icon search errors."""


class KeywordInputError(IconSearchError, ValueError):
    """The caller supplied keywords the engine cannot accept."""


class EmptyInputError(KeywordInputError):
    """Keyword input was empty or contained no tokens."""


class SentenceInputError(KeywordInputError):
    """Keyword input looks like a natural-language sentence."""


class NotInitializedError(IconSearchError, RuntimeError):
    """The catalog index was queried before initialize() completed."""
