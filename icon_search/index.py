"""Multi-field prefix index over the icon catalog."""
from bisect import bisect_left
from typing import Dict, FrozenSet, Iterable, List, Optional, Set

from icon_search.errors import NotInitializedError
from icon_search.models import IconField, IconMatch, IconMetadata
from icon_search.search import ScoreEntry, apply_token_bonus, rank_matches
from icon_search.tokenizer import tokenize


class FieldIndex:
    """Forward index of one icon field: token -> icon names.

    Tokens are kept sorted so that every token starting with a given prefix
    sits in one contiguous run.
    """

    def __init__(self):
        self._postings: Dict[str, Set[str]] = {}
        self._tokens: List[str] = []

    def add(self, token: str, icon_name: str) -> None:
        self._postings.setdefault(token, set()).add(icon_name)

    def freeze(self) -> None:
        """Sort the vocabulary once all tokens are added."""
        self._tokens = sorted(self._postings)

    def lookup_prefix(self, prefix: str) -> Set[str]:
        """Return names of icons having a token that starts with `prefix`."""
        hits: Set[str] = set()
        position = bisect_left(self._tokens, prefix)
        while position < len(self._tokens) and self._tokens[position].startswith(prefix):
            hits.update(self._postings[self._tokens[position]])
            position += 1
        return hits

    def __len__(self) -> int:
        return len(self._postings)


class CatalogIndex:
    """Searchable index over a fixed icon catalog.

    Built once by initialize(); read-only afterwards.
    """

    def __init__(self, icons: Iterable[IconMetadata]):
        """Prepare the index for the given catalog.

        Args:
            icons: Catalog icons; names must be unique
        """
        self._icons: Dict[str, IconMetadata] = {icon.name: icon for icon in icons}
        self._fields: Dict[IconField, FieldIndex] = {}
        self._tokens: Dict[str, FrozenSet[str]] = {}
        self._initialized = False

    @property
    def is_initialized(self) -> bool:
        return self._initialized

    @property
    def icon_count(self) -> int:
        return len(self._icons)

    def get_icon(self, name: str) -> Optional[IconMetadata]:
        return self._icons.get(name)

    def initialize(self) -> None:
        """Build the per-field and flat token indexes. Safe to call twice."""
        if self._initialized:
            return

        fields = {field: FieldIndex() for field in IconField}

        for name, icon in self._icons.items():
            flat_tokens: Set[str] = set()
            for field, field_index in fields.items():
                for token in tokenize(field.text(icon)):
                    field_index.add(token, name)
                    flat_tokens.add(token)
            self._tokens[name] = frozenset(flat_tokens)

        for field_index in fields.values():
            field_index.freeze()

        self._fields = fields
        self._initialized = True

    def search(self, keywords: List[str], limit: int) -> List[IconMatch]:
        """Score and rank icons for the given keywords.

        Args:
            keywords: Normalized keywords (see KeywordParser)
            limit: Maximum number of matches to return

        Returns:
            Ranked matches, highest score first

        Raises:
            NotInitializedError: If initialize() has not been called
        """
        if not self._initialized:
            raise NotInitializedError("CatalogIndex not initialized. Call initialize() first.")

        scores: Dict[str, ScoreEntry] = {}

        for keyword in keywords:
            hit_icons: Set[str] = set()

            for field, field_index in self._fields.items():
                for name in field_index.lookup_prefix(keyword):
                    entry = scores.setdefault(name, ScoreEntry())
                    entry.score += field.weight
                    hit_icons.add(name)

            for name in hit_icons:
                apply_token_bonus(scores[name], self._tokens[name], keyword)

        return rank_matches(scores, self._icons, limit)
