"""Scoring and ranking of icon search hits."""
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Protocol, Set

from icon_search.models import IconMatch, IconMetadata


# Bonuses for keywords hitting an icon's flat token set
EXACT_TOKEN_MATCH_BONUS = 5
PREFIX_TOKEN_MATCH_BONUS = 2


class IconSearchRepository(Protocol):
    """Protocol for icon search backends to allow extensibility."""

    def search(self, keywords: List[str], limit: int) -> List[IconMatch]:
        """Search icons for the given keywords.

        Args:
            keywords: Normalized keywords
            limit: Maximum number of results to return

        Returns:
            List of matches, sorted by relevance
        """
        ...


@dataclass
class ScoreEntry:
    """Running score of one icon while a query is evaluated."""
    score: float = 0.0
    matched: Set[str] = field(default_factory=set)


def apply_token_bonus(entry: ScoreEntry, tokens: Iterable[str], keyword: str) -> None:
    """Reward exact and prefix hits of a keyword on an icon's tokens.

    Args:
        entry: Score entry to update in place
        tokens: Flat token set of the icon
        keyword: Normalized keyword
    """
    for token in tokens:
        if token == keyword:
            entry.score += EXACT_TOKEN_MATCH_BONUS
            entry.matched.add(token)
        elif token.startswith(keyword):
            entry.score += PREFIX_TOKEN_MATCH_BONUS
            entry.matched.add(token)


def rank_matches(
    scores: Dict[str, ScoreEntry],
    icons: Dict[str, IconMetadata],
    limit: int,
) -> List[IconMatch]:
    """Turn accumulated scores into ranked matches.

    Matches are ordered by score (highest first), then by icon name so that
    equal scores always come back in the same order.

    Args:
        scores: Score entries keyed by icon name
        icons: Catalog icons keyed by name
        limit: Maximum number of matches to return

    Returns:
        Ranked list of at most `limit` matches
    """
    matches = []
    for name, entry in scores.items():
        icon = icons.get(name)
        if icon is None:
            raise KeyError(f"Icon metadata missing for {name}")

        matches.append(IconMatch(
            icon=icon,
            score=round(entry.score, 2),
            matched_tokens=tuple(sorted(entry.matched)),
        ))

    matches.sort(key=lambda match: (-match.score, match.icon.name))

    return matches[:limit]
