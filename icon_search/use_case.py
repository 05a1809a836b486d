"""Keyword search use case: parse, search, rank and explain."""
from dataclasses import dataclass
from typing import Any, Dict, List

from icon_search.keyword_parser import KeywordParser
from icon_search.models import IconMatch
from icon_search.search import IconSearchRepository


# Number of icons returned per search
FIXED_LIMIT = 5


@dataclass(frozen=True)
class SearchIconsResponse:
    """Ranked matches plus guidance on which icon to pick."""
    matches: List[IconMatch]
    guidance: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "guidance": self.guidance,
            "matches": [match.to_dict() for match in self.matches],
        }


class SearchIconsUseCase:
    """Drives a keyword search from raw input to guidance text."""

    def __init__(self, repository: IconSearchRepository, parser: KeywordParser):
        self.repository = repository
        self.parser = parser

    def execute(self, input: str) -> SearchIconsResponse:
        """Search icons for a raw keyword string.

        Args:
            input: Raw keywords as supplied by the caller

        Returns:
            Up to FIXED_LIMIT matches and the guidance text

        Raises:
            EmptyInputError: If the input has no keywords
            SentenceInputError: If the input reads like a sentence
        """
        keywords = self.parser.parse(input)
        matches = self.repository.search(keywords, FIXED_LIMIT)

        return SearchIconsResponse(
            matches=matches,
            guidance=build_guidance(matches, keywords),
        )


def build_guidance(matches: List[IconMatch], keywords: List[str]) -> str:
    """Compose the instruction telling the caller which icon to choose."""
    joined = ", ".join(keywords)

    if not matches:
        return (
            f"No icons matched the keywords: {joined}. "
            "Consider refining with specific icon tags or base names."
        )

    if len(matches) == 1:
        return (
            f"Single icon match found for keywords [{joined}] -> {matches[0].icon.name}. "
            "Use this icon if it suits the request."
        )

    options = "; ".join(
        f"{rank}. {match.icon.name} (score {match.score:.2f})"
        for rank, match in enumerate(matches[:FIXED_LIMIT], start=1)
    )
    return (
        f"Multiple icons matched the keywords [{joined}]. "
        f"Choose exactly one icon from the ranked list: {options}. "
        "Prefer the highest score unless context dictates otherwise."
    )
