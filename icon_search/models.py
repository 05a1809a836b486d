"""Icon catalog records and search results."""
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, Tuple


@dataclass(frozen=True)
class IconMetadata:
    """A single icon in the catalog. `name` is unique across the catalog."""
    name: str
    path: str
    category: str
    style: str
    base_name: str
    usage: str
    tags: Tuple[str, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "path": self.path,
            "category": self.category,
            "style": self.style,
            "usage": self.usage,
            "baseName": self.base_name,
            "tags": list(self.tags),
        }


@dataclass(frozen=True)
class IconMatch:
    """A ranked search hit.

    Attributes:
        icon: The matched catalog entry (shared, never copied)
        score: Accumulated score rounded to two decimals
        matched_tokens: Icon tokens hit by the keywords, sorted alphabetically
    """
    icon: IconMetadata
    score: float
    matched_tokens: Tuple[str, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        """Render the match in the shape returned to MCP clients."""
        result = self.icon.to_dict()
        result["score"] = self.score
        result["matchedTokens"] = list(self.matched_tokens)
        return result


class IconField(Enum):
    """Icon attributes covered by the search index."""
    NAME = "name"
    BASE_NAME = "baseName"
    TAGS = "tags"
    USAGE = "usage"
    CATEGORY = "category"
    STYLE = "style"

    @property
    def weight(self) -> int:
        """Score added when a keyword hits this field."""
        return FIELD_WEIGHTS[self]

    def text(self, icon: IconMetadata) -> str:
        """Extract the indexed text of this field from an icon."""
        return FIELD_EXTRACTORS[self](icon)


FIELD_WEIGHTS: Dict[IconField, int] = {
    IconField.NAME: 5,
    IconField.BASE_NAME: 4,
    IconField.TAGS: 3,
    IconField.USAGE: 2,
    IconField.CATEGORY: 1,
    IconField.STYLE: 1,
}

FIELD_EXTRACTORS: Dict[IconField, Callable[[IconMetadata], str]] = {
    IconField.NAME: lambda icon: icon.name,
    IconField.BASE_NAME: lambda icon: icon.base_name,
    IconField.TAGS: lambda icon: " ".join(icon.tags),
    IconField.USAGE: lambda icon: icon.usage,
    IconField.CATEGORY: lambda icon: icon.category,
    IconField.STYLE: lambda icon: icon.style,
}
