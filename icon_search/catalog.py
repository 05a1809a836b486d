"""Icon catalog loader for tags.json files."""
import json
from pathlib import Path
from typing import Any, Dict, List, Optional

from icon_search.models import IconMetadata


STYLES = ("line", "fill")


def get_default_tags_path() -> Path:
    """Get the path to the tags file bundled with the package.

    Returns:
        Path to data/tags.json
    """
    return Path(__file__).parent / "data" / "tags.json"


def load_tags_file(tags_path: Optional[Path] = None) -> Dict[str, Any]:
    """Load a tags JSON file.

    Args:
        tags_path: Optional path to tags file. If None, uses the bundled catalog.

    Returns:
        Parsed JSON tags data

    Raises:
        FileNotFoundError: If tags file doesn't exist
        json.JSONDecodeError: If tags file is malformed
    """
    if tags_path is None:
        tags_path = get_default_tags_path()

    if not tags_path.exists():
        raise FileNotFoundError(f"Tags file not found at {tags_path}")

    with open(tags_path, "r", encoding="utf-8") as f:
        return json.load(f)


def split_tags(tag_string: str) -> List[str]:
    """Split a comma-separated tag string, dropping blanks."""
    return [tag.strip() for tag in tag_string.split(",") if tag.strip()]


def build_icons(category: str, base_name: str, tags: List[str]) -> List[IconMetadata]:
    """Build one icon per style for a base name.

    Args:
        category: Catalog category, e.g. "Buildings"
        base_name: Icon base name, e.g. "home"
        tags: Tags shared by every style of the icon

    Returns:
        Icons named "{base_name}-{style}"
    """
    icons = []
    for style in STYLES:
        name = f"{base_name}-{style}"
        icons.append(IconMetadata(
            name=name,
            path=f"icons/{category}/{name}.svg",
            category=category,
            style=style,
            base_name=base_name,
            usage=f"{style} {base_name} icon for {category.lower()} related functionality",
            tags=tuple(tags),
        ))
    return icons


def load_icons_from_tags(tags_path: Optional[Path] = None) -> List[IconMetadata]:
    """Read the full icon catalog from a tags file.

    The file maps each category to an object of base names and their
    comma-separated tags. A top-level "_comment" entry is ignored.

    Args:
        tags_path: Optional path to tags file. If None, uses the bundled catalog.

    Returns:
        List of icons, in file order

    Raises:
        FileNotFoundError: If tags file doesn't exist
        json.JSONDecodeError: If tags file is malformed
    """
    tags_data = load_tags_file(tags_path)

    icons = []
    for category, icon_map in tags_data.items():
        if category == "_comment" or not isinstance(icon_map, dict):
            continue

        for base_name, tag_string in icon_map.items():
            if not isinstance(tag_string, str):
                tag_string = ""
            icons.extend(build_icons(category, base_name, split_tags(tag_string)))

    return icons
