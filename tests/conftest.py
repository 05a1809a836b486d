"""Shared fixtures for tests."""
import json
import pytest

from icon_search.index import CatalogIndex
from icon_search.keyword_parser import KeywordParser
from icon_search.models import IconMetadata
from icon_search.use_case import SearchIconsUseCase


SAMPLE_TAGS = {
    "_comment": "test catalog",
    "Design": {
        "pencil": "edit, sketch, design",
        "layout-grid": "layout, grid, dashboard",
    },
    "Weather": {
        "sun": "sun, summer, hot",
    },
    "Broken": "not an object",
}


@pytest.fixture
def sample_icons():
    """Return a small hand-built catalog."""
    return [
        IconMetadata(
            name="layout-grid",
            path="ri-layout-grid",
            category="System",
            style="Line",
            base_name="layout",
            usage="layout",
            tags=("layout", "grid", "dashboard"),
        ),
        IconMetadata(
            name="layout-column",
            path="ri-layout-column",
            category="System",
            style="Fill",
            base_name="layout",
            usage="layout",
            tags=("layout", "column", "design"),
        ),
        IconMetadata(
            name="pencil-line",
            path="ri-pencil-line",
            category="Design",
            style="Line",
            base_name="pencil",
            usage="editing",
            tags=("edit", "sketch", "design"),
        ),
    ]


@pytest.fixture
def catalog_index(sample_icons):
    """Return an initialized index over the sample catalog."""
    index = CatalogIndex(sample_icons)
    index.initialize()
    return index


@pytest.fixture
def use_case(catalog_index):
    return SearchIconsUseCase(repository=catalog_index, parser=KeywordParser())


@pytest.fixture
def sample_tags_path(tmp_path):
    """Create a temporary tags file with sample data."""
    tags_file = tmp_path / "tags.json"
    tags_file.write_text(json.dumps(SAMPLE_TAGS, indent=2))
    return tags_file
