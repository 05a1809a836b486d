"""One-time construction of the icon search engine."""
import asyncio
import sys
from typing import Optional

from icon_search.catalog import get_default_tags_path, load_icons_from_tags
from icon_search.config import Config
from icon_search.index import CatalogIndex
from icon_search.keyword_parser import KeywordParser
from icon_search.use_case import SearchIconsUseCase


class SearchEngineProvider:
    """Builds the search use case once and shares it with every caller.

    Concurrent first callers await the same in-flight build. A failed build
    is not kept, so the next call starts a fresh one.
    """

    def __init__(self, config: Optional[Config] = None):
        self.config = config or Config()
        self._build_task: Optional[asyncio.Task] = None

    @property
    def is_ready(self) -> bool:
        task = self._build_task
        return task is not None and task.done() and not task.cancelled() and task.exception() is None

    async def get(self) -> SearchIconsUseCase:
        """Return the shared use case, building it on first use."""
        if self._build_task is None:
            self._build_task = asyncio.ensure_future(self._build())

        task = self._build_task
        try:
            return await asyncio.shield(task)
        except Exception:
            if self._build_task is task and task.done():
                self._build_task = None
            raise

    async def _build(self) -> SearchIconsUseCase:
        tags_path = self.config.tags_path or get_default_tags_path()
        icons = await asyncio.to_thread(load_icons_from_tags, tags_path)

        index = CatalogIndex(icons)
        index.initialize()

        print(
            f"[IconSearch] Indexed {index.icon_count} icons from {tags_path}",
            file=sys.stderr,
        )

        return SearchIconsUseCase(repository=index, parser=KeywordParser())
