"""MCP server for keyword-based icon search."""
from typing import Any, Dict, Optional, Tuple

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import Tool, TextContent

from icon_search.bootstrap import SearchEngineProvider
from icon_search.config import Config, get_config
from icon_search.errors import KeywordInputError
from icon_search.use_case import SearchIconsResponse, SearchIconsUseCase


TOOL_NAME = "search_icons"
TOOL_TITLE = "Search Remix Icons by keyword"

MATCH_SCHEMA = {
    "type": "object",
    "properties": {
        "name": {"type": "string"},
        "path": {"type": "string"},
        "category": {"type": "string"},
        "style": {"type": "string"},
        "usage": {"type": "string"},
        "baseName": {"type": "string"},
        "tags": {"type": "array", "items": {"type": "string"}},
        "score": {"type": "number"},
        "matchedTokens": {"type": "array", "items": {"type": "string"}},
    },
    "required": [
        "name", "path", "category", "style", "usage",
        "baseName", "tags", "score", "matchedTokens",
    ],
}

OUTPUT_SCHEMA = {
    "type": "object",
    "properties": {
        "guidance": {"type": "string"},
        "matches": {"type": "array", "items": MATCH_SCHEMA},
    },
    "required": ["guidance", "matches"],
}


def format_response(response: SearchIconsResponse) -> str:
    """Render guidance and ranked candidates as plain text.

    Args:
        response: Result of a keyword search

    Returns:
        Guidance followed by one line per candidate icon
    """
    lines = [response.guidance]

    if response.matches:
        lines.append("Top icon candidates:")
        for match in response.matches:
            tokens = ", ".join(match.matched_tokens)
            lines.append(f"- {match.icon.name} (score {match.score:.2f}): tokens [{tokens}]")

    return "\n".join(lines)


async def search_icons_tool(
    keywords: str,
    use_case: SearchIconsUseCase,
) -> Tuple[list[TextContent], Dict[str, Any]]:
    """Tool handler for search_icons.

    Args:
        keywords: Raw keyword string, e.g. "layout, grid"
        use_case: Shared search use case

    Returns:
        Text summary, and the same result as structured content

    Raises:
        ValueError: If the keywords are rejected by the parser
    """
    try:
        response = use_case.execute(keywords)
    except KeywordInputError as e:
        raise ValueError(f"Keyword search failed: {e}") from e

    return (
        [TextContent(type="text", text=format_response(response))],
        response.to_dict(),
    )


def create_server(
    provider: Optional[SearchEngineProvider] = None,
    config: Optional[Config] = None,
) -> Server:
    """Create and configure the MCP server.

    Args:
        provider: Shared engine provider. Built from config when omitted.
        config: Server configuration. Defaults to the environment config.

    Returns:
        Configured Server instance
    """
    config = config or get_config()
    provider = provider or SearchEngineProvider(config)
    server = Server(config.server_name)

    @server.list_tools()
    async def list_tools() -> list[Tool]:
        """List available tools."""
        return [
            Tool(
                name=TOOL_NAME,
                title=TOOL_TITLE,
                description=(
                    "Search Remix Icon metadata using comma-separated keywords only. "
                    "Avoid natural language sentences. Returns up to 5 ranked icons "
                    "and guidance on which one to choose."
                ),
                inputSchema={
                    "type": "object",
                    "properties": {
                        "keywords": {
                            "type": "string",
                            "minLength": 1,
                            "maxLength": config.max_input_length,
                            "description": (
                                "Comma-separated keywords. Natural language descriptions "
                                'are not accepted. Example: "layout, grid, design".'
                            ),
                        }
                    },
                    "required": ["keywords"]
                },
                outputSchema=OUTPUT_SCHEMA,
            )
        ]

    @server.call_tool()
    async def call_tool(name: str, arguments: Any) -> Tuple[list[TextContent], Dict[str, Any]]:
        """Handle tool calls."""
        if name == TOOL_NAME:
            keywords = (arguments or {}).get("keywords", "")
            if not isinstance(keywords, str) or not keywords.strip():
                raise ValueError("Keyword search failed: Provide at least one keyword.")
            if len(keywords) > config.max_input_length:
                raise ValueError("Keyword search failed: Input must stay concise and keyword-only.")
            use_case = await provider.get()
            return await search_icons_tool(keywords, use_case)
        else:
            raise ValueError(f"Unknown tool: {name}")

    return server


async def main(config: Optional[Config] = None):
    """Main entry point for the MCP server."""
    config = config or get_config()
    provider = SearchEngineProvider(config)

    # Build the index before accepting requests so catalog errors fail startup
    await provider.get()

    server = create_server(provider, config)

    async with stdio_server() as (read_stream, write_stream):
        initialization_options = server.create_initialization_options()
        await server.run(read_stream, write_stream, initialization_options)
