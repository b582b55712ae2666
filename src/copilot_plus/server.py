"""
MCP server for Copilot Plus.

Exposes spending insights from a Copilot Money export through the
Model Context Protocol.
"""

import json
import logging
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import TextContent, Tool

from copilot_plus.core.exceptions import CopilotPlusError
from copilot_plus.core.session import ModelSession
from copilot_plus.tools.tools import CopilotPlusTools, create_tool_schemas

logger = logging.getLogger(__name__)


class CopilotPlusServer:
    """MCP server for Copilot Plus data."""

    def __init__(self, csv_path: Optional[Path] = None):
        """
        Initialize the MCP server.

        Args:
            csv_path: Optional Copilot Money CSV export to load on first use.
                    If None, clients must call load_export first.
        """
        self.session = ModelSession(csv_path)
        self.tools = CopilotPlusTools(self.session)
        self.server = Server("copilot-plus")

        # Register handlers
        self._register_handlers()

    def _tool_handlers(self) -> Dict[str, Callable[..., Dict[str, Any]]]:
        return {
            "load_export": self.tools.load_export,
            "get_summary": self.tools.get_summary,
            "get_year_aggregate": self.tools.get_year_aggregate,
            "get_windowed_aggregate": self.tools.get_windowed_aggregate,
            "query_transactions": self.tools.query_transactions,
            "get_categories": self.tools.get_categories,
            "get_flow_graph": self.tools.get_flow_graph,
            "get_trend_series": self.tools.get_trend_series,
            "get_yoy_insights": self.tools.get_yoy_insights,
            "get_yoy_table": self.tools.get_yoy_table,
            "get_overview": self.tools.get_overview,
        }

    def handle_tool_call(self, name: str, arguments: Optional[Dict[str, Any]]) -> List[TextContent]:
        """Route a tool call and format the result as text content."""
        handler = self._tool_handlers().get(name)
        if handler is None:
            return [TextContent(type="text", text=f"Unknown tool: {name}")]

        try:
            result = handler(**(arguments or {}))
        except (CopilotPlusError, ValueError, FileNotFoundError) as e:
            # Expected failures: bad input, no data, unreadable export
            return [TextContent(type="text", text=f"Error: {str(e)}")]
        except Exception as e:
            logger.exception(f"Error executing tool {name}")
            return [
                TextContent(
                    type="text",
                    text=f"Error executing tool: {str(e)}",
                )
            ]

        return [TextContent(type="text", text=json.dumps(result, indent=2))]

    def _register_handlers(self) -> None:
        """Register MCP protocol handlers."""

        @self.server.list_tools()
        async def list_tools() -> list[Tool]:
            """List available tools."""
            schemas = create_tool_schemas()
            return [
                Tool(
                    name=schema["name"],
                    description=schema["description"],
                    inputSchema=schema["inputSchema"],
                )
                for schema in schemas
            ]

        @self.server.call_tool()
        async def call_tool(name: str, arguments: dict[str, Any]) -> list[TextContent]:
            """Handle tool calls."""
            return self.handle_tool_call(name, arguments)

    async def run(self) -> None:  # pragma: no cover
        """Run the MCP server using stdio transport."""
        async with stdio_server() as (read_stream, write_stream):
            await self.server.run(
                read_stream,
                write_stream,
                self.server.create_initialization_options(),
            )


async def run_server(csv_path: Optional[Path] = None) -> None:  # pragma: no cover
    """
    Run the Copilot Plus MCP server.

    Args:
        csv_path: Optional CSV export to load on first use.
    """
    server = CopilotPlusServer(csv_path)
    await server.run()
