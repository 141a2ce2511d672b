from __future__ import annotations

import asyncio
import logging

from fastmcp import FastMCP

from postcode_nl.app.container import Container, build_container
from postcode_nl.app.logger import configure_logging
from postcode_nl.tools.postcode_tools import register_postcode_tools

log = logging.getLogger(__name__)


def create_server() -> tuple[FastMCP, Container]:
    mcp = FastMCP("postcode-nl")
    container = build_container()
    register_postcode_tools(mcp, container)
    log.info("Postcode tools registered successfully")
    return mcp, container


async def serve(mcp: FastMCP, container: Container) -> None:
    """Run the HTTP transport until it stops, then release the API connection pool."""
    settings = container.settings
    try:
        await mcp.run_async(
            transport="http",
            host=settings.mcp_host,
            port=settings.mcp_port,
            path=settings.mcp_path,
        )
    finally:
        await container.aclose()


def main() -> None:
    configure_logging()
    try:
        mcp, container = create_server()
    except Exception as e:
        log.error("Failed to register postcode tools: %s", e, exc_info=True)
        raise

    asyncio.run(serve(mcp, container))


if __name__ == "__main__":
    main()
