from __future__ import annotations

import logging
from typing import Annotated, Any

from fastmcp import FastMCP
from pydantic import BaseModel, Field

from postcode_nl.app.container import Container
from postcode_nl.core.errors import PostcodeError, RateLimited
from postcode_nl.services.postcode_service import PostcodeClient

log = logging.getLogger(__name__)

PostcodeParam = Annotated[str, Field(description="Dutch postcode without space, e.g. 1012RJ")]
HouseNumberParam = Annotated[int, Field(description="House number without addition, e.g. 147")]


class LookupArgs(BaseModel):
    postcode: PostcodeParam
    house_number: HouseNumberParam


def _error_block(e: PostcodeError) -> dict[str, Any]:
    block: dict[str, Any] = {"type": type(e).__name__, "message": str(e)}
    if isinstance(e, RateLimited):
        block["limits"] = e.limits.to_dict()
    return block


async def lookup(client: PostcodeClient, args: LookupArgs, *, extended: bool) -> dict[str, Any]:
    """
    Run one lookup and shape it for a tool response.

    Library errors end up in the "error" block so the model calling the tool
    can read what went wrong.
    """
    try:
        if extended:
            result = await client.get_extended_address(args.postcode, args.house_number)
        else:
            result = await client.get_address(args.postcode, args.house_number)
    except PostcodeError as e:
        log.warning("Lookup %s %s failed: %s", args.postcode, args.house_number, e)
        return {"found": False, "address": None, "limits": None, "error": _error_block(e)}

    return {**result.to_dict(), "error": None}


def register_postcode_tools(mcp: FastMCP, container: Container) -> None:
    client = container.client

    @mcp.tool(
        name="get_address",
        description=(
            "Look up the street and city of a Dutch address from its postcode (1234AB) and house number. "
            "Returns found=false when the combination does not exist."
        ),
    )
    async def get_address(postcode: PostcodeParam, house_number: HouseNumberParam) -> dict[str, Any]:
        args = LookupArgs(postcode=postcode, house_number=house_number)
        return await lookup(client, args, extended=False)

    @mcp.tool(
        name="get_extended_address",
        description=(
            "Look up a Dutch address from its postcode (1234AB) and house number, including municipality, "
            "province and WGS84 coordinates."
        ),
    )
    async def get_extended_address(postcode: PostcodeParam, house_number: HouseNumberParam) -> dict[str, Any]:
        args = LookupArgs(postcode=postcode, house_number=house_number)
        return await lookup(client, args, extended=True)
