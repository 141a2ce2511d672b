from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()


@dataclass
class Settings:
    # postcode.tech
    postcode_tech_token: str
    postcode_tech_base_url: str

    # HTTP
    http_timeout_seconds: float | None
    http_user_agent: str

    # MCP server
    mcp_host: str
    mcp_port: int
    mcp_path: str


def _clean(s: str | None) -> str:
    return (s or "").strip().strip('"').strip("'")


def _int(name: str, default: int) -> int:
    v = _clean(os.getenv(name, str(default)))
    return int(v)


def _optional_float(name: str) -> float | None:
    v = _clean(os.getenv(name))
    return float(v) if v else None


def get_settings() -> Settings:
    """
    Read configuration from the environment (and .env).

    HTTP_TIMEOUT_SECONDS left unset means requests wait as long as the
    transport does; deadlines are the caller's choice.
    """
    token = _clean(os.getenv("POSTCODE_TECH_TOKEN"))
    if not token:
        raise RuntimeError("Missing POSTCODE_TECH_TOKEN in environment (.env).")

    return Settings(
        postcode_tech_token=token,
        postcode_tech_base_url=_clean(os.getenv("POSTCODE_TECH_BASE_URL", "https://postcode.tech")),
        http_timeout_seconds=_optional_float("HTTP_TIMEOUT_SECONDS"),
        http_user_agent=_clean(os.getenv("HTTP_USER_AGENT", "postcode-nl/0.1.0")),
        mcp_host=_clean(os.getenv("MCP_HOST", "127.0.0.1")),
        mcp_port=_int("MCP_PORT", 3334),
        mcp_path=_clean(os.getenv("MCP_PATH", "/mcp")),
    )
