from __future__ import annotations

from dataclasses import dataclass

from postcode_nl.app.settings import Settings, get_settings
from postcode_nl.infra.http import HttpClient
from postcode_nl.services.postcode_service import PostcodeClient


@dataclass(frozen=True)
class Container:
    settings: Settings
    http: HttpClient
    client: PostcodeClient

    async def aclose(self) -> None:
        await self.http.aclose()


def build_container(settings: Settings | None = None) -> Container:
    settings = settings or get_settings()

    http = HttpClient(timeout_seconds=settings.http_timeout_seconds, user_agent=settings.http_user_agent)
    client = PostcodeClient(
        settings.postcode_tech_token,
        http=http,
        base_url=settings.postcode_tech_base_url,
    )

    return Container(settings=settings, http=http, client=client)
