from __future__ import annotations

from types import TracebackType

from postcode_nl.core.models import Address, ExtendedAddress, LookupResult
from postcode_nl.core.validation import validate_query
from postcode_nl.infra.http import HttpClient
from postcode_nl.infra.providers.postcode_tech import DEFAULT_BASE_URL, PostcodeTechProvider


class PostcodeClient:
    """
    Async client for the Netherlands postcode API at https://postcode.tech.

    The token is kept as given and only checked by the service itself.
    Construction performs no I/O. One instance can be shared by many
    concurrent tasks.

        async with PostcodeClient("xxxxxxxx-xxxx-xxxx-xxxx-xxxxxxxxxxxx") as client:
            address, limits = await client.get_address("1012RJ", 147)
    """

    def __init__(
        self,
        api_token: str,
        *,
        http: HttpClient | None = None,
        base_url: str = DEFAULT_BASE_URL,
    ) -> None:
        self._owns_http = http is None
        self._http = http if http is not None else HttpClient()
        self._provider = PostcodeTechProvider(http=self._http, api_token=api_token, base_url=base_url)

    async def get_address(self, postcode: str, house_number: int) -> LookupResult[Address]:
        """
        Find the street and city for a postcode and house number.

        Postcodes are formatted 1234AB. House numbers are plain integers
        without additions such as 'A' or '-2'. Invalid input raises a
        ValidationError before any request is made.
        """
        postcode, house_number = validate_query(postcode, house_number)
        return await self._provider.lookup(postcode, house_number, extended=False)

    async def get_extended_address(self, postcode: str, house_number: int) -> LookupResult[ExtendedAddress]:
        """Like get_address, adding municipality, province and coordinates."""
        postcode, house_number = validate_query(postcode, house_number)
        return await self._provider.lookup(postcode, house_number, extended=True)

    async def aclose(self) -> None:
        # an injected HttpClient belongs to whoever passed it in
        if self._owns_http:
            await self._http.aclose()

    async def __aenter__(self) -> PostcodeClient:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()
