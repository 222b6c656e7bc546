"""
Fetch an SCE inventory page by Steam app id and extract it.

- `build_inventory_url`: fills the app id into the fixed inventory URL template
- `fetch_inventory_page`: issues a single GET and returns the page markup
- `fetch_and_parse`: fetch -> extract -> serialize, always resolving to JSON text

No retries and no client-side timeout; a hanging transport keeps the call pending.
"""
import logging

import httpx
from httpx import AsyncClient

from src.sce.document import parse_document
from src.sce.extract import extract
from src.sce.serialize import SerializationError, error_payload, serialize

SCE_BASE_URL = "https://www.steamcardexchange.net/"
INVENTORY_URL_TEMPLATE = SCE_BASE_URL + "index.php?inventorygame-appid-{appid}"


class InventoryFetchError(RuntimeError):
    def __init__(self, appid: str, message: str):
        super().__init__(f"appid={appid}: {message}")
        self.appid = appid


def build_inventory_url(appid: str) -> str:
    return INVENTORY_URL_TEMPLATE.format(appid=appid)


def _new_client() -> AsyncClient:
    return AsyncClient(timeout=None, follow_redirects=True)


async def fetch_inventory_page(client: AsyncClient, appid: str) -> str:
    """GET the inventory page for appid, raising InventoryFetchError on any failure."""
    url = build_inventory_url(appid)
    logging.info("Calling %s", url)
    try:
        response = await client.get(url, follow_redirects=True)
    except (httpx.HTTPError, httpx.InvalidURL) as exc:
        raise InventoryFetchError(appid, f"{type(exc).__name__}: {exc}") from exc
    if not response.is_success:
        raise InventoryFetchError(appid, f"HTTP {response.status_code}")
    return response.text


async def fetch_and_parse(appid: str, client: AsyncClient | None = None) -> str:
    """
    Fetch and extract the inventory page for appid.

    Resolves to GameInfo JSON on success, otherwise to `{"error": "..."}`:
    - "fetch failed: ..." when the request fails or returns a non-2xx status
    - "serialization failed: ..." when the extracted record cannot be serialized

    Redirects are followed for every client, including one passed by the caller,
    so a redirected page costs more than one request. A caller-supplied client
    is otherwise used as-is and left open.
    """
    try:
        if client is None:
            async with _new_client() as own_client:
                html = await fetch_inventory_page(own_client, appid)
        else:
            html = await fetch_inventory_page(client, appid)
    except InventoryFetchError as exc:
        logging.warning("Failed to fetch inventory page: %s", exc)
        return error_payload(f"fetch failed: {exc}")

    info = extract(parse_document(html))
    try:
        return serialize(info)
    except SerializationError as exc:
        logging.warning("Failed to serialize inventory page appid=%s: %s", appid, exc)
        return error_payload(f"serialization failed: {exc}")
