import httpx
import logging
from typing import Any, Callable, Dict, List, Optional
from pairtags.config.settings import build_subgraph_url, SUBGRAPH_TIMEOUT
from pairtags.utils.constants import PAGE_SIZE
from pairtags.utils.errors import (
    TransportError,
    UpstreamQueryError,
    MalformedResponseError,
)
from pairtags.utils.query_bank import PAIRS_QUERY
from pairtags.utils.types import Pair, Token

log = logging.getLogger(__name__)

HEADERS = {
    "Content-Type": "application/json",
    "Accept": "application/json",
}


def _require(obj: Dict[str, Any], key: str, kind: type, where: str) -> Any:
    value = obj.get(key)
    if not isinstance(value, kind) or isinstance(value, bool):
        raise MalformedResponseError(
            f"{where}: expected '{key}' to be {kind.__name__}, got {type(value).__name__}"
        )
    return value


def _parse_timestamp(value: Any, where: str) -> int:
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    if isinstance(value, str) and value.isascii() and value.isdigit():
        return int(value)
    raise MalformedResponseError(f"{where}: bad createdAtTimestamp {value!r}")


def _parse_token(raw: Any, where: str) -> Token:
    if not isinstance(raw, dict):
        raise MalformedResponseError(f"{where}: token is not an object")
    return Token(
        id=_require(raw, "id", str, where),
        name=_require(raw, "name", str, where),
        symbol=_require(raw, "symbol", str, where),
    )


def _parse_pair(raw: Any, index: int) -> Pair:
    where = f"pairs[{index}]"
    if not isinstance(raw, dict):
        raise MalformedResponseError(f"{where}: pair is not an object")
    return Pair(
        id=_require(raw, "id", str, where),
        created_at_timestamp=_parse_timestamp(raw.get("createdAtTimestamp"), where),
        token0=_parse_token(raw.get("token0"), f"{where}.token0"),
        token1=_parse_token(raw.get("token1"), f"{where}.token1"),
    )


def _error_messages(errors: List[Any]) -> List[str]:
    messages = []
    for err in errors:
        if isinstance(err, dict) and isinstance(err.get("message"), str):
            messages.append(err["message"])
        else:
            messages.append(str(err))
    return messages


def parse_pairs_envelope(payload: Any) -> List[Pair]:
    """
    Validate a subgraph response body and return its pairs in order.

    Upstream `errors` win over `data`: every message is logged, then
    UpstreamQueryError is raised. Anything that is not exactly
    {"data": {"pairs": [...]}} raises MalformedResponseError.
    """
    if not isinstance(payload, dict):
        raise MalformedResponseError(f"Response body is {type(payload).__name__}, expected object")

    errors = payload.get("errors")
    if errors is not None:
        if not isinstance(errors, list):
            raise MalformedResponseError("'errors' is not a list")
        if errors:
            messages = _error_messages(errors)
            for msg in messages:
                log.error("❌ Subgraph error: %s", msg)
            raise UpstreamQueryError(messages)

    data = payload.get("data")
    if not isinstance(data, dict):
        raise MalformedResponseError("Response has no 'data' object")
    raw_pairs = data.get("pairs")
    if not isinstance(raw_pairs, list):
        raise MalformedResponseError("Response has no 'data.pairs' list")
    if len(raw_pairs) > PAGE_SIZE:
        raise MalformedResponseError(f"Page holds {len(raw_pairs)} pairs, limit is {PAGE_SIZE}")

    pairs = [_parse_pair(raw, i) for i, raw in enumerate(raw_pairs)]
    for prev, cur in zip(pairs, pairs[1:]):
        if cur.created_at_timestamp < prev.created_at_timestamp:
            raise MalformedResponseError(
                f"Pairs out of order: {cur.id} created before {prev.id}"
            )
    return pairs


class PairsPageFetcher:
    """Fetches one page of pairs created after a timestamp cursor.

    Pass an `httpx.AsyncClient` to share one; otherwise the fetcher opens its
    own and closes it on `aclose()` / context exit. One attempt per page.
    """

    def __init__(
        self,
        client: Optional[httpx.AsyncClient] = None,
        url_builder: Callable[[str], str] = build_subgraph_url,
        timeout: float = SUBGRAPH_TIMEOUT,
    ) -> None:
        self._client = client
        self._owns_client = client is None
        self.url_builder = url_builder
        self.timeout = timeout

    async def __aenter__(self) -> "PairsPageFetcher":
        return self

    async def __aexit__(self, *exc) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client and self._client is not None:
            await self._client.aclose()
            self._client = None

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self.timeout)
        return self._client

    async def fetch_page(self, api_key: str, cursor: int) -> List[Pair]:
        body = {"query": PAIRS_QUERY, "variables": {"lastTimestamp": cursor}}
        client = self._get_client()

        try:
            resp = await client.post(self.url_builder(api_key), json=body, headers=HEADERS)
        except httpx.HTTPError as e:
            raise TransportError(f"Subgraph request failed: {e}") from e

        if not resp.is_success:
            raise TransportError(
                f"Subgraph returned HTTP {resp.status_code}", status_code=resp.status_code
            )

        try:
            payload = resp.json()
        except ValueError as e:
            raise MalformedResponseError(f"Response is not JSON: {e}") from e

        pairs = parse_pairs_envelope(payload)
        log.debug("Fetched %d pairs after cursor %d", len(pairs), cursor)
        return pairs
