import json
import pathlib
from typing import Callable, Dict, List

import httpx
import pytest
from dotenv import load_dotenv

from pairtags.sources.subgraph.pairs_source import PairsPageFetcher
from pairtags.utils.types import Pair, Token

# Automatically load .env from project root
load_dotenv(dotenv_path=pathlib.Path(__file__).parent.parent.parent / ".env")


def make_token(id: str = "0xt0", name: str = "Wrapped Ether", symbol: str = "WETH") -> Token:
    return Token(id=id, name=name, symbol=symbol)


def make_pair(id: str, ts: int, token0: Token = None, token1: Token = None) -> Pair:
    return Pair(
        id=id,
        created_at_timestamp=ts,
        token0=token0 or make_token("0xweth", "Wrapped Ether", "WETH"),
        token1=token1 or make_token("0xusdc", "USD Coin", "USDC"),
    )


def raw_pair(id: str, ts, name0="Wrapped Ether", sym0="WETH", name1="USD Coin", sym1="USDC") -> Dict:
    """Pair as the subgraph serializes it (BigInt as string)."""
    return {
        "id": id,
        "createdAtTimestamp": str(ts),
        "token0": {"id": "0xweth", "name": name0, "symbol": sym0},
        "token1": {"id": "0xusdc", "name": name1, "symbol": sym1},
    }


class StubFetcher:
    """Serves canned pages in order and records every cursor it was asked for."""

    def __init__(self, pages: List[List[Pair]]):
        self.pages = list(pages)
        self.calls: List[tuple] = []

    async def fetch_page(self, api_key: str, cursor: int) -> List[Pair]:
        self.calls.append((api_key, cursor))
        if not self.pages:
            return []
        return self.pages.pop(0)


@pytest.fixture
def stub_fetcher() -> Callable[[List[List[Pair]]], StubFetcher]:
    return StubFetcher


@pytest.fixture
def mock_fetcher():
    """Build a PairsPageFetcher backed by httpx.MockTransport.

    `handler` receives the httpx.Request; captured requests land in `.requests`.
    """
    def _build(handler):
        requests = []

        def _record(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return handler(request)

        client = httpx.AsyncClient(transport=httpx.MockTransport(_record))
        fetcher = PairsPageFetcher(client=client, url_builder=lambda key: f"https://subgraph.test/{key}")
        fetcher.requests = requests
        fetcher.client = client
        return fetcher

    return _build


def json_response(body, status: int = 200) -> httpx.Response:
    return httpx.Response(status, content=json.dumps(body).encode(), headers={"Content-Type": "application/json"})
