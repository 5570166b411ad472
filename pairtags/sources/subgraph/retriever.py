from __future__ import annotations

import logging
from typing import List, Optional, Protocol, Set

from pairtags.sources.subgraph.pairs_source import PairsPageFetcher
from pairtags.sources.subgraph.tag_mapper import map_pair_to_tag
from pairtags.utils.constants import PAGE_SIZE, SUPPORTED_CHAIN_ID
from pairtags.utils.errors import (
    PairTagsError,
    UnsupportedChainError,
    MissingCredentialError,
    MalformedResponseError,
    UnknownError,
)
from pairtags.utils.sanitize import filter_valid_pairs
from pairtags.utils.types import Pair, Tag

log = logging.getLogger(__name__)


class PageFetcher(Protocol):
    async def fetch_page(self, api_key: str, cursor: int) -> List[Pair]: ...


def check_preconditions(chain_id: str, api_key: str) -> None:
    if str(chain_id) != SUPPORTED_CHAIN_ID:
        raise UnsupportedChainError(chain_id)
    if not api_key or not api_key.strip():
        raise MissingCredentialError()


class PairTagRetriever:
    """Walks the pairs subgraph page by page and collects one tag per pair.

    The run is fail-fast: any page failure propagates and nothing collected
    so far is returned.
    """

    def __init__(self, fetcher: PageFetcher) -> None:
        self.fetcher = fetcher

    async def _fetch(self, api_key: str, cursor: int) -> List[Pair]:
        try:
            return await self.fetcher.fetch_page(api_key, cursor)
        except PairTagsError:
            raise
        except Exception as e:
            raise UnknownError(f"Unexpected failure fetching page after {cursor}: {e!r}") from e

    async def run(self, chain_id: str, api_key: str) -> List[Tag]:
        check_preconditions(chain_id, api_key)

        cursor = 0
        has_more = True
        seen: Set[str] = set()
        out: List[Tag] = []
        page_no = 0

        while has_more:
            page_no += 1
            page = await self._fetch(api_key, cursor)

            valid = filter_valid_pairs(page)
            added = 0
            for pair in valid:
                tag = map_pair_to_tag(pair, chain_id)
                if tag.contract_address in seen:
                    continue
                seen.add(tag.contract_address)
                out.append(tag)
                added += 1

            log.info(
                "📄 Page %d (cursor=%d): %d pairs, %d rejected, %d new tags",
                page_no, cursor, len(page), len(page) - len(valid), added,
            )

            has_more = len(page) == PAGE_SIZE
            if has_more:
                last_ts = page[-1].created_at_timestamp
                if last_ts < cursor:
                    raise MalformedResponseError(
                        f"Cursor would move backwards ({cursor} -> {last_ts})"
                    )
                if page[0].created_at_timestamp == last_ts:
                    # known limitation: a full page on one timestamp can't be walked past
                    log.warning("⚠️ Full page shares timestamp %d; pairs may be skipped", last_ts)
                cursor = last_ts

        log.info("✅ Retrieved %d tags for chain %s in %d pages", len(out), chain_id, page_no)
        return out


async def retrieve_tags(
    chain_id: str,
    api_key: str,
    fetcher: Optional[PageFetcher] = None,
) -> List[Tag]:
    """Entry point: every distinct, clean pair on `chain_id` as a Tag."""
    if fetcher is not None:
        return await PairTagRetriever(fetcher).run(chain_id, api_key)

    async with PairsPageFetcher() as owned:
        return await PairTagRetriever(owned).run(chain_id, api_key)
