# pairtags/main.py
import asyncio
import json
import logging
from typing import Optional

import typer

from pairtags.config.settings import SUBGRAPH_API_KEY, LOG_LEVEL
from pairtags.sources.subgraph.retriever import retrieve_tags
from pairtags.utils.constants import SUPPORTED_CHAIN_ID
from pairtags.utils.errors import PairTagsError
from pairtags.utils.shortname import ShortNameFilter

log = logging.getLogger(__name__)

app = typer.Typer(help="Export DEX pair contracts as address tags")


def setup_logging(level: str = LOG_LEVEL) -> None:
    handler = logging.StreamHandler()
    handler.addFilter(ShortNameFilter())
    logging.basicConfig(
        level=level.upper(),
        format="[%(levelname)s] %(shortname)s: %(message)s",
        handlers=[handler],
    )


@app.command("run")
def run(
    chain_id: str = typer.Option(SUPPORTED_CHAIN_ID, help="EIP-155 chain id, e.g. 42161"),
    api_key: str = typer.Option(SUBGRAPH_API_KEY, help="Subgraph gateway API key"),
    output: Optional[str] = typer.Option(None, help="Write JSON here instead of stdout"),
):
    """
    Pull every pair from the subgraph and print the tags as JSON.
    """
    setup_logging()
    try:
        tags = asyncio.run(retrieve_tags(chain_id, api_key))
    except PairTagsError as e:
        log.error(f"❌ Retrieval failed ({type(e).__name__}): {e}")
        raise typer.Exit(code=1)

    payload = json.dumps([t.as_dict() for t in tags], indent=2)
    if output:
        with open(output, "w", encoding="utf-8") as f:
            f.write(payload)
        log.info(f"💾 Wrote {len(tags)} tags to {output}")
    else:
        typer.echo(payload)


def main():
    app()

if __name__ == "__main__":
    main()
