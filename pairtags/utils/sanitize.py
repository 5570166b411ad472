# pairtags/utils/sanitize.py
import logging
import re
from typing import Iterable, List
from pairtags.utils.types import Pair, Token

log = logging.getLogger(__name__)

MARKUP_RE = re.compile(r"<[^>]*>")


def contains_markup(text: str) -> bool:
    """True if `text` carries anything that looks like an HTML/markup tag."""
    return bool(MARKUP_RE.search(text))


def is_contaminated(token: Token) -> bool:
    return contains_markup(token.name) or contains_markup(token.symbol)


def is_valid_pair(pair: Pair) -> bool:
    """Reject the pair if either token has markup in its name or symbol.

    Every offending token is reported, not just the first one.
    """
    valid = True
    for token in (pair.token0, pair.token1):
        if is_contaminated(token):
            log.warning(
                "🚫 Skipping pair %s: token %s has markup (name=%r, symbol=%r)",
                pair.id, token.id, token.name, token.symbol,
            )
            valid = False
    return valid


def filter_valid_pairs(pairs: Iterable[Pair]) -> List[Pair]:
    return [p for p in pairs if is_valid_pair(p)]
