import re
from hexbytes import HexBytes
from pairtags.utils.constants import (
    TICKER_ALIASES,
    MIN_SYMBOL_LEN,
    MAX_SYMBOL_LEN,
    ELLIPSIS,
)

HEX_SYMBOL_RE = re.compile(r"(0x)?[0-9a-fA-F]{64}")


def is_hex_symbol(raw: str) -> bool:
    return HEX_SYMBOL_RE.fullmatch(raw.strip()) is not None


def _printable_ascii(text: str) -> str:
    return "".join(ch for ch in text if 2 <= ord(ch) <= 127)


def decode_symbol(raw: str) -> str:
    """
    Turn an on-chain symbol into something fit for display.

    A 64-hex-char value (bytes32 symbols, optional 0x, surrounding
    whitespace ignored) is decoded as UTF-8 with the null padding dropped.
    Anything outside printable ASCII is removed and the result trimmed.
    Returns "" unless 2-32 chars remain.
    """
    if is_hex_symbol(raw):
        text = bytes(HexBytes(raw.strip())).decode("utf-8", errors="replace").replace("\x00", "")
    else:
        text = raw

    cleaned = _printable_ascii(text).strip()
    if MIN_SYMBOL_LEN <= len(cleaned) <= MAX_SYMBOL_LEN:
        return cleaned
    return ""


def display_symbol(raw: str) -> str:
    # only raw-encoded symbols go through the decoder, best effort
    if is_hex_symbol(raw):
        return decode_symbol(raw) or raw.strip()
    return raw.strip()


def truncate(text: str, max_len: int) -> str:
    if len(text) <= max_len:
        return text
    return text[: max_len - len(ELLIPSIS)] + ELLIPSIS


def apply_aliases(text: str) -> str:
    for alias, ticker in TICKER_ALIASES.items():
        text = text.replace(alias, ticker)
    return text
