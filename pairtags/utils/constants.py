SUPPORTED_CHAIN_ID = "42161"  # Arbitrum One

PAGE_SIZE = 1000

PROJECT_NAME = "Camelot"
WEBSITE_LINK = "https://camelot.exchange"

# Names some tokens ship with that should read as the usual ticker
TICKER_ALIASES = {
    "USD//C": "USDC",
    # Add more as needed
}

MIN_SYMBOL_LEN = 2
MAX_SYMBOL_LEN = 32
MAX_DISPLAY_PAIR_LEN = 45
ELLIPSIS = "..."
