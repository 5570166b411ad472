import os
import pathlib
from dotenv import load_dotenv

# Automatically load .env from project root
load_dotenv(dotenv_path=pathlib.Path(__file__).parent.parent.parent / ".env")

SUBGRAPH_API_KEY = os.getenv("SUBGRAPH_API_KEY", "")
SUBGRAPH_GATEWAY_URL = os.getenv("SUBGRAPH_GATEWAY_URL", "https://gateway.thegraph.com/api")
# Camelot v2 (Arbitrum) pairs subgraph
PAIRS_SUBGRAPH_ID = os.getenv("PAIRS_SUBGRAPH_ID", "8zagLSufxk5cVhzkzai3tyABwJh53zxn9tmUYJcJxijG")
SUBGRAPH_TIMEOUT = float(os.getenv("SUBGRAPH_TIMEOUT", "30"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")


def build_subgraph_url(api_key: str) -> str:
    return f"{SUBGRAPH_GATEWAY_URL.rstrip('/')}/{api_key}/subgraphs/id/{PAIRS_SUBGRAPH_ID}"
