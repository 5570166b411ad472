from typing import List, Optional


class PairTagsError(Exception):
    """Base class for every failure that aborts a tag retrieval."""


class UnsupportedChainError(PairTagsError):
    def __init__(self, chain_id: str) -> None:
        self.chain_id = chain_id
        super().__init__(f"Unsupported chain id: {chain_id!r}")


class MissingCredentialError(PairTagsError):
    def __init__(self) -> None:
        super().__init__("Missing subgraph API key")


class TransportError(PairTagsError):
    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        self.status_code = status_code
        super().__init__(message)


class UpstreamQueryError(PairTagsError):
    """GraphQL-level failure; keeps every message the service returned."""

    def __init__(self, messages: List[str]) -> None:
        self.messages = list(messages) or ["Unknown upstream error"]
        super().__init__(self.messages[0])


class MalformedResponseError(PairTagsError):
    pass


class UnknownError(PairTagsError):
    pass
