from typing import NamedTuple, Dict


class Token(NamedTuple):
    id: str
    name: str
    symbol: str


class Pair(NamedTuple):
    id: str
    created_at_timestamp: int
    token0: Token
    token1: Token


class Tag(NamedTuple):
    contract_address: str
    display_name: str
    project_name: str
    website_link: str
    note: str

    def as_dict(self) -> Dict[str, str]:
        """Camel-cased record as downstream registries expect it."""
        return {
            "contractAddress": self.contract_address,
            "displayName": self.display_name,
            "projectName": self.project_name,
            "websiteLink": self.website_link,
            "note": self.note,
        }
