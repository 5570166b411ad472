from pairtags.utils.clean_util import display_symbol, truncate, apply_aliases
from pairtags.utils.constants import PROJECT_NAME, WEBSITE_LINK, MAX_DISPLAY_PAIR_LEN
from pairtags.utils.types import Pair, Tag


def contract_address(chain_id: str, pair_id: str) -> str:
    return f"eip155:{chain_id}:{pair_id}"


def map_pair_to_tag(pair: Pair, chain_id: str) -> Tag:
    """Build the registry tag for a pair that already passed validation."""
    sym0 = display_symbol(pair.token0.symbol)
    sym1 = display_symbol(pair.token1.symbol)
    name0 = apply_aliases(pair.token0.name.strip())
    name1 = apply_aliases(pair.token1.name.strip())

    return Tag(
        contract_address=contract_address(chain_id, pair.id),
        display_name=f"{truncate(f'{sym0}/{sym1}', MAX_DISPLAY_PAIR_LEN)} Pair",
        project_name=PROJECT_NAME,
        website_link=WEBSITE_LINK,
        note=(
            f"The liquidity pool contract on {PROJECT_NAME} for the "
            f"{name0} ({sym0}) / {name1} ({sym1}) pair."
        ),
    )
