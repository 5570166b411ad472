import json
from unittest.mock import patch, AsyncMock

from typer.testing import CliRunner

from pairtags.main import app
from pairtags.utils.errors import UnsupportedChainError
from pairtags.utils.types import Tag

runner = CliRunner()

TAG = Tag(
    contract_address="eip155:42161:0xabc",
    display_name="WETH/USDC Pair",
    project_name="Camelot",
    website_link="https://camelot.exchange",
    note="note",
)


def test_cli_prints_tags_as_json():
    with patch("pairtags.main.retrieve_tags", AsyncMock(return_value=[TAG])) as fake:
        result = runner.invoke(app, ["--chain-id", "42161", "--api-key", "k"])

    assert result.exit_code == 0
    fake.assert_awaited_once_with("42161", "k")
    assert json.loads(result.stdout) == [TAG.as_dict()]


def test_cli_writes_output_file(tmp_path):
    out = tmp_path / "tags.json"
    with patch("pairtags.main.retrieve_tags", AsyncMock(return_value=[TAG])):
        result = runner.invoke(app, ["--api-key", "k", "--output", str(out)])

    assert result.exit_code == 0
    assert json.loads(out.read_text())[0]["contractAddress"] == "eip155:42161:0xabc"


def test_cli_exits_nonzero_on_retrieval_error():
    with patch("pairtags.main.retrieve_tags", AsyncMock(side_effect=UnsupportedChainError("1"))):
        result = runner.invoke(app, ["--chain-id", "1", "--api-key", "k"])

    assert result.exit_code == 1
