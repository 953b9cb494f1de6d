"""Tests for the command-line interface."""

import json

from ingredient_lens import cli
from ingredient_lens.core import SingleResult, normalize
from ingredient_lens.providers.fallback import generate_fallback


def _apple_outcome():
    record = generate_fallback("apple")
    return SingleResult(normalize("사과", "apple", record, "mfds notice", "mhlw notice"))


def test_json_output(mocker, capsys):
    mocker.patch("ingredient_lens.cli.fetch_all", return_value=_apple_outcome())

    code = cli.main(["사과", "--json"])

    assert code == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload["fdcId"] == 171688
    assert payload["name"] == "사과"


def test_formatted_output(mocker, capsys):
    mocker.patch("ingredient_lens.cli.fetch_all", return_value=_apple_outcome())

    code = cli.main(["사과"])

    out = capsys.readouterr().out
    assert code == 0
    assert "FDC ID:" in out
    assert "171688" in out
    assert "농산물" in out


def test_empty_query_exits_with_error(capsys):
    code = cli.main(["  "])

    assert code == 1
    assert "검색어를 입력해주세요." in capsys.readouterr().err


def test_cli_builds_service_from_environment(mocker):
    service_cls = mocker.patch("ingredient_lens.core.IngredientService")
    service_cls.return_value.fetch_all.return_value = _apple_outcome()

    code = cli.main(["사과"])

    assert code == 0
    service_cls.assert_called_once_with(config=None)
    service_cls.return_value.fetch_all.assert_called_once_with("사과")
