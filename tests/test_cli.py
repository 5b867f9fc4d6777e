import json

import pytest
import yaml

from ygo_hand_sim import cli


@pytest.fixture(autouse=True)
def no_logging_setup(monkeypatch):
    monkeypatch.setattr(cli, "setup_logging", lambda *args, **kwargs: None)


def test_check(sample_yaml_path, capsys):
    assert cli.main(["check", str(sample_yaml_path)]) == 0
    out = capsys.readouterr().out
    assert "Deck: 10 cards (40 slots), 5 unique" in out
    assert "Conditions: 4" in out
    assert "  ((Snake-Eye Ash OR Snake-Eye Oak) AND Pot of Prosperity)" in out


def test_normalize_to_file(sample_yaml_path, tmp_path):
    output = tmp_path / "normalized.yaml"
    assert cli.main(["normalize", str(sample_yaml_path), "-o", str(output)]) == 0
    data = yaml.safe_load(output.read_text(encoding="utf-8"))
    assert data["deck"]["Pot of Prosperity"] == {"qty": 1, "tags": [], "free": True}
    assert data["conditions"][1] == "2+ Ash Blossom & Joyous Spring"


def test_parse_prints_canonical_text(capsys):
    assert cli.main(["parse", "CardA OR 2+ CardB"]) == 0
    assert capsys.readouterr().out.strip() == "(CardA OR 2+ CardB)"


def test_parse_json(capsys):
    assert cli.main(["parse", "--json", "3 CardA"]) == 0
    assert json.loads(capsys.readouterr().out) == {
        "kind": "card",
        "card_name": "CardA",
        "quantity": 3,
        "operator": "=",
    }


def test_parse_error_exit_code(capsys):
    assert cli.main(["parse", "CardA AND CardB OR CardC"]) == 1
    assert "Cannot mix AND and OR" in capsys.readouterr().err


def test_convert_ydk_to_stdout(sample_ydk_path, capsys):
    assert cli.main(["convert-ydk", str(sample_ydk_path)]) == 0
    data = yaml.safe_load(capsys.readouterr().out)
    assert data["deck"]["14558127"] == {"qty": 3, "tags": []}


def test_invalid_document_exit_code(tmp_path, capsys):
    path = tmp_path / "bad.yaml"
    path.write_text("deck: []\nconditions: []\n")
    assert cli.main(["check", str(path)]) == 1
    assert "Failed to parse bad.yaml" in capsys.readouterr().err


def test_missing_file_exit_code(tmp_path, capsys):
    assert cli.main(["check", str(tmp_path / "missing.yaml")]) == 1
    assert "Error:" in capsys.readouterr().err


def test_missing_config_exit_code(sample_yaml_path, tmp_path, capsys):
    assert cli.main(["--config", str(tmp_path / "nope.ini"), "check", str(sample_yaml_path)]) == 1
    assert "configuration file was not found" in capsys.readouterr().err
