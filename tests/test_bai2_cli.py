import csv
import io
import json

import pytest

from bai2_cli import build_arg_parser, get_config, main


@pytest.fixture
def clean_env(monkeypatch):
    for name in ("BAI2_LOG_LEVEL", "BAI2_DEFAULT_CURRENCY", "BAI2_STRICT"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


@pytest.fixture
def sample_path(tmp_path, sample_content):
    path = tmp_path / "sample.bai2"
    path.write_text(sample_content)
    return path


@pytest.fixture
def example_path(tmp_path, example_content):
    path = tmp_path / "example.bai2"
    path.write_text(example_content)
    return path


def test_get_config_defaults(clean_env):
    config = get_config()
    assert config["BAI2_LOG_LEVEL"] == "WARNING"
    assert config["BAI2_DEFAULT_CURRENCY"] == "USD"
    assert config["BAI2_STRICT"] is False


def test_get_config_reads_environment(clean_env):
    clean_env.setenv("BAI2_LOG_LEVEL", "debug")
    clean_env.setenv("BAI2_DEFAULT_CURRENCY", "CAD")
    clean_env.setenv("BAI2_STRICT", "true")

    config = get_config()
    assert config["BAI2_LOG_LEVEL"] == "DEBUG"
    assert config["BAI2_DEFAULT_CURRENCY"] == "CAD"
    assert config["BAI2_STRICT"] is True


def test_arg_parser_defaults():
    args = build_arg_parser().parse_args(["file.bai2"])
    assert args.path == "file.bai2"
    assert args.format == "json"
    assert args.output is None
    assert args.strict is None


def test_json_to_stdout(clean_env, sample_path, capsys):
    assert main([str(sample_path), "--log-level", "CRITICAL"]) == 0

    data = json.loads(capsys.readouterr().out)
    assert data["sender"] == "BANKID"
    assert len(data["groups"]) == 2


def test_transactions_csv(clean_env, sample_path, capsys):
    assert main([str(sample_path), "--format", "transactions-csv", "--log-level", "CRITICAL"]) == 0

    rows = list(csv.DictReader(io.StringIO(capsys.readouterr().out)))
    assert [r["type_code"] for r in rows] == ["195", "475", "142"]
    assert rows[1]["debit_amount"] == "50.00"


def test_balances_csv_to_output_file(clean_env, sample_path, tmp_path, capsys):
    out = tmp_path / "balances.csv"
    code = main([str(sample_path), "--format", "balances-csv", "-o", str(out), "--log-level", "CRITICAL"])

    assert code == 0
    assert capsys.readouterr().out == ""
    rows = list(csv.DictReader(io.StringIO(out.read_text())))
    assert [r["type_code"] for r in rows] == ["010", "015", "040"]


def test_missing_file_exits_with_2(clean_env, tmp_path, capsys):
    missing = tmp_path / "nope.bai2"
    assert main([str(missing), "--log-level", "CRITICAL"]) == 2
    assert f"could not read file `{missing}`" in capsys.readouterr().err


def test_malformed_file_exits_with_1(clean_env, tmp_path, capsys):
    path = tmp_path / "bad.bai2"
    path.write_text("01,A,B,250101,0800,F,80,10,2/\n02,B,A,1,250101,0800,USD,2/\n16,475,500,0,,,/\n")

    assert main([str(path), "--log-level", "CRITICAL"]) == 1
    err = capsys.readouterr().err
    assert "Failed to parse file:" in err
    assert "transaction detail found without account identifier" in err


def test_strict_flag(clean_env, example_path, capsys):
    assert main([str(example_path), "--log-level", "CRITICAL"]) == 0
    assert main([str(example_path), "--strict", "--log-level", "CRITICAL"]) == 1
    assert "control total mismatch" in capsys.readouterr().err


def test_strict_from_environment(clean_env, example_path, capsys):
    clean_env.setenv("BAI2_STRICT", "1")
    assert main([str(example_path), "--log-level", "CRITICAL"]) == 1


def test_currency_flag(clean_env, tmp_path, capsys):
    path = tmp_path / "nocurrency.bai2"
    path.write_text(
        "01,S,R,250101,0800,F,80,10,2/\n"
        "02,R,S,1,250101,0800,,2/\n"
        "03,A1,,010,100,,/\n"
        "49,100,2/\n"
        "98,100,1,4/\n"
        "99,100,1,6/\n"
    )
    assert main([str(path), "--currency", "GBP", "--log-level", "CRITICAL"]) == 0

    data = json.loads(capsys.readouterr().out)
    assert data["groups"][0]["currency_code"] == "GBP"
    assert data["groups"][0]["accounts"][0]["currency_code"] == "GBP"
