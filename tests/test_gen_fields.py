import json

import pytest

from gen_fields import main


def test_single_field_with_output(tmp_path, capsys):
    out = tmp_path / "fields.json"
    assert main(["-b", "12", "-k", "8", "-d", "2", "--verify", "-o", str(out)]) == 0

    data = json.loads(out.read_text(encoding="utf-8"))
    assert len(data) == 1
    assert data[0]["modulus"] == 3329
    assert data[0]["degree"] == 2
    assert "Verified" in capsys.readouterr().out


def test_config_fields(tmp_path):
    cfg = tmp_path / "cfg.json"
    cfg.write_text(json.dumps({"fields": [{"target_bits": 17, "k": 16}, {"target_bits": 12, "k": 8}]}),
                   encoding="utf-8")
    out = tmp_path / "fields.json"
    assert main(["-c", str(cfg), "-o", str(out), "--quiet"]) == 0
    assert [entry["modulus"] for entry in json.loads(out.read_text(encoding="utf-8"))] == [65537, 3329]


def test_invalid_request_exit_status(capsys):
    assert main(["-b", "8", "-k", "25"]) == 1
    assert "InvalidSpec" in capsys.readouterr().err


def test_exhausted_search_exit_status(capsys):
    assert main(["-b", "12", "-k", "8", "--max-trials", "2"]) == 1
    assert "SearchExhausted" in capsys.readouterr().err


def test_missing_config_file(tmp_path):
    assert main(["-c", str(tmp_path / "missing.json")]) == 2


def test_bits_requires_smooth_exponent():
    with pytest.raises(SystemExit):
        main(["-b", "12"])


def test_non_positive_max_trials_rejected():
    with pytest.raises(SystemExit):
        main(["-b", "12", "-k", "8", "--max-trials", "0"])


@pytest.mark.parametrize("key", ["max_modulus_trials", "max_root_trials", "max_polynomial_trials"])
def test_non_positive_config_bounds(tmp_path, capsys, key):
    cfg = tmp_path / "cfg.json"
    cfg.write_text(json.dumps({key: 0}), encoding="utf-8")
    assert main(["-c", str(cfg), "-b", "12", "-k", "8", "-d", "2"]) == 1
    assert "InvalidSpec" in capsys.readouterr().err


@pytest.mark.parametrize("text", ["{not json", "[1, 2]"])
def test_malformed_config_file(tmp_path, capsys, text):
    cfg = tmp_path / "cfg.json"
    cfg.write_text(text, encoding="utf-8")
    assert main(["-c", str(cfg)]) == 2
    assert "ERROR" in capsys.readouterr().err


def test_non_integer_field_entry(tmp_path, capsys):
    cfg = tmp_path / "cfg.json"
    cfg.write_text(json.dumps({"fields": [{"target_bits": "abc", "k": 8}]}), encoding="utf-8")
    assert main(["-c", str(cfg)]) == 1
    assert "InvalidSpec" in capsys.readouterr().err
