import io
import json
import logging

import pandas as pd

import run_analyzer

from payloads import post_selection_response, pre_selection_response, slot, trained_chara


def _write(tmp_path, name, payload):
    path = tmp_path / name
    path.write_text(json.dumps(payload, ensure_ascii=False), encoding="utf-8")
    return str(path)


def test_prints_each_response(tmp_path, capsys):
    pre = _write(tmp_path, "pre.json", pre_selection_response())
    post = _write(tmp_path, "post.json", post_selection_response())
    other = _write(tmp_path, "other.json", {"data": {"user_info": {}}})

    assert run_analyzer.main([pre, other, post, "--lang", "en"]) == 0

    out = capsys.readouterr().out
    assert out.count("------") == 3
    assert "Current opponent: Dave" in out
    assert out.index("#3: Carol") < out.index("Current opponent: Dave")


def test_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(json.dumps(post_selection_response())))

    assert run_analyzer.main(["-", "--lang", "en"]) == 0
    assert 'Style aptitude: {"A":1,"F":1}' in capsys.readouterr().out


def test_bad_input_is_reported_and_skipped(tmp_path, capsys, caplog):
    bad = _write(
        tmp_path,
        "bad.json",
        post_selection_response(team=[slot(1, 1, 1)], charas=[trained_chara(1, running_style_nige=12)]),
    )
    missing = str(tmp_path / "missing.json")
    good = _write(tmp_path, "good.json", pre_selection_response())

    with caplog.at_level(logging.ERROR, logger="teamstadium.cli"):
        assert run_analyzer.main([bad, missing, good]) == 1

    assert "#1: Alice" in capsys.readouterr().out
    messages = [record.getMessage() for record in caplog.records]
    assert any("bad.json" in message for message in messages)
    assert any("missing.json" in message for message in messages)


def test_output_writes_aptitude_csv(tmp_path):
    post = _write(tmp_path, "post.json", post_selection_response())
    pre = _write(tmp_path, "pre.json", pre_selection_response())
    target = tmp_path / "aptitudes.csv"

    assert run_analyzer.main([post, pre, "--output", str(target), "--lang", "en"]) == 0

    df = pd.read_csv(target)
    assert list(df["trained_chara_id"]) == [1, 2]
    assert list(df["surface_label"]) == ["Turf", "Dirt"]
    assert set(df["opponent_name"]) == {"Dave"}


def test_undecodable_file_is_reported_and_skipped(tmp_path, capsys, caplog):
    garbled = tmp_path / "garbled.json"
    garbled.write_bytes(b'{"data": {"name": "\xff\xfe"}}')
    good = _write(tmp_path, "good.json", pre_selection_response())

    with caplog.at_level(logging.ERROR, logger="teamstadium.cli"):
        assert run_analyzer.main([str(garbled), good]) == 1

    assert "#1: Alice" in capsys.readouterr().out
    assert any("garbled.json" in record.getMessage() for record in caplog.records)


def test_other_responses_log_below_info(tmp_path, capsys, caplog):
    other = _write(tmp_path, "other.json", {"data": {"user_info": {}}})

    with caplog.at_level(logging.INFO, logger="teamstadium.cli"):
        assert run_analyzer.main([other]) == 0

    assert capsys.readouterr().out == ""
    assert not [r for r in caplog.records if "not an opponent listing" in r.getMessage()]
