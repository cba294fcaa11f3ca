import json
import logging

import pytest

from classic_snake.config import SCORES_KEY
from classic_snake.scores import ScoreStore


def test_missing_file_reads_as_zero(score_store):
    assert score_store.all_best() == {"easy": 0, "normal": 0, "hard": 0}


def test_set_best_persists_across_instances(score_path):
    ScoreStore(score_path).set_best("normal", 14)
    reopened = ScoreStore(score_path)
    assert reopened.get_best("normal") == 14
    assert reopened.get_best("easy") == 0


def test_file_layout_is_one_record_under_key(score_store, score_path):
    score_store.set_best("hard", 3)
    data = json.loads(score_path.read_text(encoding="utf-8"))
    assert data == {SCORES_KEY: {"easy": 0, "normal": 0, "hard": 3}}


def test_other_keys_in_file_are_kept(score_path):
    score_path.write_text(json.dumps({"volume": 5}), encoding="utf-8")
    ScoreStore(score_path).set_best("easy", 2)
    data = json.loads(score_path.read_text(encoding="utf-8"))
    assert data["volume"] == 5
    assert data[SCORES_KEY]["easy"] == 2


def test_corrupt_file_reads_as_zero(score_path, caplog):
    score_path.write_text("{not json", encoding="utf-8")
    with caplog.at_level(logging.WARNING):
        store = ScoreStore(score_path)
    assert store.get_best("easy") == 0
    assert "could not read scores" in caplog.text


@pytest.mark.parametrize("payload", [
    [1, 2, 3],
    {SCORES_KEY: "high"},
    {SCORES_KEY: None},
])
def test_malformed_record_reads_as_zero(score_path, payload):
    score_path.write_text(json.dumps(payload), encoding="utf-8")
    assert ScoreStore(score_path).all_best() == {"easy": 0, "normal": 0, "hard": 0}


def test_bad_values_read_as_zero(score_path):
    record = {"easy": -4, "normal": "9", "hard": True}
    score_path.write_text(json.dumps({SCORES_KEY: record}), encoding="utf-8")
    assert ScoreStore(score_path).all_best() == {"easy": 0, "normal": 0, "hard": 0}


def test_partial_record_fills_missing_difficulties(score_path):
    score_path.write_text(json.dumps({SCORES_KEY: {"hard": 8}}), encoding="utf-8")
    assert ScoreStore(score_path).all_best() == {"easy": 0, "normal": 0, "hard": 8}


def test_write_failure_is_logged_not_raised(tmp_path, caplog):
    blocker = tmp_path / "blocker"
    blocker.write_text("", encoding="utf-8")
    store = ScoreStore(blocker / "storage.json")
    with caplog.at_level(logging.WARNING):
        store.set_best("easy", 6)
    assert "could not save scores" in caplog.text
    # Still served from memory for the rest of the run.
    assert store.get_best("easy") == 6


def test_unknown_difficulty_rejected(score_store):
    with pytest.raises(ValueError):
        score_store.get_best("insane")
    with pytest.raises(ValueError):
        score_store.set_best("insane", 1)


def test_save_leaves_no_temp_file(score_store, score_path):
    score_store.set_best("normal", 4)
    assert sorted(p.name for p in score_path.parent.iterdir()) == [score_path.name]


def test_failed_replace_keeps_previous_record(score_path, monkeypatch, caplog):
    ScoreStore(score_path).set_best("easy", 11)

    def broken_replace(src, dst):
        raise OSError("disk full")

    monkeypatch.setattr("classic_snake.scores.os.replace", broken_replace)
    with caplog.at_level(logging.WARNING):
        ScoreStore(score_path).set_best("hard", 2)
    assert "could not save scores" in caplog.text
    monkeypatch.undo()

    reopened = ScoreStore(score_path)
    assert reopened.get_best("easy") == 11
    assert reopened.get_best("hard") == 0
