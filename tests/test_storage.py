import json

from gridsnake.session import Session
from gridsnake.storage import BEST_SCORE_KEY, BestScoreStore, MemoryScoreStore


def test_missing_file_reads_zero(tmp_path):
    assert BestScoreStore(tmp_path / "nope.json").get() == 0


def test_roundtrip(tmp_path):
    store = BestScoreStore(tmp_path / "sub" / "scores.json")
    store.set(130)
    assert store.get() == 130


def test_corrupt_payloads_read_zero(tmp_path):
    path = tmp_path / "scores.json"
    for payload in ("not json", "[1, 2]", json.dumps({BEST_SCORE_KEY: -5}),
                    json.dumps({BEST_SCORE_KEY: "abc"}), json.dumps({}),
                    '{"snake_best_score": Infinity}', '{"snake_best_score": -Infinity}',
                    '{"snake_best_score": 1e400}', '{"snake_best_score": NaN}'):
        path.write_text(payload)
        assert BestScoreStore(path).get() == 0


def test_numeric_string_is_accepted(tmp_path):
    path = tmp_path / "scores.json"
    path.write_text(json.dumps({BEST_SCORE_KEY: "40"}))
    assert BestScoreStore(path).get() == 40


def test_unavailable_store_never_raises(tmp_path):
    # a directory can be neither read nor written as a file
    store = BestScoreStore(tmp_path)
    assert store.get() == 0
    store.set(10)


def test_memory_store():
    store = MemoryScoreStore(5)
    store.set(20)
    assert store.get() == 20


def test_non_finite_file_does_not_block_startup(tmp_path):
    path = tmp_path / "scores.json"
    path.write_text('{"snake_best_score": Infinity}')
    session = Session(BestScoreStore(path))
    assert session.state.best_score == 0
