import json

from game.shooter import JsonProgressStore, MemoryProgressStore, config


def test_memory_store_defaults():
    store = MemoryProgressStore()
    assert store.get_unlocked() == 1
    store.set_unlocked(3)
    assert store.get_unlocked() == 3


def test_json_store_round_trip(tmp_path):
    path = tmp_path / "nested" / "progress.json"
    store = JsonProgressStore(str(path))
    assert store.get_unlocked() == 1
    store.set_unlocked(2)
    assert json.loads(path.read_text()) == {"unlocked_level": 2}
    assert JsonProgressStore(str(path)).get_unlocked() == 2


def test_json_store_bad_content(tmp_path):
    path = tmp_path / "progress.json"
    path.write_text("not json")
    assert JsonProgressStore(str(path)).get_unlocked() == 1
    path.write_text(json.dumps({"something": 3}))
    assert JsonProgressStore(str(path)).get_unlocked() == 1


def test_json_store_clamps_values(tmp_path):
    path = tmp_path / "progress.json"
    path.write_text(json.dumps({"unlocked_level": 99}))
    assert JsonProgressStore(str(path)).get_unlocked() == config.MAX_LEVEL + 1
    path.write_text(json.dumps({"unlocked_level": -5}))
    assert JsonProgressStore(str(path)).get_unlocked() == 1


def test_json_store_write_failure_is_not_fatal(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("")
    store = JsonProgressStore(str(blocker / "progress.json"))
    store.set_unlocked(2)
    assert store.get_unlocked() == 1
