import sys
import os
import threading

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "..", "src"))
from base58id import ALPHABET, BASE, initialize, value_of


def test_alphabet_shape():
    assert BASE == 58
    assert len(set(ALPHABET)) == 58
    for char in "0OIl":
        assert char not in ALPHABET


def test_index_has_exactly_58_entries():
    index = initialize()
    assert len(index) == 58
    assert sorted(index.values()) == list(range(58))
    for value, char in enumerate(ALPHABET):
        assert index[char] == value


def test_initialize_is_idempotent():
    first = initialize()
    assert initialize() is first


def test_initialize_from_many_threads():
    results = []
    threads = [threading.Thread(target=lambda: results.append(initialize())) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert all(r is results[0] for r in results)


def test_index_is_read_only():
    index = initialize()
    with pytest.raises(TypeError):
        index["0"] = 0
    assert "0" not in index


def test_value_of():
    assert value_of("1") == 0
    assert value_of("z") == 57
    assert value_of("A") == 9
    assert value_of("a") == 33
    for char in ["0", "O", "I", "l", "-", " ", "\x7f", "\x80", "é", "가", "\U0001F600"]:
        assert value_of(char) is None
    assert value_of("") is None
    assert value_of("12") is None
    assert value_of(None) is None
