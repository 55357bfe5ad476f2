import pytest

from algobox.hashing import BUCKET_COUNT, ChainedHashTable, bucket_index

NAMES = [
    "Mudit", "Pushkar", "Arvind Tripathi", "Rachana Tripathi", "rishu",
    "sankalp", "Rishit", "princeS", "PrinceK", "krishan", "nishant",
    "kartikaye", "rakshit", "mayank", "LUV", "Ram", "komal", "aditya", "kush",
]


def test_bucket_index_of_empty_string():
    assert bucket_index("") == 0


@pytest.mark.parametrize("text", NAMES)
def test_bucket_index_in_range(text):
    assert 0 <= bucket_index(text) < BUCKET_COUNT


def test_bucket_index_ignores_order():
    assert bucket_index("Mudit") == bucket_index("tiduM")


def test_chain_order_places_new_values_after_first():
    table = ChainedHashTable()
    table.insert("abc")
    table.insert("cab")
    table.insert("bca")
    assert table.buckets()[bucket_index("abc")] == ["abc", "bca", "cab"]


def test_insert_returns_bucket_and_find_agrees():
    table = ChainedHashTable()
    for name in NAMES:
        index = table.insert(name)
        assert index == bucket_index(name)
        assert table.find(name) == index


def test_all_values_kept():
    table = ChainedHashTable(NAMES)
    assert len(table) == len(NAMES)
    assert sorted(table) == sorted(NAMES)
    for index, chain in enumerate(table.buckets()):
        assert all(bucket_index(name) == index for name in chain)


def test_find_missing_raises():
    table = ChainedHashTable(NAMES)
    with pytest.raises(KeyError):
        table.find("nobody")


def test_remove():
    table = ChainedHashTable(NAMES)
    table.remove("Ram")
    assert "Ram" not in table
    assert len(table) == len(NAMES) - 1
    with pytest.raises(KeyError):
        table.remove("Ram")


def test_remove_one_duplicate_only():
    table = ChainedHashTable(["kush", "kush"])
    table.remove("kush")
    assert "kush" in table
    assert len(table) == 1


def test_buckets_returns_copy():
    table = ChainedHashTable(["LUV"])
    snapshot = table.buckets()
    snapshot[bucket_index("LUV")].clear()
    assert table.find("LUV") == bucket_index("LUV")
    assert len(table.buckets()) == BUCKET_COUNT