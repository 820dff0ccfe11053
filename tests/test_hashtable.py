import pytest

from dsdemo.hashtable import HashEntry, HashTable, hash_function


def test_hash_of_empty_key_is_seed():
    assert hash_function("", 10**6) == 5381
    assert hash_function("", 5381) == 0


@pytest.mark.parametrize("key", ["alice", "bob", "é", "a much longer key than usual"])
@pytest.mark.parametrize("size", [1, 7, 101])
def test_hash_in_range_and_stable(key, size):
    index = hash_function(key, size)
    assert 0 <= index < size
    assert hash_function(key, size) == index


@pytest.mark.parametrize("size", [0, -3])
def test_bad_size_raises(size):
    with pytest.raises(ValueError):
        hash_function("x", size)
    with pytest.raises(ValueError):
        HashTable(size)


def test_insert_and_search():
    table = HashTable(5)
    table.insert("ann", 3.5)
    table.insert("ben", 2.0)
    assert table.search("ann") == HashEntry("ann", 3.5)
    assert table.search("ben").gpa == 2.0
    assert table.search("cat") is None


def test_insert_existing_updates_gpa():
    table = HashTable(3)
    table.insert("ann", 3.0)
    table.insert("ann", 4.0)
    entries = [e for bucket in table.buckets() for e in bucket]
    assert entries == [HashEntry("ann", 4.0)]


def test_newest_entry_first_in_chain():
    table = HashTable(1)
    table.insert("a", 1.0)
    table.insert("b", 2.0)
    assert [e.name for e in table.buckets()[0]] == ["b", "a"]


def test_delete():
    table = HashTable(1)
    for name in ["a", "b", "c"]:
        table.insert(name, 1.0)
    assert table.delete("b") is True
    assert table.delete("b") is False
    assert [e.name for e in table.buckets()[0]] == ["c", "a"]


def test_entry_lands_in_hashed_bucket():
    table = HashTable(11)
    table.insert("zoe", 3.0)
    assert table.buckets()[hash_function("zoe", 11)] == (HashEntry("zoe", 3.0),)


def test_format_single_entry():
    table = HashTable(1)
    table.insert("Ann", 3.5)
    assert table.format() == "Bucket 0: [Ann: 3.50] -> NULL\n"


def test_format_empty_table():
    assert HashTable(2).format() == "Bucket 0: NULL\nBucket 1: NULL\n"


def test_long_names_are_truncated():
    table = HashTable(1)
    table.insert("x" * 40, 1.0)
    assert len(table.buckets()[0][0].name) == 31


def test_clear_keeps_size():
    table = HashTable(4)
    table.insert("a", 1.0)
    table.clear()
    assert table.size == 4
    assert table.buckets() == [(), (), (), ()]