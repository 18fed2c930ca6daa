import pytest

from searchtrees.sequence_st import SequenceST


@pytest.fixture
def table():
    st = SequenceST()
    for key, value in [("a", 1), ("b", 2), ("c", 3)]:
        st.insert(key, value)
    return st


def test_new_table_is_empty():
    st = SequenceST()
    assert st.is_empty()
    assert len(st) == 0
    assert list(st) == []
    assert st.search("x") is None
    assert "x" not in st


def test_insert_and_search_round_trip(table):
    assert len(table) == 3
    assert not table.is_empty()
    assert table.search("a") == 1
    assert table.search("b") == 2
    assert table.search("c") == 3
    assert "b" in table
    assert "z" not in table
    assert table.search("z") is None


def test_insert_existing_key_updates_without_growing(table):
    table.insert("b", 20)
    assert len(table) == 3
    assert table.search("b") == 20
    assert list(table) == ["c", "b", "a"]


def test_iteration_is_newest_first(table):
    assert list(table) == ["c", "b", "a"]


def test_remove_head(table):
    table.remove("c")
    assert len(table) == 2
    assert "c" not in table
    assert list(table) == ["b", "a"]


def test_remove_middle(table):
    table.remove("b")
    assert list(table) == ["c", "a"]
    assert table.search("a") == 1


def test_remove_tail(table):
    table.remove("a")
    assert list(table) == ["c", "b"]
    assert len(table) == 2


def test_remove_missing_key_is_noop(table):
    table.remove("missing")
    assert len(table) == 3
    SequenceST().remove("anything")


def test_remove_everything_empties_table(table):
    for key in ["a", "b", "c"]:
        table.remove(key)
    assert table.is_empty()
    assert list(table) == []


def test_word_frequency_counting():
    words = ["the", "cat", "the", "dog", "the", "cat"]
    st = SequenceST()
    for word in words:
        current = st.search(word)
        st.insert(word, 1 if current is None else current + 1)
    for word in set(words):
        assert st.search(word) == words.count(word)
    assert len(st) == len(set(words))