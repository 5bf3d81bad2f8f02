# tests/test_frequency_table.py

from freq_autocompleter.core.frequency_table import FrequencyEntry, FrequencyTable


def test_counts_in_first_seen_order():
    table = FrequencyTable.from_words(["the", "cat", "the", "ant", "cat", "the"])
    assert table.entries() == [
        FrequencyEntry("the", 3),
        FrequencyEntry("cat", 2),
        FrequencyEntry("ant", 1),
    ]
    assert len(table) == 3
    assert table.total() == 6
    assert "cat" in table and "dog" not in table


def test_empty_input():
    table = FrequencyTable.from_words([])
    assert len(table) == 0
    assert table.entries() == []
    assert table.frequency("x") == 0


def test_building_twice_is_independent():
    a = FrequencyTable.from_words(["x", "y"])
    b = FrequencyTable.from_words(["x"])
    assert a.frequency("x") == 1 and a.frequency("y") == 1
    assert b.frequency("y") == 0


def test_sorted_entries_and_save(tmp_path):
    table = FrequencyTable.from_words(["pear", "apple", "pear", "fig"])
    assert [e.word for e in table.sorted_entries()] == ["apple", "fig", "pear"]
    out = tmp_path / "dict.csv"
    table.save(out)
    assert out.read_text(encoding="utf-8").splitlines() == ["apple,1", "fig,1", "pear,2"]


def test_entry_str():
    assert str(FrequencyEntry("cat", 4)) == "cat,4"
