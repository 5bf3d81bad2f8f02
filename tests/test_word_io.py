# tests/test_word_io.py

from freq_autocompleter.utils.word_io import read_words, save_lines, split_words


def test_split_words_delimiters_and_case():
    assert split_words("The cat,sat\nON  the,,mat\n") == ["the", "cat", "sat", "on", "the", "mat"]


def test_split_words_empty():
    assert split_words("") == []
    assert split_words(" ,\n") == []


def test_read_words(tmp_path):
    p = tmp_path / "words.csv"
    p.write_text("Frodo,Sam\nfrodo gandalf\n", encoding="utf-8")
    assert read_words(p) == ["frodo", "sam", "frodo", "gandalf"]


def test_save_lines(tmp_path):
    p = tmp_path / "out.csv"
    save_lines(["a,1.0,", 3], p)
    assert p.read_text(encoding="utf-8") == "a,1.0,\n3\n"
