import pytest

from marketdesk.linefile import delete_line_from_file, replace_line_in_file


@pytest.fixture
def sample(tmp_path):
    path = tmp_path / "Users.txt"
    path.write_text("first\nsecond\nthird\n", encoding="utf-8")
    return path


def _lines(path):
    return path.read_text(encoding="utf-8").split("\n")[:-1]


def test_replace_middle_line(sample):
    replace_line_in_file(sample, 2, "changed")
    assert _lines(sample) == ["first", "changed", "third"]


def test_replace_keeps_line_count(sample):
    before = len(_lines(sample))
    replace_line_in_file(sample, 1, "x")
    assert len(_lines(sample)) == before
    assert _lines(sample)[0] == "x"


def test_replace_beyond_end_pads_with_empty_lines(sample):
    replace_line_in_file(sample, 6, "tail")
    lines = _lines(sample)
    assert len(lines) == 6
    assert lines[:3] == ["first", "second", "third"]
    assert lines[3:5] == ["", ""]
    assert lines[5] == "tail"


def test_replace_directly_after_end(sample):
    replace_line_in_file(sample, 4, "fourth")
    assert _lines(sample) == ["first", "second", "third", "fourth"]


def test_replace_in_empty_file(tmp_path):
    path = tmp_path / "empty.txt"
    path.write_text("", encoding="utf-8")
    replace_line_in_file(path, 1, "only")
    assert path.read_text(encoding="utf-8") == "only\n"


def test_last_line_without_newline_gets_one(tmp_path):
    path = tmp_path / "data.txt"
    path.write_text("a\nb", encoding="utf-8")
    replace_line_in_file(path, 1, "c")
    assert path.read_text(encoding="utf-8").endswith("b\n")
    assert _lines(path) == ["c", "b"]


def test_delete_middle_line(sample):
    delete_line_from_file(sample, 2)
    assert _lines(sample) == ["first", "third"]


def test_delete_reduces_count(sample):
    before = len(_lines(sample))
    delete_line_from_file(sample, 3)
    assert len(_lines(sample)) == before - 1
    assert "third" not in _lines(sample)


def test_delete_out_of_range_leaves_content(sample):
    original = sample.read_text(encoding="utf-8")
    delete_line_from_file(sample, 10)
    assert sample.read_text(encoding="utf-8") == original


def test_no_temporary_files_left(sample):
    replace_line_in_file(sample, 1, "x")
    delete_line_from_file(sample, 2)
    assert [p.name for p in sample.parent.iterdir()] == [sample.name]


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        replace_line_in_file(tmp_path / "absent.txt", 1, "x")
    with pytest.raises(FileNotFoundError):
        delete_line_from_file(tmp_path / "absent.txt", 1)