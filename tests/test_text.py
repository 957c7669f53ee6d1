import pytest

from jonoondb.exceptions import InvalidArgumentException
from jonoondb.text import normalize_path, split


def test_split_dotted_name():
    assert split("a.b.c", ".") == ["a", "b", "c"]


def test_split_drops_empty_tokens():
    assert split("..a..b.", ".") == ["a", "b"]


def test_split_multiple_separators():
    assert split("x,y;z", ",;") == ["x", "y", "z"]


def test_split_without_separator_present():
    assert split("field", ".") == ["field"]


def test_split_empty_text():
    assert split("", ".") == []
    assert split("...", ".") == []


def test_split_join_round_trip():
    parts = ["nested", "field", "value"]
    assert split(".".join(parts), ".") == parts


def test_normalize_appends_slash():
    assert normalize_path("/tmp/db") == "/tmp/db/"


def test_normalize_keeps_existing_slash():
    assert normalize_path("/tmp/db/") == "/tmp/db/"


def test_normalize_is_idempotent():
    once = normalize_path("some/dir")
    assert normalize_path(once) == once


def test_normalize_empty_raises():
    with pytest.raises(InvalidArgumentException):
        normalize_path("")