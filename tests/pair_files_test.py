import pytest

from assoc import config
from assoc.dao.pair_files import load_pairs, save_pairs
from assoc.datastructures import AssocList
from assoc.errors import PairFileError


def test_load_pairs_keeps_order_and_skips_blank_lines(tmp_path):
    path = tmp_path / "pairs.csv"
    path.write_text("1,a\n\n2,b\n3,\"c,d\"\n", encoding="utf-8")
    assert load_pairs(str(path)).to_list() == [("1", "a"), ("2", "b"), ("3", "c,d")]


def test_load_pairs_rejects_bad_rows(tmp_path):
    path = tmp_path / "bad.csv"
    path.write_text("1,a\n2,b,extra\n", encoding="utf-8")
    with pytest.raises(PairFileError) as info:
        load_pairs(str(path))
    assert info.value.line == 2
    assert "expected 2 columns" in str(info.value)


def test_save_then_load(tmp_path):
    path = tmp_path / "out.csv"
    al = AssocList.from_pairs([("k1", "v1"), ("k2", "")])
    assert save_pairs(str(path), al) == 2
    assert load_pairs(str(path)) == al


def test_configured_delimiter(tmp_path, monkeypatch):
    monkeypatch.setattr(config, "CSV_DELIMITER", ";")
    path = tmp_path / "semi.csv"
    path.write_text("a;1\nb;2\n", encoding="utf-8")
    assert load_pairs(str(path)).to_list() == [("a", "1"), ("b", "2")]


def test_missing_file_raises_oserror(tmp_path):
    with pytest.raises(OSError):
        load_pairs(str(tmp_path / "nope.csv"))
