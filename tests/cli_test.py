import pytest

from assoc.cli import main
from assoc.dao.pair_files import load_pairs


@pytest.fixture
def files(tmp_path):
    left = tmp_path / "left.csv"
    right = tmp_path / "right.csv"
    left.write_text("1,a\n2,b\n", encoding="utf-8")
    right.write_text("2,x\n3,y\n", encoding="utf-8")
    return str(left), str(right)


def test_show(files, capsys):
    assert main(["show", "--file", files[0]]) == 0
    assert capsys.readouterr().out == "1\ta\n2\tb\n"


def test_find_present_and_absent(files, capsys):
    assert main(["find", "--file", files[0], "--key", "2"]) == 0
    assert capsys.readouterr().out == "b\n"
    assert main(["find", "--file", files[0], "--key", "9"]) == 1
    assert capsys.readouterr().out == "<absent>\n"


def test_find_ignore_case(tmp_path, capsys):
    path = tmp_path / "names.csv"
    path.write_text("Alice,1\n", encoding="utf-8")
    assert main(["--ignore-case", "find", "--file", str(path), "--key", "ALICE"]) == 0
    assert capsys.readouterr().out == "1\n"


def test_replace_insert_writes_output(files, tmp_path, capsys):
    out = str(tmp_path / "new.csv")
    assert main(["replace", "--file", files[0], "--key", "3", "--value", "z", "--out", out]) == 0
    assert "Previous value: <absent>" in capsys.readouterr().out
    assert load_pairs(out).to_list() == [("1", "a"), ("2", "b"), ("3", "z")]


def test_replace_without_value_deletes(files, capsys):
    assert main(["replace", "--file", files[0], "--key", "1"]) == 0
    assert capsys.readouterr().out == "Previous value: a\n2\tb\n"


def test_diff_join_disj(files, capsys):
    left, right = files
    main(["diff", "--left", left, "--right", right])
    assert capsys.readouterr().out == "1\ta\n"
    main(["join", "--left", left, "--right", right, "--sep", "+"])
    assert capsys.readouterr().out == "2\tb+x\n"
    main(["disj", "--left", left, "--right", right])
    assert capsys.readouterr().out == "1\ta\n2\tbx\n3\ty\n"


def test_count(files, capsys):
    assert main(["count", "--file", files[1]]) == 0
    assert capsys.readouterr().out == "2\n"


def test_errors_are_reported(tmp_path, capsys):
    bad = tmp_path / "bad.csv"
    bad.write_text("only-one-column\n", encoding="utf-8")
    assert main(["show", "--file", str(bad)]) == 1
    assert capsys.readouterr().err.startswith("error: ")
    assert main(["show", "--file", str(tmp_path / "missing.csv")]) == 1


def test_main_reads_sys_argv_by_default(files, capsys, monkeypatch):
    monkeypatch.setattr("sys.argv", ["assoc", "count", "--file", files[0]])
    assert main() == 0
    assert capsys.readouterr().out == "2\n"
