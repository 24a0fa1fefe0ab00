import sys
import pathlib

sys.path.append(str(pathlib.Path(__file__).resolve().parent.parent))

import pytest

from scripts import rangelist_cli


def test_demo_output(capsys):
    rangelist_cli.main(["demo"])
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == len(rangelist_cli.DEMO_STEPS)
    assert lines[0] == "add [1,5) -> [1,5) "
    assert lines[5] == "add [3,8) -> [1,8) [10,21) "
    assert lines[9] == "remove [3,19) -> [1,3) [19,21) "
    assert lines[-1] == "add [3,19) -> [1,21) "


def test_apply_file(tmp_path, capsys):
    ops = tmp_path / "ops.txt"
    ops.write_text("# sample\nadd 1 5\n\nadd 10 20  # second\nremove 3 12\n")
    rangelist_cli.main(["apply", str(ops)])
    assert capsys.readouterr().out == "[1,3) [12,20) \n"


def test_apply_file_trace(tmp_path, capsys):
    ops = tmp_path / "ops.txt"
    ops.write_text("add 1 5\nADD 5 9\n")
    rangelist_cli.main(["apply", "--trace", str(ops)])
    assert capsys.readouterr().out.splitlines() == [
        "add [1,5) -> [1,5) ",
        "add [5,9) -> [1,9) ",
    ]


@pytest.mark.parametrize("line", ["add 1", "insert 1 5", "add one 5"])
def test_malformed_line_exits(tmp_path, capsys, line):
    ops = tmp_path / "ops.txt"
    ops.write_text(f"add 1 5\n{line}\n")
    with pytest.raises(SystemExit) as exc:
        rangelist_cli.main(["apply", str(ops)])
    assert exc.value.code == 2
    assert "line 2" in capsys.readouterr().err


def test_missing_file_exits(tmp_path):
    with pytest.raises(SystemExit) as exc:
        rangelist_cli.main(["apply", str(tmp_path / "missing.txt")])
    assert exc.value.code == 2
