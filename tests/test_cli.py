import argparse
import io

import pytest

from number_range import NumberRangeOptions, range_type
from number_range.__main__ import main


def run(capsys, *argv):
    assert main(list(argv)) == 0
    return capsys.readouterr().out


def test_expand(capsys):
    assert run(capsys, "expand", "1,3:5") == "1\n3\n4\n5\n"


def test_expand_options(capsys):
    out = run(capsys, "expand", "1,200/1, 400", "--list-sep", "/",
        "--group-sep", ",", "--trim-whitespace")
    assert out == "1200\n1400\n"

    out = run(capsys, "expand", "1:.5:2", "--dtype", "float64")
    assert out == "1.0\n1.5\n2.0\n"


def test_expand_error(capsys):
    with pytest.raises(SystemExit) as e:
        main(["expand", "10:1", "--dtype", "uint8"])
    assert e.value.code == 2
    assert "goes down" in capsys.readouterr().err


def test_ambiguous_separators(capsys):
    with pytest.raises(SystemExit) as e:
        main(["expand", "1", "--list-sep", ":"])
    assert e.value.code == 2
    assert "list_sep and range_sep" in capsys.readouterr().err


def test_compress(capsys):
    assert run(capsys, "compress", "5", "1", "3", "2", "4", "9") == "1:5,9\n"
    # values may be notations themselves
    assert run(capsys, "compress", "5,1:3,2") == "1:3,5\n"


def test_compress_options(capsys):
    out = run(capsys, "compress", "1", "3", "5", "7", "--step-hint", "2")
    assert out == "1:2:7\n"
    out = run(capsys, "compress", "1", "2", "--min-run", "2")
    assert out == "1:2\n"
    out = run(capsys, "compress", "1000", "1001", "1002", "--group-sep", "_",
        "--grouped")
    assert out == "1_000:1_002\n"


def test_compress_stdin(capsys, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("3\n1\n2\n\n10\n"))
    assert run(capsys, "compress") == "1:3,10\n"


def test_range_type():
    parser = argparse.ArgumentParser()
    parser.add_argument("--ports", type=range_type())
    parser.add_argument("--ids", type=range_type(
        NumberRangeOptions(range_sep="-", dtype="uint16")))

    args = parser.parse_args(["--ports", "80,8000:8002", "--ids", "1-3"])
    assert args.ports == [80, 8000, 8001, 8002]
    assert args.ids == [1, 2, 3]


def test_range_type_error(capsys):
    parser = argparse.ArgumentParser()
    parser.add_argument("--ports", type=range_type())
    with pytest.raises(SystemExit):
        parser.parse_args(["--ports", "1:0:5"])
    assert "step of zero" in capsys.readouterr().err
