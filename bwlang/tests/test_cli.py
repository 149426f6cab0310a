"""
Tests for the bwl command line
"""
import builtins

import bwl


def write_script(tmp_path, text):
    """
    Write a script file and return its path as a string.
    """
    path = tmp_path / "script.bwl"
    path.write_text(text, encoding="utf-8")
    return str(path)


def test_run_script(tmp_path, capsys):
    """
    Test that a script runs and exits with 0.
    """
    path = write_script(tmp_path, 'var greeting = "hello";\nprint greeting + " world";\n')
    assert bwl.main(["bwl", path]) == 0
    assert capsys.readouterr().out == "hello world\n"


def test_parse_error_exit_code(tmp_path, capsys):
    """
    Test that syntax problems exit with 65 and report on stderr.
    """
    path = write_script(tmp_path, "print 1\n")
    assert bwl.main(["bwl", path]) == 65
    err = capsys.readouterr().err
    assert "parse error" in err
    assert "reached end of input" in err


def test_runtime_error_exit_code(tmp_path, capsys):
    """
    Test that runtime failures exit with 70 after earlier output.
    """
    path = write_script(tmp_path, "print 1;\nprint missing;\n")
    assert bwl.main(["bwl", path]) == 70
    captured = capsys.readouterr()
    assert captured.out == "1\n"
    assert "Undefined variable 'missing'" in captured.err


def test_missing_file(tmp_path, capsys):
    """
    Test that an unreadable script exits with 1.
    """
    assert bwl.main(["bwl", str(tmp_path / "nope.bwl")]) == 1
    assert "Failed to read file" in capsys.readouterr().err


def test_usage(capsys):
    """
    Test the help flag and bad argument lists.
    """
    assert bwl.main(["bwl", "--help"]) == 0
    assert "Usage:" in capsys.readouterr().out
    assert bwl.main(["bwl", "a.bwl", "b.bwl"]) == 1


def test_repl(monkeypatch, capsys):
    """
    Test echoing expressions, continuing incomplete input and reporting errors.
    """
    lines = iter([
        "1 + 2",
        "var a = 2;",
        "print a *",
        "3;",
        '"a" - 1',
        "exit",
    ])
    monkeypatch.setattr(builtins, "input", lambda prompt="": next(lines))
    assert bwl.main(["bwl"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out[:4] == [
        "bwlang Interpreter - REPL",
        "Type `exit` or `quit` to leave.",
        "3",
        "6",
    ]
    assert any("runtime error" in line for line in out[4:])
