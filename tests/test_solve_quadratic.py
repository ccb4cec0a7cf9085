import io

import pytest

from solve_quadratic import main


def test_real_roots(capsys):
    # x^2 - 7x + 10 = 0
    assert main(["-a", "1", "-b", "-7", "-c", "10"]) == 0
    out = capsys.readouterr().out
    assert out == "Root1: 5.0000\nRoot2: 2.0000\n"


def test_complex_roots(capsys):
    # x^2 + x + 1 = 0
    assert main(["-a", "1", "-b", "1", "-c", "1"]) == 0
    assert capsys.readouterr().out == "Root1: -0.5000 +0.8660i\nRoot2: -0.5000 -0.8660i\n"


def test_writes_record(tmp_path, capsys):
    path = tmp_path / "roots.csv"
    assert main(["-a", "1", "-b", "-7", "-c", "10", "-o", str(path)]) == 0
    assert path.read_text(encoding="utf-8").strip() == "v1,r,5.0000,2.0000"
    captured = capsys.readouterr()
    assert "Result record written to" in captured.out
    assert captured.err == ""


def test_warns_on_unexpected_extension(tmp_path, capsys):
    path = tmp_path / "roots.txt"
    assert main(["-a", "1", "-b", "1", "-c", "1", "--output", str(path)]) == 0
    assert path.read_text(encoding="utf-8").strip() == "v1,c,-0.5000,0.8660"
    assert "Warning" in capsys.readouterr().err


def test_unwritable_record_path(tmp_path, capsys):
    path = tmp_path / "missing" / "roots.csv"
    assert main(["-a", "1", "-b", "-1", "-c", "-6", "-o", str(path)]) == 1
    captured = capsys.readouterr()
    # Roots are still reported before the write fails
    assert captured.out == "Root1: 3.0000\nRoot2: -2.0000\n"
    assert "Error: could not write result record" in captured.err


def test_a_is_zero(capsys):
    # 0x^2 - x - 6 = 0
    assert main(["-a", "0", "-b", "-1", "-c", "-6"]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Coefficient 'a' cannot be zero" in captured.err


def test_non_numeric_flag(capsys):
    with pytest.raises(SystemExit) as exc_info:
        main(["-a", "one", "-b", "2", "-c", "1"])
    assert exc_info.value.code == 2
    assert "Coefficient 'a' must be a number" in capsys.readouterr().err


def test_missing_flags(capsys):
    with pytest.raises(SystemExit) as exc_info:
        main(["-a", "1"])
    assert exc_info.value.code == 2
    assert "-b, -c" in capsys.readouterr().err


def test_interactive(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("2\n5\n-3\n"))
    assert main(["-i"]) == 0
    out = capsys.readouterr().out
    assert out == "Enter a: Enter b: Enter c: Root1: 0.5000\nRoot2: -3.0000\n"


def test_interactive_fills_in_missing_flags(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("10\n"))
    assert main(["-i", "-a", "1", "-b", "-7"]) == 0
    assert capsys.readouterr().out == "Enter c: Root1: 5.0000\nRoot2: 2.0000\n"


def test_interactive_non_numeric_input(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("abc\n"))
    assert main(["-i"]) == 1
    assert "Coefficient 'a' must be a number" in capsys.readouterr().err


def test_negative_scientific_notation_flag(capsys):
    # x^2 - 1000x + 1 = 0
    assert main(["-a", "1", "-b=-1e3", "-c", "1"]) == 0
    assert capsys.readouterr().out.startswith("Root1: 999.9990\n")


def test_discriminant_overflow_exit_code(capsys):
    assert main(["-a", "1e200", "-b", "1e200", "-c", "1e200"]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Discriminant overflows" in captured.err
