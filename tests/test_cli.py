import pytest

from thevenin_finder.cli import main, run_session, welcome_text
from thevenin_finder.expression import ExpressionError, parse_expression


def scripted(answers):
    replies = iter(answers)
    return lambda prompt: next(replies)


def run(answers):
    lines = []
    te = run_session(scripted(answers), lines.append)
    return te, "\n".join(lines)


@pytest.fixture
def repo_dir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    log = tmp_path / "circuits.txt"
    log.write_text("", encoding="utf-8")
    return log


def test_welcome_text_shows_problem_number():
    text = welcome_text(0)
    assert text.startswith("THEVENIN EQUIVALENCE: PROBLEM #0")
    assert "THEVENIN EQUIVALENT CIRCUIT FINDER" in text


def test_session_fills_in_circuit(repo_dir):
    te, _ = run(["7", "(10+10)//20", "2", "5", "10"])
    assert te.problem_number == 7
    assert te.thevenin_resistance == parse_expression("(10+10)//20").value
    assert te.thevenin_voltage == 2 * 5.0
    assert te.branch_current == 2.0
    assert te.load_resistance == 10.0


def test_session_output_and_log(repo_dir):
    te, output = run(["7", "(10+10)//20", "2", "5", "10"])
    assert "near maximum power" in output
    assert "[DONE!] Saved to file: circuits.txt" in output
    assert repo_dir.read_text(encoding="utf-8") == te.report()


def test_session_suboptimal_load(repo_dir):
    te, output = run(["1", "10//10", "1", "10", "50"])
    assert te.power_to_load() < te.max_power()
    assert "Consider adjusting the load resistance" in output


def test_session_rejects_bad_expression(repo_dir):
    with pytest.raises(ExpressionError):
        run(["1", "10+20", "1", "1", "1"])


def test_session_rejects_bad_problem_number(repo_dir):
    with pytest.raises(ValueError):
        run(["seven"])


def test_main_reports_error(repo_dir, monkeypatch, capsys):
    answers = iter(["1", "nope"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))
    assert main([]) == 1
    assert "[ERROR]" in capsys.readouterr().err


def test_main_completes(repo_dir, monkeypatch):
    answers = iter(["2", "(5+5)//10", "1", "5", "5", ""])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))
    assert main([]) == 0
    assert "Problem #2" in repo_dir.read_text(encoding="utf-8")