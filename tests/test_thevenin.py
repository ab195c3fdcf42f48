import pytest

from thevenin_finder.thevenin import TheveninEquivalent, desktop_log_path


def matched():
    return TheveninEquivalent(
        thevenin_resistance=10.0, thevenin_voltage=12.0, load_resistance=10.0,
        problem_number=3,
    )


def mismatched():
    return TheveninEquivalent(
        thevenin_resistance=10.0, thevenin_voltage=12.0, load_resistance=40.0,
        problem_number=4,
    )


def test_defaults_are_zero():
    te = TheveninEquivalent()
    assert (te.thevenin_resistance, te.thevenin_voltage, te.load_resistance) == (0, 0, 0)
    assert te.problem_number == 0


def test_matched_load_gets_maximum_power():
    te = matched()
    assert te.power_to_load() == pytest.approx(te.max_power())


def test_mismatched_load_gets_less_than_maximum():
    te = mismatched()
    assert te.power_to_load() < te.max_power()


def test_absorption_rating_full_when_matched():
    assert matched().absorption_rating() == pytest.approx(100.0)


def test_zero_circuit_gives_nan_power():
    power = TheveninEquivalent().power_to_load()
    assert str(power) == "nan"


def test_suggestions_near_maximum():
    assert "near maximum power" in matched().suggestions()


def test_suggestions_recommends_matching_resistance():
    text = mismatched().suggestions()
    assert "Consider adjusting the load resistance to 10.00 Ohms" in text


def test_equivalent_circuit_without_load():
    te = TheveninEquivalent(thevenin_resistance=5.0, thevenin_voltage=9.0)
    assert "(No Load)" in te.equivalent_circuit()


def test_equivalent_circuit_shows_values():
    drawing = mismatched().equivalent_circuit()
    assert "[10  Ohms]" in drawing
    assert "[40 Ohms]" in drawing
    assert "(12 V)" in drawing


def test_report_comments():
    assert "almost optimal" in matched().report()
    assert "sub-optimal" in mismatched().report()


def test_report_problem_number():
    assert "\n\nProblem #4\n\n" in mismatched().report()


def test_write_to_path_appends(tmp_path):
    target = tmp_path / "log.txt"
    te = matched()
    te.write_to_path(target)
    returned = te.write_to_path(target)
    assert returned == target
    assert target.read_text(encoding="utf-8") == te.report() * 2


def test_write_to_file_prefers_repo_log(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "circuits.txt").write_text("", encoding="utf-8")
    te = mismatched()
    path = te.write_to_file()
    assert (tmp_path / path).read_text(encoding="utf-8") == te.report()


def test_desktop_log_path_uses_environment(monkeypatch):
    for name in ("ONEDRIVE", "USERPROFILE", "HOME"):
        monkeypatch.setenv(name, "base")
    path = desktop_log_path()
    assert path.startswith("base")
    assert path.endswith("TheveninEquivalentLogs.txt")
    assert "Desktop" in path


def test_desktop_log_path_without_environment(monkeypatch):
    for name in ("ONEDRIVE", "USERPROFILE", "HOME"):
        monkeypatch.delenv(name, raising=False)
    with pytest.raises(RuntimeError):
        desktop_log_path()