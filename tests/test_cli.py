# tests/test_cli.py

from mmcal.cli import main

def test_day(capsys):
    assert main(["day", "2000-01-01", "--attr", "names"]) == 0
    out = capsys.readouterr().out
    assert "Myanmar year  = 1361" in out
    assert "Buddhist year 2543" in out
    assert "month_name = Nadaw" in out

def test_day_shorthand(capsys):
    assert main(["2024-04-17"]) == 0
    out = capsys.readouterr().out
    assert "Myanmar year  = 1386" in out
    assert "Year transit  = yes" in out

def test_year(capsys):
    assert main(["year", "1385"]) == 0
    out = capsys.readouterr().out
    assert "Watat               = yes" in out
    assert "Year type           = 2" in out
    assert "2023-03-21" in out
    assert "2023-08-01" in out

def test_uposatha(capsys):
    assert main(["uposatha", "2026"]) == 0
    out = capsys.readouterr().out
    assert "2026-01-02  full moon" in out
    assert "2026-01-17  new moon" in out
    assert "25 days" in out

def test_uposatha_full_only(capsys):
    assert main(["uposatha", "2026", "--phase", "full", "--dates", "mmdd"]) == 0
    out = capsys.readouterr().out
    assert "13 days" in out
    assert "new moon" not in out

def test_engines():
    import mmcal
    assert mmcal.list_engines() == ["era3"]
    assert mmcal.engine_info("era3")["params"]["solar_year"] == 365.2587565
