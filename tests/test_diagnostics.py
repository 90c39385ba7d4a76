# tests/test_diagnostics.py

from datetime import date

import pytest

from mmcal.cli import main
from mmcal.diagnostics import consistency

def test_consistency_scan(capsys):
    assert main(["diag", "consistency", "--start", "2020-01-01", "--end", "2027-12-31"]) == 0
    assert "All checks passed." in capsys.readouterr().out

def test_check_years_clean():
    assert consistency.check_years(1300, 1450, "era3") == []

def test_scan_counts_failures():
    assert consistency.scan(date(2023, 1, 1), date(2023, 12, 31), "era3", max_failures=5) == 0

def test_tagu_table(capsys):
    assert main(["tagu-table", "--from-year", "1385", "--to-year", "1386"]) == 0
    out = capsys.readouterr().out
    assert "1385   big watat     385     2023-03-21  2023-04-17" in out
    assert "2024-04-09  2024-04-17" in out

def test_watat_gaps():
    np = pytest.importorskip("numpy")
    from mmcal.diagnostics import watat_barcode

    years, types = watat_barcode.build_points(np, "era3", 1312, 1462)
    assert len(years) == 151
    assert set(types.tolist()) == {0, 1, 2}
    assert set(watat_barcode.watat_gaps(np, years, types).tolist()) == {2, 3}
