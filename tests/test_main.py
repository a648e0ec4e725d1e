"""
Tests for the python -m pymatrix demonstration.
"""

from pymatrix.__main__ import main


def test_main_prints_matrices(capsys):
    main()
    out = capsys.readouterr().out
    assert "│     1     2 │" in out
    assert "│     3 90000 │" in out
    assert "│ " + "1.0 " * 8 + "│" in out
