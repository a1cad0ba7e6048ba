"""Tests for the mock_prove command-line entry point."""

from mock_prove import main


def test_default_public_output(capsys) -> None:
    assert main(["--x", "3", "--constant", "5"]) == 0
    out = capsys.readouterr().out
    assert "y = 35" in out
    assert "Verification succeeded" in out


def test_wrong_public_output(capsys) -> None:
    assert main(["--x", "3", "--public", "36"]) == 1
    out = capsys.readouterr().out
    assert "failed with 1 failure(s)" in out
    assert "ERROR: public input" in out


def test_k_too_small(capsys) -> None:
    assert main(["--x", "3", "--k", "3"]) == 1
    assert "Error:" in capsys.readouterr().err


def test_unknown_x_requires_public(capsys) -> None:
    assert main([]) == 1
    assert "--public is required" in capsys.readouterr().err


def test_shape(capsys) -> None:
    assert main(["--shape"]) == 0
    out = capsys.readouterr().out
    assert "rows used = 10" in out
    assert "fixed[0] nonzero: [(0, 5)]" in out
