import sys

import matplotlib
matplotlib.use("Agg")

import decode
import encode
import inspect_huf
import plot_codes


def _run(monkeypatch, module, *argv):
    monkeypatch.setattr(sys, "argv", [module.__name__ + ".py", *argv])
    module.main()


def test_encode_decode_cli(tmp_path, monkeypatch, capsys):
    src = tmp_path / "log.txt"
    src.write_bytes(b"INFO ok\n" * 300 + b"WARN disk\n")

    _run(monkeypatch, encode, "--input", str(src))
    assert "[encode] wrote" in capsys.readouterr().out

    _run(monkeypatch, decode, "--input", str(src) + ".huf")
    assert "[decode] wrote" in capsys.readouterr().out
    assert (tmp_path / "log_unc.txt").read_bytes() == src.read_bytes()


def test_inspect_cli(tmp_path, monkeypatch, capsys):
    src = tmp_path / "a.txt"
    src.write_bytes(b"aaabbc")
    _run(monkeypatch, encode, "--input", str(src), "--output", str(tmp_path / "out" / "a.huf"))
    capsys.readouterr()

    _run(monkeypatch, inspect_huf, "--input", str(tmp_path / "out" / "a.huf"), "--codes")
    out = capsys.readouterr().out
    assert "symbols=4" in out
    assert "input bytes=6" in out
    assert "EOF" in out
    assert "code=111" in out


def test_plot_cli(tmp_path, monkeypatch):
    src = tmp_path / "a.txt"
    src.write_bytes(b"hello world")
    png = tmp_path / "fig.png"
    _run(monkeypatch, plot_codes, "--input", str(src), "--output", str(png))
    assert png.exists() and png.stat().st_size > 0
