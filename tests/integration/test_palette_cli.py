from __future__ import annotations

import os
import subprocess
import sys
from pathlib import Path

import pytest

from palette.__main__ import build_parser, main


@pytest.mark.integration
def test_cli_seeded_output_is_stable(capsys: pytest.CaptureFixture[str]):
    assert main(["--seed", "3"]) == 0
    first = capsys.readouterr().out
    assert main(["--seed", "3"]) == 0
    second = capsys.readouterr().out
    assert first == second
    lines = first.splitlines()
    assert lines[0].startswith("palette: ")
    keys = [ln.split(":", 1)[0] for ln in lines]
    assert keys == ["palette", "color0", "color1", "color2", "color3", "color4", "fg", "bg", "average"]
    assert all(ln.split(": ", 1)[1].startswith("#") for ln in lines[1:])


@pytest.mark.integration
def test_cli_config_palettes(tmp_path: Path, capsys: pytest.CaptureFixture[str]):
    cfg = tmp_path / "p.yaml"
    cfg.write_text("palette:\n  palettes: [['#ff0000', '#00ff00']]\n", encoding="utf-8")
    assert main(["--config", str(cfg), "--randomize", "--seed", "1"]) == 0
    out = capsys.readouterr().out
    assert "palette: 0" in out
    assert {"color0: #FF0000", "color1: #00FF00"} <= set(out.splitlines()) or {
        "color0: #00FF00",
        "color1: #FF0000",
    } <= set(out.splitlines())


def test_cli_rejects_bad_seed():
    with pytest.raises(SystemExit) as exc:
        build_parser().parse_args(["--seed", "x"])
    assert exc.value.code == 2


@pytest.mark.integration
# Runs in a subprocess so `python -m palette` resolves through the installed/src layout.
def test_cli_module_entrypoint():
    src = Path(__file__).resolve().parents[2] / "src"
    env = dict(os.environ, PYTHONPATH=str(src) + os.pathsep + os.environ.get("PYTHONPATH", ""))
    proc = subprocess.run(
        [sys.executable, "-m", "palette", "--seed", "5"],
        capture_output=True,
        text=True,
        env=env,
    )
    assert proc.returncode == 0, proc.stderr
    assert "fg: #" in proc.stdout
