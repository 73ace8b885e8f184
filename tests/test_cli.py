import json
import os
import subprocess
import sys
from pathlib import Path

import numpy as np
import pandas as pd
import pytest

from ssbswpc import main as cli


def _write_series(path: Path, n: int = 120, channels: int = 3) -> None:
    rng = np.random.RandomState(0)
    cols = [f"roi{i}" for i in range(channels)]
    pd.DataFrame(rng.randn(n, channels), columns=cols).to_csv(path, index=False)


def test_cli_summary_and_outputs(tmp_path, capsys):
    src = tmp_path / "ts.csv"
    _write_series(src)
    out = tmp_path / "results"
    cli.main([str(src), "--window-size", "15", "--tr", "1", "--mod-freq", "0.1",
              "--window-type", "gauss", "--output", str(out), "--report"])
    summary = json.loads(capsys.readouterr().out)
    assert summary["n_windows"] == 106
    assert summary["n_pairs"] == 3
    assert summary["window_type"] == "gaussian"
    assert (out / "connectivity.npy").exists()
    assert Path(summary["report"]).exists()
    assert 0 < summary["cutoff_freq"] < 0.5


def test_cli_rejects_unknown_window_type(tmp_path):
    src = tmp_path / "ts.csv"
    _write_series(src)
    with pytest.raises(SystemExit) as excinfo:
        cli.main([str(src), "--window-size", "15", "--tr", "1", "--mod-freq", "0.1",
                  "--window-type", "hann"])
    assert "hann" in str(excinfo.value)


def test_cli_strict_frequency(tmp_path):
    src = tmp_path / "ts.csv"
    _write_series(src)
    with pytest.raises(SystemExit):
        cli.main([str(src), "--window-size", "15", "--tr", "1", "--mod-freq", "0.7",
                  "--strict-frequency"])


def test_cli_as_module(tmp_path):
    src = tmp_path / "ts.csv"
    _write_series(src, n=60, channels=2)
    env = {**os.environ, "PYTHONPATH": str(Path(__file__).resolve().parents[1])}
    result = subprocess.check_output(
        [sys.executable, "-m", "ssbswpc.main", str(src), "--window-size", "11", "--tr", "2",
         "--mod-freq", "0.05"],
        env=env,
    )
    data = json.loads(result.decode("utf-8"))
    assert data["n_windows"] == 50
    assert data["n_channels"] == 2
