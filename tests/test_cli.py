"""Tests for the CLI."""

import numpy as np
import pytest
from click.testing import CliRunner

from photoseed import __version__
from photoseed.cli import main
from photoseed.conditioning import derive_seed


def _seed_line(output):
    return next(line for line in output.splitlines() if line.startswith("seed: "))


class TestCLI:
    def test_version(self):
        r = CliRunner().invoke(main, ["--version"])
        assert r.exit_code == 0
        assert __version__ in r.output

    def test_scan(self, fake_camera):
        fake_camera([])
        r = CliRunner().invoke(main, ["scan"])
        assert r.exit_code == 0
        assert "Platform" in r.output
        assert "camera" in r.output

    def test_load_missing(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        r = CliRunner().invoke(main, ["load", "absent"])
        assert r.exit_code == 1
        assert "DeviceUnavailable" in r.output

    def test_save_camera_unavailable(self, fake_camera, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        fake_camera(opened=False)
        r = CliRunner().invoke(main, ["save"])
        assert r.exit_code == 1
        assert "DeviceUnavailable" in r.output
        assert not (tmp_path / "seed.png").exists()


class TestSaveLoad:
    @pytest.fixture(autouse=True)
    def _pillow(self):
        pytest.importorskip("PIL")

    def test_load_prints_seed(self, noisy_frame, tmp_path, monkeypatch):
        from photoseed.acquirers import save_frame

        monkeypatch.chdir(tmp_path)
        save_frame(noisy_frame, tmp_path / "seed.png")
        r = CliRunner().invoke(main, ["load", "--count", "5"])
        assert r.exit_code == 0, r.output
        assert _seed_line(r.output) == f"seed: {derive_seed(noisy_frame).hex()}"
        assert "seed number: " in r.output
        assert "random numbers: " in r.output
        assert "random bools: " in r.output

    def test_save_then_load(self, fake_camera, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        bgr = np.random.default_rng(5).integers(0, 256, (6, 8, 3), dtype=np.uint8)
        fake_camera([bgr])
        runner = CliRunner()

        saved = runner.invoke(main, ["save", "shot", "--timeout", "1"])
        assert saved.exit_code == 0, saved.output
        assert (tmp_path / "shot.png").exists()

        loaded = runner.invoke(main, ["load", "shot"])
        assert loaded.exit_code == 0, loaded.output
        assert _seed_line(saved.output) == _seed_line(loaded.output)
        assert saved.output.splitlines()[-2:] == loaded.output.splitlines()[-2:]

    def test_avalanche(self, noisy_frame, tmp_path, monkeypatch):
        from photoseed.acquirers import save_frame

        monkeypatch.chdir(tmp_path)
        save_frame(noisy_frame, tmp_path / "seed.png")
        r = CliRunner().invoke(main, ["avalanche", "--trials", "20"])
        assert r.exit_code == 0, r.output
        assert "Mean flipped" in r.output

    def test_save_unwritable_location(self, fake_camera, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        (tmp_path / "blocker").write_text("a regular file, not a directory")
        fake_camera([np.zeros((2, 2, 3), dtype=np.uint8)])
        r = CliRunner().invoke(main, ["save", "blocker/shot", "--timeout", "1"])
        assert r.exit_code == 1
        assert "Error (" in r.output
        assert r.exception is None or isinstance(r.exception, SystemExit)
