"""Tests for the viewer helpers and CLI (no display required)."""

from __future__ import annotations

import logging
from pathlib import Path

import numpy as np
import pytest

from antsim.ui.pygame_client import (
    PygameRenderer,
    ant_segment,
    ground_texture,
    pheromone_alpha,
)


def test_pygame_renderer_importable() -> None:
    """PygameRenderer class is importable without initialising pygame."""
    assert PygameRenderer is not None


def test_ground_texture_is_green(rng: np.random.Generator) -> None:
    texture = ground_texture(5, 3, rng)
    assert texture.shape == (5, 3, 3)
    assert texture.dtype == np.uint8
    assert np.all(texture[..., 0] < 50)
    assert np.all(texture[..., 1] >= 200)
    assert np.all(texture[..., 2] < 50)


def test_pheromone_alpha() -> None:
    layer = np.zeros((2, 3), dtype=np.float64)
    layer[1, 2] = 0.5
    layer[0, 1] = 2.0
    layer[0, 0] = 0.005
    alpha = pheromone_alpha(layer, cutoff=0.01)
    assert alpha.shape == (3, 2)
    assert alpha[2, 1] == 127
    assert alpha[1, 0] == 255
    assert alpha[0, 0] == 0


def test_ant_segment_follows_velocity() -> None:
    end_x, end_y = ant_segment(10.0, 10.0, 1.0, 0.0, body_length=5.0)
    assert end_x == pytest.approx(15.0)
    assert end_y == pytest.approx(10.0)

    end_x, end_y = ant_segment(10.0, 10.0, 0.0, -0.3, body_length=5.0)
    assert end_x == pytest.approx(10.0)
    assert end_y == pytest.approx(5.0)


class TestMain:
    """Tests for the command-line entry point."""

    def test_main_module_importable(self) -> None:
        from antsim.__main__ import main

        assert callable(main)

    def test_headless_run(
        self,
        tmp_path: Path,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        from antsim.__main__ import main

        cfg = tmp_path / "small.yaml"
        cfg.write_text("width: 16\nheight: 16\nseed: 3\n")
        with caplog.at_level(logging.INFO):
            main(["-c", str(cfg), "--headless", "--ticks", "5", "--ants", "3"])
        assert "Tick 5: 3 ants" in caplog.text

    def test_bad_config_exits(self, tmp_path: Path) -> None:
        from antsim.__main__ import main

        cfg = tmp_path / "bad.yaml"
        cfg.write_text("pheromone_dissipation_rate: 1.5\n")
        with pytest.raises(SystemExit) as excinfo:
            main(["-c", str(cfg), "--headless"])
        assert excinfo.value.code == 2

    def test_missing_config_exits(self, tmp_path: Path) -> None:
        from antsim.__main__ import main

        with pytest.raises(SystemExit) as excinfo:
            main(["-c", str(tmp_path / "missing.yaml"), "--headless"])
        assert excinfo.value.code == 2

    @pytest.mark.parametrize(
        "body",
        ["width: '16'\n", "width: 16.5\n", "seed: abc\n", "max_velocity: fast\n"],
    )
    def test_wrongly_typed_config_exits(self, tmp_path: Path, body: str) -> None:
        from antsim.__main__ import main

        cfg = tmp_path / "typed.yaml"
        cfg.write_text(body)
        with pytest.raises(SystemExit) as excinfo:
            main(["-c", str(cfg), "--headless", "--ticks", "1"])
        assert excinfo.value.code == 2


class TestRenderer:
    """Drives the window on SDL's dummy video driver."""

    @pytest.fixture
    def renderer(self, monkeypatch: pytest.MonkeyPatch):
        import pygame

        from antsim.simulation.config import SimulationConfig
        from antsim.simulation.engine import Simulation

        monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
        monkeypatch.setenv("SDL_AUDIODRIVER", "dummy")
        simulation = Simulation(config=SimulationConfig(width=16, height=16))
        simulation.add_agents(5)
        renderer = PygameRenderer(
            simulation=simulation,
            cell_size=2,
            ticks_per_second=300.0,
        )
        yield renderer
        pygame.quit()

    def test_frames_do_not_log_at_info(
        self,
        renderer: PygameRenderer,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        caplog.clear()
        with caplog.at_level(logging.INFO, logger="antsim"):
            for _ in range(30):
                renderer.frame(fps=1000)
        assert [r for r in caplog.records if r.levelno >= logging.INFO] == []

    def test_run_logs_once_on_close(
        self,
        renderer: PygameRenderer,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        frames = 0
        step = renderer.frame

        def counted_frame(fps: int = 60) -> None:
            nonlocal frames
            step(fps)
            frames += 1
            if frames == 30:
                renderer.running = False

        renderer.frame = counted_frame  # type: ignore[method-assign]
        caplog.clear()
        with caplog.at_level(logging.INFO, logger="antsim"):
            renderer.run(fps=1000)
        info = [r for r in caplog.records if r.levelno >= logging.INFO]
        assert frames == 30
        assert len(info) == 1
        assert "Viewer closed" in info[0].getMessage()
