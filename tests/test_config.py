import sys
from pathlib import Path

sys.path.append(str(Path(__file__).resolve().parents[1]))

from src.config import (
    DEFAULT_CHART_SIZE,
    DEFAULT_FETCH_TIMEOUT,
    ChartConfig,
    TooltipConfig,
    _fetch_timeout_from_env,
    chart_config,
)


def test_chart_size_default(monkeypatch):
    monkeypatch.delenv("HEATMAP_CHART_SIZE", raising=False)
    cfg = chart_config()
    assert (cfg.width, cfg.height) == DEFAULT_CHART_SIZE


def test_chart_size_from_env_and_overrides(monkeypatch):
    monkeypatch.setenv("HEATMAP_CHART_SIZE", "900, 450")
    cfg = chart_config()
    assert (cfg.width, cfg.height) == (900, 450)
    assert chart_config(width=1000).width == 1000
    assert chart_config(width=1000).height == 450


def test_chart_size_invalid_env_falls_back(monkeypatch):
    monkeypatch.setenv("HEATMAP_CHART_SIZE", "wide")
    assert (chart_config().width, chart_config().height) == DEFAULT_CHART_SIZE
    monkeypatch.setenv("HEATMAP_CHART_SIZE", "0,400")
    assert chart_config().width == DEFAULT_CHART_SIZE[0]


def test_tooltip_offsets_and_legend_geometry():
    tip = TooltipConfig()
    assert tip.distance_right == 20
    assert tip.distance_left == -220
    assert tip.distance_top == -50
    cfg = ChartConfig()
    assert cfg.legend_length == 400
    assert cfg.legend_side == 400 / 11


def test_fetch_timeout_from_env(monkeypatch):
    monkeypatch.delenv("HEATMAP_FETCH_TIMEOUT", raising=False)
    assert _fetch_timeout_from_env() == DEFAULT_FETCH_TIMEOUT
    monkeypatch.setenv("HEATMAP_FETCH_TIMEOUT", "12.5")
    assert _fetch_timeout_from_env() == 12.5
    monkeypatch.setenv("HEATMAP_FETCH_TIMEOUT", "soon")
    assert _fetch_timeout_from_env() == DEFAULT_FETCH_TIMEOUT
    monkeypatch.setenv("HEATMAP_FETCH_TIMEOUT", "-1")
    assert _fetch_timeout_from_env() == DEFAULT_FETCH_TIMEOUT
