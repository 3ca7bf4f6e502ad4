import logging
import os
from typing import Tuple

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict

load_dotenv()

LOGGER = logging.getLogger(__name__)

DATASET_URL = os.getenv(
    "HEATMAP_DATASET_URL",
    "https://raw.githubusercontent.com/freeCodeCamp/ProjectReferenceData/master/global-temperature.json",
)
DEFAULT_FETCH_TIMEOUT = 30.0
DEFAULT_CHART_SIZE = (1200, 600)


def _fetch_timeout_from_env() -> float:
    raw = os.getenv("HEATMAP_FETCH_TIMEOUT", "")
    if not raw.strip():
        return DEFAULT_FETCH_TIMEOUT
    try:
        value = float(raw)
        if value > 0:
            return value
    except ValueError:
        pass
    LOGGER.warning(
        "Ignoring invalid HEATMAP_FETCH_TIMEOUT=%r; using %s.", raw, DEFAULT_FETCH_TIMEOUT
    )
    return DEFAULT_FETCH_TIMEOUT


FETCH_TIMEOUT = _fetch_timeout_from_env()

PALETTE = (
    "#313695",
    "#4575b4",
    "#74add1",
    "#abd9e9",
    "#e0f3f8",
    "#ffffbf",
    "#fee090",
    "#fdae61",
    "#f46d43",
    "#d73027",
    "#a50026",
)


class TooltipConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    width: int = 200
    height: int = 100
    distance: int = 20
    page_padding: int = 20

    @property
    def distance_right(self) -> int:
        return self.distance

    @property
    def distance_left(self) -> int:
        return -(self.width + self.distance)

    @property
    def distance_top(self) -> float:
        return -(self.height / 2)


class ChartConfig(BaseModel):
    """Geometry and colours of one chart render. Passed explicitly to every renderer."""

    model_config = ConfigDict(frozen=True)

    width: int = DEFAULT_CHART_SIZE[0]
    height: int = DEFAULT_CHART_SIZE[1]
    top_padding: int = 50
    bottom_padding: int = 130
    left_padding: int = 120
    right_padding: int = 40
    legend_offset: int = 50
    bucket_width: int = 40
    palette: Tuple[str, ...] = PALETTE
    tooltip: TooltipConfig = TooltipConfig()

    @property
    def legend_length(self) -> int:
        return (len(self.palette) - 1) * self.bucket_width

    @property
    def legend_side(self) -> float:
        return self.legend_length / len(self.palette)


def _chart_size_from_env() -> Tuple[int, int]:
    raw = os.getenv("HEATMAP_CHART_SIZE", "")
    if not raw.strip():
        return DEFAULT_CHART_SIZE
    try:
        parts = [int(x.strip()) for x in raw.split(",") if x.strip()]
        if len(parts) >= 2 and parts[0] > 0 and parts[1] > 0:
            return parts[0], parts[1]
    except ValueError:
        pass
    LOGGER.warning("Ignoring invalid HEATMAP_CHART_SIZE=%r; using %s.", raw, DEFAULT_CHART_SIZE)
    return DEFAULT_CHART_SIZE


def chart_config(width: int = None, height: int = None) -> ChartConfig:
    env_width, env_height = _chart_size_from_env()
    return ChartConfig(width=width or env_width, height=height or env_height)
