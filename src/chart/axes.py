from typing import List, Tuple

from pydantic import BaseModel, ConfigDict

from ..config import ChartConfig
from ..data.dataset import Dataset
from ..utils.format import js_number, month_name
from .colors import ColorMapper
from .grid import month_scale, year_scale

TICK_SIZE = 6
TICK_PADDING = 3


class Tick(BaseModel):
    model_config = ConfigDict(frozen=True)

    value: float
    position: float
    label: str


class Axis(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    orient: str  # "bottom" | "left"
    translate: Tuple[float, float]
    range: Tuple[float, float]
    ticks: List[Tick]


class Swatch(BaseModel):
    model_config = ConfigDict(frozen=True)

    color: str
    x: float
    y: float
    side: float


class Legend(BaseModel):
    model_config = ConfigDict(frozen=True)

    axis: Axis
    swatches: List[Swatch]


def x_axis(dataset: Dataset, config: ChartConfig) -> Axis:
    scale = year_scale(dataset, config)
    half = scale.bandwidth / 2
    ticks = [
        Tick(value=year, position=scale(year) + half, label=str(year))
        for year in scale.domain
        if year % 20 == 0
    ]
    return Axis(
        id="x-axis",
        orient="bottom",
        translate=(0, config.height - config.bottom_padding),
        range=scale.range,
        ticks=ticks,
    )


def y_axis(config: ChartConfig) -> Axis:
    scale = month_scale(config)
    half = scale.bandwidth / 2
    ticks = [
        Tick(value=month, position=scale(month) + half, label=month_name(month))
        for month in scale.domain
    ]
    return Axis(
        id="y-axis",
        orient="left",
        translate=(config.left_padding, 0),
        range=scale.range,
        ticks=ticks,
    )


def legend(mapper: ColorMapper, config: ChartConfig) -> Legend:
    scale = mapper.scale
    if mapper.empty:
        values = []
    elif scale.degenerate:
        values = [scale.domain[0]]
    else:
        values = scale.ticks()
    fmt = scale.tick_format()
    axis = Axis(
        id="legend",
        orient="bottom",
        translate=(config.left_padding, config.height - config.legend_offset),
        range=scale.range,
        ticks=[Tick(value=v, position=scale(v), label=fmt(v)) for v in values],
    )
    side = config.legend_side
    swatches = [
        Swatch(color=color, x=side * i, y=-side, side=side)
        for i, color in enumerate(config.palette)
    ]
    return Legend(axis=axis, swatches=swatches)


def domain_path(axis: Axis) -> str:
    r0, r1 = (js_number(v) for v in axis.range)
    if axis.orient == "left":
        return f"M-{TICK_SIZE},{r0}H0V{r1}H-{TICK_SIZE}"
    return f"M{r0},{TICK_SIZE}V0H{r1}V{TICK_SIZE}"
