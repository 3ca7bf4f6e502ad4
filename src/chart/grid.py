from typing import Dict, List

from pydantic import BaseModel, ConfigDict

from ..config import ChartConfig
from ..data.dataset import Dataset
from ..utils.format import js_number
from .colors import ColorMapper, calculate_temperature
from .scales import BandScale

MONTHS = list(range(1, 13))


class Cell(BaseModel):
    model_config = ConfigDict(frozen=True)

    x: float
    y: float
    width: float
    height: float
    fill: str
    year: int
    month: int
    variance: float
    temperature: float

    def attributes(self) -> Dict[str, str]:
        """Markup attributes of the cell rectangle; data-month is 0-indexed."""
        return {
            "class": "cell",
            "data-month": str(self.month - 1),
            "data-year": str(self.year),
            "data-temp": js_number(self.temperature),
            "width": js_number(self.width),
            "height": js_number(self.height),
            "x": js_number(self.x),
            "y": js_number(self.y),
            "shape-rendering": "crispEdges",
            "style": f"fill: {self.fill};",
        }


def year_scale(dataset: Dataset, config: ChartConfig) -> BandScale:
    return BandScale(dataset.years, (config.left_padding, config.width - config.right_padding))


def month_scale(config: ChartConfig) -> BandScale:
    return BandScale(MONTHS, (config.top_padding, config.height - config.bottom_padding))


def build_cells(dataset: Dataset, mapper: ColorMapper, config: ChartConfig) -> List[Cell]:
    x_scale = year_scale(dataset, config)
    y_scale = month_scale(config)
    cells = []
    for record in dataset.records:
        temperature = calculate_temperature(dataset.base_temperature, record.variance)
        cells.append(
            Cell(
                x=x_scale(record.year),
                y=y_scale(record.month),
                width=x_scale.bandwidth,
                height=y_scale.bandwidth,
                fill=mapper.color(temperature),
                year=record.year,
                month=record.month,
                variance=record.variance,
                temperature=temperature,
            )
        )
    return cells
