import logging
import math
from typing import Optional

import pandas as pd

from ..config import ChartConfig
from ..data.dataset import Dataset
from .scales import LinearScale

LOGGER = logging.getLogger(__name__)


def calculate_temperature(base_temperature: float, variance: float) -> float:
    # 12 decimals hides float noise such as 8.66 + -0.78 = 7.880000000000001
    return round(base_temperature + variance, 12)


def temperatures(dataset: Dataset) -> list:
    return [calculate_temperature(dataset.base_temperature, r.variance) for r in dataset.records]


class ColorMapper:
    """
    Buckets absolute temperatures into the palette.

    A rounded linear scale maps [min, max] onto [0, (len(palette)-1) * bucket_width];
    the bucket is that position divided by the bucket width, floored.
    """

    def __init__(
        self, min_temperature: float, max_temperature: float, config: ChartConfig, empty: bool = False
    ):
        self.config = config
        self.empty = empty
        self.palette = config.palette
        self.bucket_width = config.bucket_width
        self.scale = LinearScale(
            (min_temperature, max_temperature),
            (0, config.legend_length),
            round_output=True,
        )

    @classmethod
    def from_dataset(cls, dataset: Dataset, config: ChartConfig) -> "ColorMapper":
        temps = temperatures(dataset)
        if not temps:
            LOGGER.warning("Dataset has no records; the chart will have no cells.")
            return cls(0.0, 0.0, config, empty=True)
        lo, hi = min(temps), max(temps)
        if lo == hi:
            LOGGER.warning("All temperatures equal %.3f; every cell uses the first colour.", lo)
        return cls(lo, hi, config)

    @property
    def domain(self):
        return self.scale.domain

    def bucket(self, temperature: float) -> int:
        if self.scale.degenerate:
            return 0
        index = math.floor(self.scale(temperature) / self.bucket_width)
        return min(max(index, 0), len(self.palette) - 1)

    def color(self, temperature: float) -> str:
        return self.palette[self.bucket(temperature)]


def records_frame(dataset: Dataset, mapper: Optional[ColorMapper] = None) -> pd.DataFrame:
    df = pd.DataFrame(
        [r.model_dump() for r in dataset.records],
        columns=["year", "month", "variance"],
    )
    df["temperature"] = temperatures(dataset)
    if mapper is not None:
        df["bucket"] = [mapper.bucket(t) for t in df["temperature"]]
        df["color"] = [mapper.palette[b] for b in df["bucket"]]
    return df


def summarize_dataset(dataset: Dataset) -> dict:
    df = records_frame(dataset)
    summary = {
        "base_temperature": dataset.base_temperature,
        "record_count": int(len(df)),
        "first_year": None,
        "last_year": None,
        "year_count": int(df["year"].nunique()),
        "min_temperature": None,
        "max_temperature": None,
        "mean_variance": None,
    }
    if df.empty:
        return summary
    summary.update(
        {
            "first_year": int(df["year"].min()),
            "last_year": int(df["year"].max()),
            "min_temperature": float(df["temperature"].min()),
            "max_temperature": float(df["temperature"].max()),
            "mean_variance": float(df["variance"].mean()),
        }
    )
    return summary
