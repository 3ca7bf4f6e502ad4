import json
import logging
from pathlib import Path
from typing import List, Optional, Union

import httpx
from pydantic import BaseModel, ConfigDict, Field

from ..config import DATASET_URL, FETCH_TIMEOUT
from ..utils.format import js_number
from .demo import synthetic_dataset

LOGGER = logging.getLogger(__name__)


class TemperatureRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    year: int
    month: int = Field(..., ge=1, le=12)
    variance: float


class Dataset(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    base_temperature: float = Field(..., alias="baseTemperature")
    records: List[TemperatureRecord] = Field(..., alias="monthlyVariance")

    @property
    def years(self) -> List[int]:
        """Distinct years in the order they first appear."""
        return list(dict.fromkeys(r.year for r in self.records))


def parse_dataset(payload: dict) -> Dataset:
    return Dataset.model_validate(payload)


def fetch_dataset(url: str = DATASET_URL, timeout: float = FETCH_TIMEOUT) -> Dataset:
    """
    Retrieve the temperature document with a single GET.
    No retry and no fallback: HTTP and transport errors reach the caller.
    """
    LOGGER.info("Fetching temperature dataset from %s", url)
    r = httpx.get(url, timeout=timeout)
    r.raise_for_status()
    dataset = parse_dataset(r.json())
    LOGGER.info(
        "Dataset fetched: %d records, base temperature %.2f",
        len(dataset.records),
        dataset.base_temperature,
    )
    return dataset


def load_dataset_file(path: Union[str, Path]) -> Dataset:
    with open(path, "r", encoding="utf-8") as fh:
        payload = json.load(fh)
    LOGGER.info("Loaded temperature dataset from %s", path)
    return parse_dataset(payload)


def load_dataset(use_demo: bool = False, source: Optional[str] = None) -> Dataset:
    if use_demo:
        LOGGER.info("Demo mode: using synthetic temperature dataset")
        return synthetic_dataset()
    if source and not source.startswith(("http://", "https://")):
        return load_dataset_file(source)
    return fetch_dataset(source or DATASET_URL)


def dataset_description(dataset: Dataset) -> str:
    years = [r.year for r in dataset.records]
    # an empty dataset leaves the year range blank
    span = f"{min(years)} - {max(years)}" if years else " - "
    return f"{span}: base temperature {js_number(dataset.base_temperature)}℃"
