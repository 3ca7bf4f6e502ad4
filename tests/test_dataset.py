import json
import sys
from pathlib import Path

import httpx
import pytest
from pydantic import ValidationError

sys.path.append(str(Path(__file__).resolve().parents[1]))

from src.data.dataset import (
    dataset_description,
    fetch_dataset,
    load_dataset,
    load_dataset_file,
    parse_dataset,
)

PAYLOAD = {
    "baseTemperature": 8.66,
    "monthlyVariance": [
        {"year": 1753, "month": 1, "variance": -1.366},
        {"year": 1753, "month": 2, "variance": -2.223},
        {"year": 1880, "month": 1, "variance": -0.78},
    ],
}


def test_parse_dataset_wire_names():
    dataset = parse_dataset(PAYLOAD)
    assert dataset.base_temperature == 8.66
    assert len(dataset.records) == 3
    assert dataset.records[2].variance == -0.78
    assert dataset.years == [1753, 1880]
    assert dataset_description(dataset) == "1753 - 1880: base temperature 8.66℃"


def test_records_are_immutable_and_validated():
    dataset = parse_dataset(PAYLOAD)
    with pytest.raises(ValidationError):
        dataset.records[0].variance = 1.0
    bad = {"baseTemperature": 8.66, "monthlyVariance": [{"year": 1900, "month": 13, "variance": 0.1}]}
    with pytest.raises(ValidationError):
        parse_dataset(bad)


def test_fetch_dataset_single_get(monkeypatch):
    calls = []

    def fake_get(url, timeout):
        calls.append(url)
        return httpx.Response(200, json=PAYLOAD, request=httpx.Request("GET", url))

    monkeypatch.setattr("src.data.dataset.httpx.get", fake_get)
    dataset = fetch_dataset("https://example.test/global-temperature.json")
    assert calls == ["https://example.test/global-temperature.json"]
    assert len(dataset.records) == 3


def test_fetch_dataset_error_propagates(monkeypatch):
    def fake_get(url, timeout):
        return httpx.Response(404, request=httpx.Request("GET", url))

    monkeypatch.setattr("src.data.dataset.httpx.get", fake_get)
    with pytest.raises(httpx.HTTPStatusError):
        fetch_dataset("https://example.test/missing.json")


def test_load_dataset_from_file_and_demo(tmp_path):
    path = tmp_path / "temps.json"
    path.write_text(json.dumps(PAYLOAD), encoding="utf-8")
    assert load_dataset_file(path).records[0].year == 1753
    assert load_dataset(source=str(path)).base_temperature == 8.66

    demo = load_dataset(use_demo=True)
    assert len(demo.records) == (2015 - 1753 + 1) * 12
    assert demo == load_dataset(use_demo=True)


def test_description_prints_whole_base_temperature_without_decimals():
    dataset = parse_dataset(
        {"baseTemperature": 8, "monthlyVariance": [{"year": 1900, "month": 1, "variance": 0.1}]}
    )
    assert dataset_description(dataset) == "1900 - 1900: base temperature 8℃"
