import numpy as np

# Deterministic synthetic monthly variance series: slow warming trend,
# a seasonal wobble and noise, shaped like the public global-temperature set.


def synthetic_payload(
    start_year: int = 1753,
    end_year: int = 2015,
    base_temperature: float = 8.66,
    seed: int = 0,
) -> dict:
    rng = np.random.default_rng(seed)
    years = np.arange(start_year, end_year + 1)
    months = np.arange(1, 13)
    span = max(end_year - start_year, 1)
    records = []
    for year in years:
        trend = -0.8 + 1.6 * (year - start_year) / span
        seasonal = 0.3 * np.sin((months - 1) / 12 * 2 * np.pi)
        noise = rng.normal(0.0, 0.6, size=months.size)
        variance = np.round(trend + seasonal + noise, 3)
        for month, v in zip(months, variance):
            records.append({"year": int(year), "month": int(month), "variance": float(v)})
    return {"baseTemperature": base_temperature, "monthlyVariance": records}


def synthetic_dataset(
    start_year: int = 1753,
    end_year: int = 2015,
    base_temperature: float = 8.66,
    seed: int = 0,
):
    from .dataset import parse_dataset

    return parse_dataset(synthetic_payload(start_year, end_year, base_temperature, seed))
