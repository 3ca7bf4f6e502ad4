import math
from typing import Hashable, List, Sequence, Tuple

from ..utils.format import round_half_up

_E10 = math.sqrt(50)
_E5 = math.sqrt(10)
_E2 = math.sqrt(2)


def _tick_increment(start: float, stop: float, count: float) -> Tuple[int, int, float]:
    step = (stop - start) / max(0, count)
    power = math.floor(math.log10(step))
    error = step / math.pow(10, power)
    if error >= _E10:
        factor = 10
    elif error >= _E5:
        factor = 5
    elif error >= _E2:
        factor = 2
    else:
        factor = 1
    if power < 0:
        inc = math.pow(10, -power) / factor
        i1 = round_half_up(start * inc)
        i2 = round_half_up(stop * inc)
        if i1 / inc < start:
            i1 += 1
        if i2 / inc > stop:
            i2 -= 1
        inc = -inc
    else:
        inc = math.pow(10, power) * factor
        i1 = round_half_up(start / inc)
        i2 = round_half_up(stop / inc)
        if i1 * inc < start:
            i1 += 1
        if i2 * inc > stop:
            i2 -= 1
    if i2 < i1 and 0.5 <= count < 2:
        return _tick_increment(start, stop, count * 2)
    return i1, i2, inc


def tick_step(start: float, stop: float, count: int = 10) -> float:
    """Signed distance between consecutive "nice" ticks."""
    reverse = stop < start
    if reverse:
        start, stop = stop, start
    _, _, inc = _tick_increment(start, stop, count)
    step = 1 / -inc if inc < 0 else inc
    return -step if reverse else step


def ticks(start: float, stop: float, count: int = 10) -> List[float]:
    """
    Approximately ``count`` evenly spaced, human-friendly values in [start, stop].

    Steps are 1, 2 or 5 times a power of ten; the values are computed from
    integer multiples so they print without float noise (0.1 * 3 -> 0.3).
    """
    if not count > 0:
        return []
    if start == stop:
        return [start]
    reverse = stop < start
    if reverse:
        start, stop = stop, start
    i1, i2, inc = _tick_increment(start, stop, count)
    if not i2 >= i1:
        return []
    n = i2 - i1 + 1
    if inc < 0:
        values = [(i1 + i) / -inc for i in range(n)]
    else:
        values = [(i1 + i) * inc for i in range(n)]
    return values[::-1] if reverse else values


class LinearScale:
    def __init__(self, domain: Sequence[float], range_: Sequence[float], round_output: bool = False):
        self.domain = (float(domain[0]), float(domain[1]))
        self.range = (float(range_[0]), float(range_[1]))
        self.round_output = round_output

    @property
    def degenerate(self) -> bool:
        return self.domain[0] == self.domain[1]

    def normalize(self, value: float) -> float:
        d0, d1 = self.domain
        if d1 == d0:
            return 0.5
        return (value - d0) / (d1 - d0)

    def __call__(self, value: float) -> float:
        r0, r1 = self.range
        t = self.normalize(value)
        out = r0 * (1 - t) + r1 * t
        if self.round_output:
            return round_half_up(out)
        return out

    def ticks(self, count: int = 10) -> List[float]:
        return ticks(self.domain[0], self.domain[1], count)

    def tick_format(self, count: int = 10):
        step = abs(tick_step(self.domain[0], self.domain[1], count)) if not self.degenerate else 1.0
        precision = max(0, -_exponent(step))

        def fmt(value: float) -> str:
            text = f"{value:,.{precision}f}"
            if text.startswith("-"):
                # typographic minus, as browser charting axes print it
                text = "−" + text[1:]
                if float(text[1:].replace(",", "")) == 0:
                    text = text[1:]
            return text

        return fmt


def _exponent(value: float) -> int:
    """Decimal exponent of ``value`` in scientific notation (0.25 -> -1)."""
    return int(math.floor(math.log10(value)))


class BandScale:
    """Discrete domain onto equal, contiguous bands of [range[0], range[1]]."""

    def __init__(self, domain: Sequence[Hashable], range_: Sequence[float]):
        self.domain = list(dict.fromkeys(domain))
        self.range = (float(range_[0]), float(range_[1]))
        self._index = {value: i for i, value in enumerate(self.domain)}

    @property
    def step(self) -> float:
        r0, r1 = self.range
        return (r1 - r0) / max(1, len(self.domain))

    @property
    def bandwidth(self) -> float:
        return self.step

    def __call__(self, value: Hashable) -> float:
        # Unknown values have no band.
        index = self._index.get(value)
        if index is None:
            return None
        return self.range[0] + self.step * index
