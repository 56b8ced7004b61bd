"""Yearly temperature records for a city, read from a CSV file."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from itertools import islice
from os import PathLike

_UNWANTED = "\"' \t\n\r"
_CLEAN_TABLE = str.maketrans("", "", _UNWANTED)
_CELLS_PER_LINE = 8


@dataclass(frozen=True)
class CityYear:
    """One year of a city's temperature data."""

    year: int
    num_days_below_32: int
    num_days_above_90: int
    average_temperature: float
    average_max: float
    average_min: float


class CityTemperatureData:
    """All of the yearly data for one city."""

    def __init__(self, name: str, data: Iterable[CityYear]) -> None:
        self.name = name
        self._years = tuple(data)
        if not self._years:
            raise ValueError(f"no yearly data given for {name!r}")

    def __len__(self) -> int:
        return len(self._years)

    def __getitem__(self, year: int) -> CityYear:
        found = next((entry for entry in self._years if entry.year == year), None)
        if found is None:
            raise KeyError(f"no data for year {year}")
        return found

    @property
    def first_year(self) -> int:
        """The year of the first record held."""
        return self._years[0].year

    def all_time_average(self) -> float:
        """Mean of the yearly average temperatures."""
        return sum(entry.average_temperature for entry in self._years) / len(self._years)

    def total_days_below_32(self) -> int:
        """Days below 32 degrees summed over all years."""
        return sum(entry.num_days_below_32 for entry in self._years)

    def total_days_above_90(self) -> int:
        """Days above 90 degrees summed over all years."""
        return sum(entry.num_days_above_90 for entry in self._years)


def clean(text: str) -> str:
    """Strip quotes and whitespace so a cell can be converted to a number."""
    return text.translate(_CLEAN_TABLE)


def parse_city_year(line: str) -> CityYear:
    """Turn one CSV line into a CityYear; the first two cells are ignored."""
    cells = line.rstrip("\r\n").split(",")
    if len(cells) < _CELLS_PER_LINE:
        raise ValueError(
            f"expected {_CELLS_PER_LINE} cells, found {len(cells)} in line {line!r}"
        )
    year, below, above = (int(clean(cell)) for cell in cells[2:5])
    average, average_max, average_min = (float(clean(cell)) for cell in cells[5:8])
    return CityYear(year, below, above, average, average_max, average_min)


def read_city(
    city_name: str,
    file_name: str | PathLike[str],
    start_line: int,
    end_line: int,
) -> CityTemperatureData:
    """Read data lines start_line..end_line (inclusive, 1-based, after the header)."""
    if start_line < 1:
        raise ValueError("start_line must be at least 1")
    if end_line < start_line:
        raise ValueError("end_line must not come before start_line")
    wanted = end_line - start_line + 1
    with open(file_name, encoding="utf-8", newline="") as handle:
        lines = list(islice(handle, start_line, end_line + 1))
    if len(lines) < wanted:
        raise ValueError(
            f"{file_name} holds only {len(lines)} of the {wanted} lines requested"
        )
    return CityTemperatureData(city_name, (parse_city_year(line) for line in lines))