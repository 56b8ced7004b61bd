import pytest

from dsalgo.temperature import (
    CityTemperatureData,
    CityYear,
    clean,
    parse_city_year,
    read_city,
)

HEADER = "Name,Station,Year,Below32,Above90,Avg,AvgMax,AvgMin\n"
NYC_LINES = [
    '"NYC","STATION-A",1968,30,20,55.0,62.0,47.0\n',
    '"NYC","STATION-A",1969,29,25,56.4,63.1,46.9\n',
    '"NYC","STATION-A",1970,31,18,54.8,62.6,45.5\n',
]
BURLINGTON_LINES = [
    '"Burlington","STATION-B",1968,87,5,44.6,56.9,36.0\n',
    '"Burlington","STATION-B",1969,90,3,45.0,57.0,35.5\n',
]


@pytest.fixture
def csv_file(tmp_path):
    path = tmp_path / "tempdata.csv"
    path.write_text(HEADER + "".join(NYC_LINES + BURLINGTON_LINES), encoding="utf-8")
    return path


def test_clean_removes_quotes_and_whitespace():
    assert clean(' "56.4"\t\n') == "56.4"
    assert clean("'1968'") == "1968"


def test_parse_city_year_reads_cells():
    entry = parse_city_year(NYC_LINES[1])
    assert entry == CityYear(1969, 29, 25, 56.4, 63.1, 46.9)


def test_parse_city_year_rejects_short_line():
    with pytest.raises(ValueError):
        parse_city_year('"NYC","STATION-A",1968,30')


def test_parse_city_year_rejects_non_numeric():
    with pytest.raises(ValueError):
        parse_city_year('"NYC","STATION-A",year,30,20,55.0,62.0,47.0')


def test_read_first_city(csv_file):
    nyc = read_city("NYC", csv_file, 1, 3)
    assert len(nyc) == 3
    assert nyc.name == "NYC"
    assert nyc.first_year == 1968
    assert nyc[1969].num_days_below_32 == 29
    assert nyc[1969].average_temperature == pytest.approx(56.4)
    assert nyc[1970].average_max == pytest.approx(62.6)


def test_read_second_city(csv_file):
    burlington = read_city("Burlington", csv_file, 4, 5)
    assert len(burlington) == 2
    assert burlington.name == "Burlington"
    assert burlington.first_year == 1968
    assert burlington[1968].average_min == pytest.approx(36.0)
    assert burlington[1969].num_days_below_32 == 90


def test_read_city_past_end_of_file(csv_file):
    with pytest.raises(ValueError):
        read_city("NYC", csv_file, 4, 10)


def test_read_city_bad_range(csv_file):
    with pytest.raises(ValueError):
        read_city("NYC", csv_file, 3, 1)
    with pytest.raises(ValueError):
        read_city("NYC", csv_file, 0, 1)


def test_missing_year_raises_key_error():
    data = CityTemperatureData("Town", [CityYear(2000, 1, 2, 50.0, 60.0, 40.0)])
    assert data[2000].num_days_above_90 == 2
    with pytest.raises(KeyError) as excinfo:
        data[1999]
    assert "1999" in str(excinfo.value)


def test_single_year_aggregates_equal_that_year():
    entry = CityYear(2000, 12, 7, 51.5, 60.0, 40.0)
    data = CityTemperatureData("Town", [entry])
    assert data.all_time_average() == pytest.approx(51.5)
    assert data.total_days_below_32() == 12
    assert data.total_days_above_90() == 7


def test_aggregates_over_several_years():
    data = CityTemperatureData(
        "Town",
        [
            CityYear(2000, 10, 4, 50.0, 60.0, 40.0),
            CityYear(2001, 20, 6, 60.0, 70.0, 50.0),
        ],
    )
    assert data.all_time_average() == pytest.approx(55.0)
    assert data.total_days_below_32() == 30
    assert data.total_days_above_90() == 10


def test_empty_data_rejected():
    with pytest.raises(ValueError):
        CityTemperatureData("Nowhere", [])