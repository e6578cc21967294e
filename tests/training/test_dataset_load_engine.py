# tests/training/test_dataset_load_engine.py
import pytest

from ft_linreg.training.engines.dataset_load_engine import DatasetLoadEngine
from ft_linreg.utils.errors import EmptyDatasetError, InvalidColumnCount, NonNumericValue


def test_load_header_and_values(linear_csv):
    samples = DatasetLoadEngine().load(linear_csv)

    assert samples.x_name == "x"
    assert samples.y_name == "y"
    assert samples.x.tolist() == [1.0, 2.0, 3.0]
    assert samples.y.tolist() == [2.0, 4.0, 6.0]
    assert len(samples) == 3
    assert samples.title == "y vs x"


def test_loaded_series_is_read_only(linear_csv):
    samples = DatasetLoadEngine().load(linear_csv)

    with pytest.raises(ValueError):
        samples.x[0] = 10.0


def test_decimal_and_negative_values(write_csv):
    path = write_csv("km,price\n240000,3650.5\n-1.25e3,0\n")
    samples = DatasetLoadEngine().load(path)

    assert samples.x.tolist() == [240000.0, -1250.0]
    assert samples.y.tolist() == [3650.5, 0.0]


def test_custom_delimiter(write_csv):
    path = write_csv("x;y\n1;2\n")
    samples = DatasetLoadEngine(delimiter=";").load(path)

    assert samples.x.tolist() == [1.0]


def test_three_field_row_is_invalid(write_csv):
    path = write_csv("x,y\n1,2\n2,4,5\n3,6\n")

    with pytest.raises(InvalidColumnCount) as exc:
        DatasetLoadEngine().load(path)

    assert exc.value.found == 3
    assert exc.value.kind == "invalid_column_count"


def test_one_field_row_is_invalid(write_csv):
    path = write_csv("x,y\n1,2\n7\n")

    with pytest.raises(InvalidColumnCount):
        DatasetLoadEngine().load(path)


def test_three_column_header_is_invalid(write_csv):
    path = write_csv("x,y,z\n1,2,3\n")

    with pytest.raises(InvalidColumnCount):
        DatasetLoadEngine().load(path)


def test_empty_file_has_no_header(write_csv):
    with pytest.raises(InvalidColumnCount):
        DatasetLoadEngine().load(write_csv(""))


def test_header_only_is_empty(write_csv):
    with pytest.raises(EmptyDatasetError):
        DatasetLoadEngine().load(write_csv("x,y\n"))


@pytest.mark.parametrize("bad", ["abc", "", "nan", "inf", " 6", "6 ", "6_000"])
def test_non_numeric_value(write_csv, bad):
    path = write_csv(f"x,y\n1,2\n3,{bad}\n")

    with pytest.raises(NonNumericValue) as exc:
        DatasetLoadEngine().load(path)

    assert exc.value.line == 3


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        DatasetLoadEngine().load(tmp_path / "missing.csv")


def test_invalid_utf8_reports_line(tmp_path):
    path = tmp_path / "data.csv"
    path.write_bytes(b"x,y\n1,2\n3,\xff\n")

    with pytest.raises(NonNumericValue) as exc:
        DatasetLoadEngine().load(path)

    assert exc.value.line == 3
    assert "not valid UTF-8" in str(exc.value)
