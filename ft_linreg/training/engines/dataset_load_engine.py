# ft_linreg/training/engines/dataset_load_engine.py
from __future__ import annotations

import math
from pathlib import Path
from typing import List

import pyarrow as pa
import pyarrow.csv as pacsv

from ft_linreg import logs
from ft_linreg.training.context import SampleSeries
from ft_linreg.utils.errors import EmptyDatasetError, InvalidColumnCount, NonNumericValue
from ft_linreg.utils.filesystem import FileSystem

N_COLUMNS = 2


class DatasetLoadEngine:
    """
    DatasetLoadEngine（FINAL）

    两列 CSV → SampleSeries：
    - 第一行为表头（坐标轴名称），必须恰好两列
    - 之后每行必须恰好两列，且均为有限实数
    - 任何违反立即抛错，不产生部分数据集
    """

    def __init__(self, delimiter: str = ","):
        self.delimiter = delimiter

    @logs.catch(msg="dataset load failed", log_time=False)
    def load(self, path: str | Path) -> SampleSeries:
        path = FileSystem.require_file(path)

        if not self._decode(path).strip():
            raise InvalidColumnCount("missing header record")

        table = self._read_table(path)

        if table.num_columns != N_COLUMNS:
            raise InvalidColumnCount(line=1, found=table.num_columns)

        header = [table.column(i)[0].as_py() for i in range(N_COLUMNS)]
        raw_x = table.column(0).to_pylist()[1:]
        raw_y = table.column(1).to_pylist()[1:]

        if not raw_x:
            raise EmptyDatasetError(f"{path} has a header but no records")

        x = [self._parse(v, line) for line, v in enumerate(raw_x, start=2)]
        y = [self._parse(v, line) for line, v in enumerate(raw_y, start=2)]

        logs.info(f"[DatasetLoadEngine] loaded {len(x)} rows from {path} header={header}")
        return SampleSeries(x=x, y=y, x_name=header[0], y_name=header[1])

    # ------------------------------------------------------------------
    @staticmethod
    def _decode(path: Path) -> str:
        raw = path.read_bytes()
        try:
            return raw.decode("utf-8")
        except UnicodeDecodeError as e:
            line = raw.count(b"\n", 0, e.start) + 1
            raise NonNumericValue(f"line {line} is not valid UTF-8", line=line) from e

    def _read_table(self, path: Path) -> pa.Table:
        invalid: List[pacsv.InvalidRow] = []

        def _on_invalid(row: pacsv.InvalidRow) -> str:
            invalid.append(row)
            return "skip"

        try:
            table = pacsv.read_csv(
                path,
                read_options=pacsv.ReadOptions(autogenerate_column_names=True, use_threads=False),
                parse_options=pacsv.ParseOptions(
                    delimiter=self.delimiter,
                    invalid_row_handler=_on_invalid,
                ),
                convert_options=pacsv.ConvertOptions(
                    column_types={f"f{i}": pa.string() for i in range(N_COLUMNS)},
                    strings_can_be_null=False,
                ),
            )
        except pa.ArrowInvalid as e:
            raise NonNumericValue(str(e).strip().split("\n")[0]) from e

        if invalid:
            row = invalid[0]
            raise InvalidColumnCount(line=row.number, found=row.actual_columns)

        return table

    @staticmethod
    def _parse(value, line: int) -> float:
        # 不接受首尾空白和数字分隔符 "_"
        if isinstance(value, str) and (value != value.strip() or "_" in value):
            raise NonNumericValue(line=line, value=value)

        try:
            number = float(value)
        except (TypeError, ValueError):
            raise NonNumericValue(line=line, value=value) from None

        if not math.isfinite(number):
            raise NonNumericValue(line=line, value=value)

        return number
