# ft_linreg/utils/errors.py
from __future__ import annotations


class UserInputError(RuntimeError):
    """
    Raised for invalid user-provided config (paths, policy params, etc).
    Should NOT print traceback.
    """


class LinRegError(RuntimeError):
    """
    Dataset / numeric failures (FINAL / FROZEN)

    The family is closed:
      - InvalidColumnCount
      - NonNumericValue
      - DegenerateRangeError
      - EmptyDatasetError

    Every failure is raised before (a, b) is touched. Never retried.
    """

    kind: str = "linreg_error"
    default_message: str = "linear regression failed"

    def __init__(self, detail: str | None = None):
        self.detail = detail
        super().__init__(self.format())

    def format(self) -> str:
        if self.detail:
            return f"{self.default_message}: {self.detail}"
        return self.default_message


class InvalidColumnCount(LinRegError):
    kind = "invalid_column_count"
    default_message = "Each record must have exactly two columns"

    def __init__(self, detail: str | None = None, *, line: int | None = None, found: int | None = None):
        self.line = line
        self.found = found
        if detail is None and line is not None:
            detail = f"line {line} has {found} fields"
        super().__init__(detail)


class NonNumericValue(LinRegError):
    kind = "non_numeric_value"
    default_message = "Each field must contain a finite numeric value"

    def __init__(self, detail: str | None = None, *, line: int | None = None, value: str | None = None):
        self.line = line
        self.value = value
        if detail is None and line is not None:
            detail = f"line {line} value {value!r}"
        super().__init__(detail)


class DegenerateRangeError(LinRegError):
    kind = "degenerate_range"
    default_message = "Normalization range is empty (all values identical or zero)"


class EmptyDatasetError(LinRegError):
    kind = "empty_dataset"
    default_message = "Dataset has no usable rows"
