# tests/base_test/test_logger.py
import pytest
from loguru import logger

from ft_linreg import logs


def capture(fn):
    captured = []
    sink_id = logger.add(lambda msg: captured.append(str(msg)), level="DEBUG")
    try:
        fn()
    finally:
        logger.remove(sink_id)
    return "\n".join(captured)


def test_catch_logs_and_reraises():
    @logs.catch(msg="load failed", log_time=False)
    def boom():
        raise ValueError("bad row")

    def call():
        with pytest.raises(ValueError):
            boom()

    output = capture(call)

    assert "[ERROR] boom: load failed" in output
    assert "bad row" in output


def test_catch_logs_time_and_returns_result():
    @logs.catch()
    def add(a, b):
        return a + b

    out = {}
    output = capture(lambda: out.setdefault("v", add(1, 2)))

    assert out["v"] == 3
    assert "[TIME] add took" in output


def test_catch_without_time_is_silent_on_success():
    @logs.catch(log_time=False)
    def ok():
        return "done"

    output = capture(ok)

    assert output == ""
