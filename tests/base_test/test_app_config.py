# tests/base_test/test_app_config.py
import pytest
from pydantic import ValidationError

from ft_linreg.config.app_config import AppConfig
from ft_linreg.config.training_config import EpochsPolicyConfig, ThresholdPolicyConfig


def test_default_config_loads():
    cfg = AppConfig.load()

    assert cfg.training.normalization == "maxabs"
    assert isinstance(cfg.training.policy, ThresholdPolicyConfig)
    assert cfg.plot.width == 800
    assert cfg.plot.height == 600


def test_yaml_sections_parsed(write_config):
    path = write_config(
        {
            "data": {"path": "km.csv", "delimiter": ";"},
            "training": {
                "normalization": "affine",
                "learning_rate": 0.05,
                "policy": {"kind": "epochs", "n_epochs": 250},
            },
            "plot": {"width": 1024, "height": 768, "output_path": "out.png"},
        }
    )
    cfg = AppConfig.load(path=str(path))

    assert cfg.data.path == "km.csv"
    assert cfg.data.delimiter == ";"
    assert cfg.log.level == "DEBUG"
    assert isinstance(cfg.training.policy, EpochsPolicyConfig)
    assert cfg.training.policy.n_epochs == 250
    assert cfg.training.learning_rate == 0.05
    assert cfg.plot.output_path == "out.png"


def test_missing_sections_use_defaults(write_config):
    cfg = AppConfig.load(path=str(write_config()))

    assert cfg.data.path is None
    assert cfg.training.policy.d_rms == 1e-10
    assert cfg.training.policy.max_iterations is None


def test_env_overrides_dataset(write_config, monkeypatch):
    monkeypatch.setenv("FT_LINREG_DATASET", "/tmp/from_env.csv")
    monkeypatch.setenv("FT_LINREG_LOG_LEVEL", "WARNING")

    cfg = AppConfig.load(path=str(write_config({"data": {"path": "file.csv"}})))

    assert cfg.data.path == "/tmp/from_env.csv"
    assert cfg.log.level == "WARNING"


def test_missing_file_should_fail(tmp_path):
    with pytest.raises(FileNotFoundError):
        AppConfig.load(path=str(tmp_path / "nope.yml"))


@pytest.mark.parametrize(
    "training",
    [
        {"policy": {"kind": "threshold", "d_rms": 0}},
        {"policy": {"kind": "epochs", "n_epochs": -5}},
        {"policy": {"kind": "momentum"}},
        {"learning_rate": -0.1},
        {"normalization": "zscore"},
    ],
)
def test_invalid_training_should_fail(write_config, training):
    with pytest.raises(ValidationError):
        AppConfig.load(path=str(write_config({"training": training})))


def test_invalid_plot_size_should_fail(write_config):
    with pytest.raises(ValidationError):
        AppConfig.load(path=str(write_config({"plot": {"width": 0}})))
