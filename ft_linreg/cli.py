#!filepath: ft_linreg/cli.py
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Optional

import typer
from pydantic import ValidationError
from rich import print
from rich.markup import escape

from ft_linreg import __version__, logs
from ft_linreg.config.app_config import AppConfig
from ft_linreg.utils.errors import LinRegError, UserInputError

app = typer.Typer(help="ft_linreg: gradient-descent linear regression CLI")


class PolicyKind(str, Enum):
    EPOCHS = "epochs"
    THRESHOLD = "threshold"


class NormalizationKind(str, Enum):
    MAXABS = "maxabs"
    AFFINE = "affine"


@app.command()
def version():
    print(f"v{__version__}")


@app.command()
def train(
    dataset: Optional[Path] = typer.Argument(None, help="Two-column CSV with a header row"),
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="YAML config file"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="PNG output path"),
    width: Optional[int] = typer.Option(None, help="Plot width in pixels"),
    height: Optional[int] = typer.Option(None, help="Plot height in pixels"),
    policy: Optional[PolicyKind] = typer.Option(None, help="Stopping policy"),
    epochs: Optional[int] = typer.Option(None, help="n_epochs for the epochs policy"),
    d_rms: Optional[float] = typer.Option(None, "--d-rms", help="Error-delta threshold"),
    max_iterations: Optional[int] = typer.Option(None, help="Iteration bound for the threshold policy"),
    learning_rate: Optional[float] = typer.Option(None, help="Gradient descent step size"),
    normalization: Optional[NormalizationKind] = typer.Option(None, help="Normalization scheme"),
    plot: bool = typer.Option(True, "--plot/--no-plot", help="Render the scatter + line PNG"),
):
    """
    训练 y = a*x + b 并输出方程（可选出图）
    """
    from ft_linreg.workflows.training_workflow import build_training_pipeline

    try:
        cfg = AppConfig.load(str(config) if config else None)
        cfg = apply_overrides(
            cfg,
            dataset=dataset,
            output=output,
            width=width,
            height=height,
            policy=policy.value if policy else None,
            epochs=epochs,
            d_rms=d_rms,
            max_iterations=max_iterations,
            learning_rate=learning_rate,
            normalization=normalization.value if normalization else None,
            plot=plot,
        )
        logs.reconfigure(cfg.log)

        run_id = datetime.now().strftime("%Y%m%d-%H%M%S")
        ctx = build_training_pipeline(cfg).run(run_id)
    except (LinRegError, UserInputError, FileNotFoundError, ValidationError) as e:
        logs.exception(f"[cli] train failed: {e}")
        print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(code=1)

    print(escape(ctx.equation))
    if ctx.plot_path is not None:
        print(f"[green]Plot saved to {escape(str(ctx.plot_path))}[/green]")


def apply_overrides(
    cfg: AppConfig,
    *,
    dataset=None,
    output=None,
    width=None,
    height=None,
    policy=None,
    epochs=None,
    d_rms=None,
    max_iterations=None,
    learning_rate=None,
    normalization=None,
    plot=True,
) -> AppConfig:
    """
    命令行参数覆盖配置文件；结果重新经过 pydantic 校验。
    """
    raw = cfg.model_dump()
    data, training, plot_cfg = raw["data"], raw["training"], raw["plot"]

    if dataset is not None:
        data["path"] = str(dataset)
    if output is not None:
        plot_cfg["output_path"] = str(output)
    if width is not None:
        plot_cfg["width"] = width
    if height is not None:
        plot_cfg["height"] = height
    plot_cfg["enabled"] = plot_cfg["enabled"] and plot

    if learning_rate is not None:
        training["learning_rate"] = learning_rate
    if normalization is not None:
        training["normalization"] = normalization

    current = training["policy"]
    if policy is None:
        if epochs is not None:
            policy = "epochs"
        elif d_rms is not None or max_iterations is not None:
            policy = "threshold"
        else:
            policy = current["kind"]

    if policy != current["kind"]:
        current = {"kind": policy}

    if policy == "epochs":
        if d_rms is not None or max_iterations is not None:
            raise UserInputError("--d-rms / --max-iterations only apply to the threshold policy")
        if epochs is not None:
            current["n_epochs"] = epochs
    else:
        if epochs is not None:
            raise UserInputError("--epochs only applies to the epochs policy")
        if d_rms is not None:
            current["d_rms"] = d_rms
        if max_iterations is not None:
            current["max_iterations"] = max_iterations

    training["policy"] = current

    try:
        return AppConfig(**raw)
    except ValidationError as e:
        raise UserInputError(f"Invalid configuration: {e}") from e


if __name__ == "__main__":
    app()

# python -m ft_linreg.cli train data/data.csv --policy epochs --epochs 10000
