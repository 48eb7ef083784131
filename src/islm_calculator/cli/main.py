"""CLIメインエントリーポイント"""

from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console

from islm_calculator import __version__
from islm_calculator.cli.commands import (
    balance_command,
    check_command,
    configure_logging,
    parameters_command,
    report_command,
    shock_command,
    solve_command,
)
from islm_calculator.core.balanced import BalanceTarget, PolicyVariable

app = typer.Typer(
    name="islm",
    help="IS-LMモデル教育用計算機",
    no_args_is_help=True,
)
console = Console()

ParamsOption = Annotated[
    Path | None,
    typer.Option("--params", "-p", help="パラメータファイル（TOML）"),
]
JsonOption = Annotated[
    bool,
    typer.Option("--json", help="JSONで出力"),
]


@app.callback()
def main(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="デバッグログを表示"),
    ] = False,
) -> None:
    """IS-LMモデルの均衡・ショック・部門収支を計算する"""
    configure_logging(verbose)


@app.command("solve")
def solve(params_file: ParamsOption = None, as_json: JsonOption = False) -> None:
    """ベース均衡を計算

    例:
        islm solve
        islm solve --params scenario.toml --json
    """
    solve_command(params_file, as_json)


@app.command("check")
def check(params_file: ParamsOption = None) -> None:
    """パラメータを検証し、すべての問題を表示"""
    check_command(params_file)


@app.command("shock")
def shock(
    assignments: Annotated[
        list[str],
        typer.Option("--set", "-s", help="変更するパラメータ（NAME=VALUE、複数指定可）"),
    ],
    params_file: ParamsOption = None,
    as_json: JsonOption = False,
) -> None:
    """パラメータショックをシミュレーション

    例:
        islm shock --set G0=3500
        islm shock --set Mp=27500 --set t=0.25
    """
    shock_command(assignments, params_file, as_json)


@app.command("balance")
def balance(
    target: Annotated[
        BalanceTarget,
        typer.Argument(help="ゼロにする部門収支: nx（対外部門）, ssp（公的部門）"),
    ],
    policy: Annotated[
        PolicyVariable,
        typer.Argument(help="調整する政策変数: Mp, G0, TR0, T0"),
    ],
    params_file: ParamsOption = None,
    as_json: JsonOption = False,
) -> None:
    """部門収支をゼロにする政策変数の値を計算

    例:
        islm balance nx Mp
        islm balance ssp G0
    """
    balance_command(target, policy, params_file, as_json)


@app.command("report")
def report(
    params_file: ParamsOption = None,
    assignments: Annotated[
        list[str] | None,
        typer.Option("--set", "-s", help="ショックとして変更するパラメータ（NAME=VALUE）"),
    ] = None,
    output_file: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="出力ファイル"),
    ] = None,
) -> None:
    """Markdownレポートを生成"""
    report_command(params_file, assignments, output_file)


@app.command("parameters")
def parameters(params_file: ParamsOption = None, as_json: JsonOption = False) -> None:
    """モデルパラメータを表示"""
    parameters_command(params_file, as_json)


@app.command("version")
def version() -> None:
    """バージョン情報を表示"""
    console.print(f"islm version {__version__}")


if __name__ == "__main__":
    app()
