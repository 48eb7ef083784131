"""CLIコマンド実装"""

import logging
import math
from collections.abc import Callable
from functools import wraps
from pathlib import Path

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from islm_calculator.core.balanced import (
    BalancedResult,
    BalanceTarget,
    PolicyVariable,
)
from islm_calculator.core.exceptions import (
    CalculationError,
    InvalidParameterSetError,
    ISLMError,
    ShockValidationError,
    SolverError,
    ValidationError,
)
from islm_calculator.core.session import CalculatorSession
from islm_calculator.core.shocks import ShockComparison
from islm_calculator.core.transmission import TransmissionMechanism, describe_transmission
from islm_calculator.core.validation import validate
from islm_calculator.output.reports import RESULT_LABELS, ReportGenerator, format_percent
from islm_calculator.output.schemas import (
    BalancedReport,
    EquilibriumReport,
    ParameterReport,
    ShockReport,
)
from islm_calculator.parameters.defaults import ParameterSet
from islm_calculator.parameters.loader import load_parameters

console = Console()
logger = logging.getLogger(__name__)

# パラメータ表の説明
PARAMETER_DESCRIPTIONS: dict[str, str] = {
    "C0": "独立消費",
    "c1": "限界消費性向",
    "T0": "独立税",
    "t": "所得税率",
    "TR0": "移転支払",
    "I0": "独立投資",
    "b": "投資の金利感応度",
    "G0": "独立政府支出",
    "n": "政府支出の所得反応",
    "X0": "輸出",
    "IM0": "独立輸入",
    "m": "限界輸入性向",
    "k": "貨幣需要の所得感応度",
    "h": "貨幣需要の金利感応度",
    "Mp": "実質貨幣供給（M/P）",
}


def configure_logging(verbose: bool) -> None:
    """ログ出力を設定する（--verbose時はDEBUG）"""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def handle_islm_error[F: Callable[..., None]](func: F) -> F:
    """CLI用エラーハンドリングデコレータ

    ISLMの例外を捕捉し、ユーザーフレンドリーなエラーメッセージを表示する。
    """

    @wraps(func)
    def wrapper(*args: object, **kwargs: object) -> None:
        try:
            func(*args, **kwargs)
        except InvalidParameterSetError as e:
            console.print("[red]パラメータエラー:[/red]")
            for error in e.errors:
                console.print(f"[red]  - {escape(str(error))}[/red]")
            raise typer.Exit(1) from e
        except ValidationError as e:
            console.print(f"[red]入力エラー: {escape(str(e))}[/red]")
            raise typer.Exit(1) from e
        except SolverError as e:
            console.print(f"[red]計算エラー: {escape(str(e))}[/red]")
            raise typer.Exit(2) from e
        except ISLMError as e:
            console.print(f"[red]エラー: {escape(str(e))}[/red]")
            raise typer.Exit(3) from e

    return wrapper  # type: ignore[return-value]


def resolve_parameters(params_file: Path | None) -> ParameterSet:
    """パラメータファイルがあれば読み込み、なければデフォルトを返す"""
    if params_file is None:
        return ParameterSet()
    return load_parameters(params_file)


def parse_assignments(assignments: list[str]) -> dict[str, float]:
    """NAME=VALUE 形式の指定を辞書に変換する

    Raises:
        ShockValidationError: 形式が不正、または値が nan・inf の場合
    """
    overrides: dict[str, float] = {}
    for item in assignments:
        name, sep, raw = item.partition("=")
        if not sep or not name.strip():
            raise ShockValidationError(f"NAME=VALUE 形式で指定してください: {item!r}")
        try:
            value = float(raw)
        except ValueError as e:
            raise ShockValidationError(f"{name.strip()} の値が数値ではありません: {raw!r}") from e
        if not math.isfinite(value):
            raise ShockValidationError(f"{name.strip()} の値は有限である必要があります: {raw!r}")
        overrides[name.strip()] = value
    return overrides


def _print_equilibrium(session: CalculatorSession) -> None:
    table = Table(title="ベース均衡")
    table.add_column("変数", style="cyan")
    table.add_column("値", style="green", justify="right")
    for name, value in session.result.to_dict().items():
        table.add_row(RESULT_LABELS.get(name, name), f"{value:.2f}")
    console.print(table)


def _describe(comparison: ShockComparison) -> TransmissionMechanism | None:
    """変化したパラメータがなければ説明しない"""
    if comparison.shocked_parameter is None or comparison.is_increase is None:
        return None
    return describe_transmission(comparison.shocked_parameter, comparison.is_increase)


def _print_comparison(
    comparison: ShockComparison, mechanism: TransmissionMechanism | None
) -> None:
    table = Table(title="ショック比較")
    table.add_column("変数", style="cyan")
    table.add_column("ベース", justify="right")
    table.add_column("ショック後", justify="right")
    table.add_column("変化率", justify="right")

    marks = {"up": ("▲ ", "green"), "down": ("▼ ", "red"), "unchanged": ("", "white")}
    for v in comparison.variables:
        sign, style = marks[v.direction.value]
        table.add_row(
            v.label,
            f"{v.base:.2f}",
            f"{v.shocked:.2f}",
            f"[{style}]{sign}{format_percent(v.percent)}[/{style}]",
        )
    console.print(table)

    others = comparison.parameter_changes[1:]
    if others:
        names = ", ".join(c.name for c in others)
        console.print(f"[yellow]同時に変更されたパラメータ（説明対象外）: {names}[/yellow]")

    if mechanism is None:
        console.print("[yellow]パラメータに変化なし: 波及メカニズムはありません[/yellow]")
        return

    steps = "\n".join(f"{i}. {step}" for i, step in enumerate(mechanism.steps, 1))
    console.print(
        Panel(
            f"{mechanism.summary}\n\n{steps}",
            title=mechanism.title,
        )
    )


def _print_balanced(result: BalancedResult) -> None:
    policy = result.query.policy.value
    style = "green" if result.delta > 0 else "red" if result.delta < 0 else "white"
    console.print(
        Panel(
            f"Y* = {result.income:.2f}\n"
            f"r* = {result.interest_rate:.2f}\n"
            f"{policy}* = {result.policy_value:.2f}\n"
            f"Δ{policy} = [{style}]{result.delta:.2f}[/{style}]"
            f"（元の値: {result.original_value:.2f}）",
            title=f"結果: {result.query.title}",
        )
    )


@handle_islm_error
def solve_command(params_file: Path | None = None, as_json: bool = False) -> None:
    """ベース均衡を表示"""
    session = CalculatorSession(resolve_parameters(params_file))

    if as_json:
        typer.echo(EquilibriumReport.from_result(session.result).model_dump_json(indent=2))
        return

    console.print()
    _print_equilibrium(session)


@handle_islm_error
def check_command(params_file: Path | None = None) -> None:
    """パラメータを検証"""
    errors = validate(resolve_parameters(params_file))
    if errors:
        console.print(f"[red]{len(errors)}件の問題があります:[/red]")
        for error in errors:
            console.print(f"[red]  - ({error.kind.value}) {escape(str(error))}[/red]")
        raise typer.Exit(1)
    console.print("[green]パラメータは有効です[/green]")


@handle_islm_error
def shock_command(
    assignments: list[str], params_file: Path | None = None, as_json: bool = False
) -> None:
    """ショックをシミュレーション"""
    session = CalculatorSession(resolve_parameters(params_file))
    comparison = session.simulate_shock(parse_assignments(assignments))
    mechanism = _describe(comparison)

    if as_json:
        typer.echo(ShockReport.from_comparison(comparison, mechanism).model_dump_json(indent=2))
        return

    console.print()
    _print_comparison(comparison, mechanism)


@handle_islm_error
def balance_command(
    target: BalanceTarget,
    policy: PolicyVariable,
    params_file: Path | None = None,
    as_json: bool = False,
) -> None:
    """部門収支をゼロにする政策変数を計算"""
    session = CalculatorSession(resolve_parameters(params_file))
    result = session.balance(target, policy)

    if as_json:
        typer.echo(BalancedReport.from_result(result).model_dump_json(indent=2))
        return

    console.print()
    _print_balanced(result)


@handle_islm_error
def report_command(
    params_file: Path | None = None,
    assignments: list[str] | None = None,
    output_file: Path | None = None,
) -> None:
    """レポートを生成"""
    session = CalculatorSession(resolve_parameters(params_file))

    balanced: list[BalancedResult] = []
    for target in BalanceTarget:
        for policy in PolicyVariable:
            try:
                balanced.append(session.balance(target, policy))
            except CalculationError as e:
                logger.warning("%s / %s は計算できません: %s", target.value, policy.value, e)

    comparison = None
    mechanism = None
    if assignments:
        comparison = session.simulate_shock(parse_assignments(assignments))
        mechanism = _describe(comparison)

    report = ReportGenerator().generate_report(
        session.result, balanced=balanced, comparison=comparison, mechanism=mechanism
    )

    if output_file:
        output_file.write_text(report, encoding="utf-8")
        console.print(f"[green]レポートを保存しました: {output_file}[/green]")
    else:
        console.print(report, markup=False)


@handle_islm_error
def parameters_command(params_file: Path | None = None, as_json: bool = False) -> None:
    """パラメータを表示"""
    params = resolve_parameters(params_file)

    if as_json:
        typer.echo(ParameterReport.from_params(params).model_dump_json(indent=2))
        return

    table = Table(title="モデルパラメータ")
    table.add_column("パラメータ", style="cyan")
    table.add_column("値", style="green", justify="right")
    table.add_column("説明", style="yellow")
    for name, value in params.to_dict().items():
        table.add_row(name, f"{value:g}", PARAMETER_DESCRIPTIONS[name])

    console.print()
    console.print(table)
