"""パラメータショックのシミュレーション

ベースのパラメータセットの一部を差し替えて均衡を解き直し、
主要変数を比較する。複数のパラメータを同時に変えることもできるが、
ショックとして帰属させるのは宣言順で最初に変化したパラメータのみ（単一ショックの仮定）。
"""

import logging
import math
from collections.abc import Mapping
from dataclasses import dataclass
from enum import StrEnum

from islm_calculator.core.equilibrium import EquilibriumResult, ensure_matching_result, solve
from islm_calculator.core.exceptions import ShockValidationError
from islm_calculator.core.validation import ensure_valid
from islm_calculator.parameters.constants import COMPARISON
from islm_calculator.parameters.defaults import FIELD_NAMES, ParameterSet

logger = logging.getLogger(__name__)

# 比較表に並べる変数
COMPARED_VARIABLES: dict[str, str] = {
    "Y": "所得（Y）",
    "r": "金利（r）",
    "C": "消費（C）",
    "I": "投資（I）",
    "G": "政府支出（G）",
    "Sp": "民間貯蓄（Sp）",
    "SSP": "公的部門収支（SSP）",
    "SSE": "対外部門収支（SSE）",
}


class Direction(StrEnum):
    UP = "up"
    DOWN = "down"
    UNCHANGED = "unchanged"


def percent_change(base: float, shocked: float) -> float:
    """変化率（%）

    ベース値がほぼゼロの場合、変化があれば符号付きの無限大を返す。
    """
    change = shocked - base
    if abs(base) > COMPARISON.base_threshold:
        return change / base * 100
    if abs(change) > COMPARISON.change_threshold:
        return math.inf if change > 0 else -math.inf
    return 0.0


def direction_of(change: float) -> Direction:
    if change > COMPARISON.change_threshold:
        return Direction.UP
    if change < -COMPARISON.change_threshold:
        return Direction.DOWN
    return Direction.UNCHANGED


@dataclass(frozen=True)
class ParameterChange:
    """変化したパラメータ"""

    name: str
    base: float
    shocked: float

    @property
    def is_increase(self) -> bool:
        return self.shocked > self.base


@dataclass(frozen=True)
class VariableChange:
    """1変数の比較（丸め後の値から計算）"""

    name: str
    label: str
    base: float
    shocked: float
    change: float
    percent: float
    direction: Direction

    @classmethod
    def between(cls, name: str, base: float, shocked: float) -> "VariableChange":
        change = shocked - base
        return cls(
            name=name,
            label=COMPARED_VARIABLES.get(name, name),
            base=base,
            shocked=shocked,
            change=change,
            percent=percent_change(base, shocked),
            direction=direction_of(change),
        )


@dataclass(frozen=True)
class ShockComparison:
    """ベース均衡とショック後均衡の比較

    Attributes:
        base: ベースの均衡結果
        shocked: ショック後の均衡結果
        parameter_changes: 変化したパラメータ（宣言順）
        variables: 変数ごとの比較
    """

    base: EquilibriumResult
    shocked: EquilibriumResult
    parameter_changes: tuple[ParameterChange, ...]
    variables: tuple[VariableChange, ...]

    @property
    def shocked_parameter(self) -> str | None:
        """ショックとして帰属させるパラメータ（最初に変化したもの）"""
        return self.parameter_changes[0].name if self.parameter_changes else None

    @property
    def is_increase(self) -> bool | None:
        return self.parameter_changes[0].is_increase if self.parameter_changes else None

    def get(self, name: str) -> VariableChange:
        """変数名で比較を取得する

        Raises:
            KeyError: 比較対象でない変数の場合
        """
        for variable in self.variables:
            if variable.name == name:
                return variable
        raise KeyError(name)


def simulate_shock(
    base: ParameterSet,
    overrides: Mapping[str, float],
    base_result: EquilibriumResult | None = None,
) -> ShockComparison:
    """ショックを適用して均衡を比較する

    Args:
        base: ベースのパラメータセット
        overrides: 差し替えるパラメータ（ベースと同じ値は無視する）
        base_result: ベースの均衡結果（省略時は解き直す）

    Raises:
        ShockValidationError: 未知のパラメータ名が含まれる場合
        InvalidParameterSetError: ショック後のパラメータセットが検証を通過しない場合
        CalculationError: base_result が base から解かれたものでない場合
    """
    unknown = sorted(set(overrides) - set(FIELD_NAMES))
    if unknown:
        raise ShockValidationError(f"未知のパラメータ: {', '.join(unknown)}")

    changes = tuple(
        ParameterChange(name, getattr(base, name), float(overrides[name]))
        for name in FIELD_NAMES
        if name in overrides and float(overrides[name]) != getattr(base, name)
    )
    shocked_params = base.with_updates(**{c.name: c.shocked for c in changes})
    ensure_valid(shocked_params)

    if base_result is None:
        base_result = solve(base)
    else:
        ensure_matching_result(base, base_result)
    shocked_result = solve(shocked_params)

    if changes:
        logger.debug(
            "ショック: %s (%s) ほか%d件",
            changes[0].name,
            "増加" if changes[0].is_increase else "減少",
            len(changes) - 1,
        )

    variables = tuple(
        VariableChange.between(name, getattr(base_result, name), getattr(shocked_result, name))
        for name in COMPARED_VARIABLES
    )
    return ShockComparison(
        base=base_result,
        shocked=shocked_result,
        parameter_changes=changes,
        variables=variables,
    )
