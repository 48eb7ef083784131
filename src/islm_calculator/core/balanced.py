"""部門収支均衡ソルバー（逆問題）

目標とする部門収支（対外部門 SSE または公的部門 SSP）をゼロにするために、
1つの政策変数（Mp, G0, TR0, T0）がとるべき値を求め、その下で均衡を解き直す。

対外部門（SSE = 0）:
    Y* = (X0 - IM0) / m
    h*A0* + b*Mp* = Y* * D   を政策変数について解く

公的部門（SSP = 0）:
    金融政策: Y* = (G0 + TR0 - T0) / (t - n) から Mp* を逆算
    財政政策: SSP = 0 を独立需要に代入し、乗数 gamma, beta で Y* を解く
"""

import logging
from dataclasses import dataclass
from enum import StrEnum

from islm_calculator.core.equilibrium import (
    EquilibriumResult,
    ensure_matching_result,
    interest_rate,
    round_half_away,
)
from islm_calculator.core.exceptions import CalculationError
from islm_calculator.core.validation import equilibrium_denominator
from islm_calculator.parameters.defaults import ParameterSet

logger = logging.getLogger(__name__)


class BalanceTarget(StrEnum):
    """ゼロにする部門収支"""

    EXTERNAL = "nx"  # 対外部門収支 SSE（純輸出）
    PUBLIC = "ssp"  # 公的部門収支 SSP


class PolicyVariable(StrEnum):
    """調整する政策変数"""

    MONEY_SUPPLY = "Mp"
    GOVERNMENT_SPENDING = "G0"
    TRANSFERS = "TR0"
    AUTONOMOUS_TAX = "T0"

    @property
    def is_fiscal(self) -> bool:
        return self is not PolicyVariable.MONEY_SUPPLY


@dataclass(frozen=True)
class BalancedTargetQuery:
    """逆問題の入力"""

    target: BalanceTarget
    policy: PolicyVariable
    params: ParameterSet
    base_result: EquilibriumResult

    @property
    def title(self) -> str:
        label = "NX" if self.target is BalanceTarget.EXTERNAL else "SSP"
        return f"{label} = 0 の強制均衡（{self.policy.value} で調整）"


@dataclass(frozen=True)
class BalancedResult:
    """逆問題の結果（小数点以下2桁に丸め済み）

    Attributes:
        income: 目標均衡所得 Y*
        interest_rate: 目標均衡金利 r*
        policy_value: 政策変数の必要値
        delta: 元の値からの変化量
        query: 入力
    """

    income: float
    interest_rate: float
    policy_value: float
    delta: float
    query: BalancedTargetQuery

    @property
    def original_value(self) -> float:
        return getattr(self.query.params, self.query.policy.value)

    def apply_to(self, params: ParameterSet | None = None) -> ParameterSet:
        """政策変数を必要値に差し替えたパラメータセットを返す"""
        base = params if params is not None else self.query.params
        return base.with_updates(**{self.query.policy.value: self.policy_value})


def _require(condition: bool, message: str) -> None:
    if not condition:
        raise CalculationError(message)


def _solve_external(params: ParameterSet, policy: PolicyVariable) -> tuple[float, float]:
    """SSE = 0 となる (Y*, 政策変数*) を返す"""
    C0, c1, T0, TR0, I0, G0 = params.C0, params.c1, params.T0, params.TR0, params.I0, params.G0
    b, m, h, Mp = params.b, params.m, params.h, params.Mp
    net_exports = params.autonomous_net_exports
    autonomous = C0 + c1 * (TR0 - T0) + I0 + G0 + net_exports
    denominator = equilibrium_denominator(params)

    _require(m != 0, "m がゼロのため NX = 0 となる所得を決定できません。")
    target_income = net_exports / m
    required_numerator = target_income * denominator

    if policy is PolicyVariable.MONEY_SUPPLY:
        _require(b != 0, "M/P を調整する場合、b はゼロであってはなりません。")
        return target_income, (required_numerator - h * autonomous) / b

    _require(h != 0, "財政政策で調整する場合、h はゼロであってはなりません。")
    required_autonomous = (required_numerator - b * Mp) / h

    if policy is PolicyVariable.GOVERNMENT_SPENDING:
        fixed = C0 + c1 * (TR0 - T0) + I0 + net_exports
        return target_income, required_autonomous - fixed

    _require(c1 != 0, f"{policy.value} を調整する場合、c1 はゼロであってはなりません。")
    if policy is PolicyVariable.TRANSFERS:
        fixed = C0 - c1 * T0 + I0 + G0 + net_exports
        return target_income, (required_autonomous - fixed) / c1

    fixed = C0 + c1 * TR0 + I0 + G0 + net_exports
    return target_income, (fixed - required_autonomous) / c1


def _solve_public(
    params: ParameterSet, base_result: EquilibriumResult, policy: PolicyVariable
) -> tuple[float, float]:
    """SSP = 0 となる (Y*, 政策変数*) を返す"""
    C0, c1, T0, t, TR0 = params.C0, params.c1, params.T0, params.t, params.TR0
    I0, b, G0, n, h, Mp = params.I0, params.b, params.G0, params.n, params.h, params.Mp
    net_exports = params.autonomous_net_exports

    if policy is PolicyVariable.MONEY_SUPPLY:
        # 財政変数は固定なので Y* は SSP = 0 だけで決まる
        _require(t - n != 0, "SSP = 0 には t と n が異なる必要があります。")
        target_income = (G0 + TR0 - T0) / (t - n)
        _require(b != 0, "M/P を調整する場合、b はゼロであってはなりません。")
        autonomous = C0 + c1 * (TR0 - T0) + I0 + G0 + net_exports
        denominator = equilibrium_denominator(params)
        return target_income, (target_income * denominator - h * autonomous) / b

    gamma = base_result.unrounded.gamma
    beta = base_result.unrounded.beta

    if policy is PolicyVariable.GOVERNMENT_SPENDING:
        fixed = C0 + I0 + net_exports + T0 * (1 - c1) - TR0 * (1 - c1)
        multiplier_denominator = 1 - gamma * (t - n)
    else:
        fixed = C0 + I0 + G0 * (1 - c1) + net_exports
        multiplier_denominator = 1 - gamma * c1 * (t - n)

    _require(
        multiplier_denominator != 0,
        "最終乗数の分母がゼロです。均衡は存在しません。",
    )
    target_income = (gamma * fixed + beta * Mp) / multiplier_denominator

    # SSP = 0 に戻して政策変数を求める
    ssp_income_term = (t - n) * target_income
    if policy is PolicyVariable.GOVERNMENT_SPENDING:
        return target_income, T0 - TR0 + ssp_income_term
    if policy is PolicyVariable.TRANSFERS:
        return target_income, T0 - G0 + ssp_income_term
    return target_income, G0 + TR0 - ssp_income_term


def solve_balanced(
    params: ParameterSet,
    base_result: EquilibriumResult,
    target: BalanceTarget,
    policy: PolicyVariable,
) -> BalancedResult:
    """目標の部門収支をゼロにする政策変数の値を求める

    Args:
        params: ベースのパラメータセット
        base_result: ベースの均衡結果（公的部門・財政政策では乗数を使う）
        target: ゼロにする部門収支
        policy: 調整する政策変数

    Raises:
        CalculationError: 必要な除数がゼロ、政策と目標が両立しない場合、
            または base_result が params から解かれたものでない場合
    """
    ensure_matching_result(params, base_result)
    target = BalanceTarget(target)
    policy = PolicyVariable(policy)
    query = BalancedTargetQuery(target, policy, params, base_result)
    logger.debug("逆問題: %s", query.title)

    denominator = equilibrium_denominator(params)
    _require(denominator != 0, "IS-LMの分母がゼロです。体系は解を持ちません。")

    if target is BalanceTarget.EXTERNAL:
        target_income, policy_value = _solve_external(params, policy)
    else:
        target_income, policy_value = _solve_public(params, base_result, policy)

    money_stock = policy_value if policy is PolicyVariable.MONEY_SUPPLY else params.Mp
    target_rate = interest_rate(target_income, money_stock, params)
    original = getattr(params, policy.value)

    return BalancedResult(
        income=round_half_away(target_income),
        interest_rate=round_half_away(target_rate),
        policy_value=round_half_away(policy_value),
        delta=round_half_away(policy_value - original),
        query=query,
    )
