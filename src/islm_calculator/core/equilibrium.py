"""IS-LM一般均衡ソルバー

線形のIS曲線・LM曲線の連立方程式を閉形式で解く:

    IS: Y = alpha * (A0 - b*r)
    LM: Mp = k*Y - h*r

ここで
    A0    = C0 + c1(TR0 - T0) + I0 + G0 + (X0 - IM0)   独立需要
    rho   = 1 - c1(1-t) + n + m                         限界漏出率
    alpha = 1 / rho                                     単純乗数

均衡:
    Y = (h*A0 + b*Mp) / (h*rho + b*k)
    r = (k/h)*Y - Mp/h          （h = 0 のときは r = (k*Y - Mp)/b）

すべての出力は小数点以下2桁に丸めた値を表示・比較用の値とする。
ショックの変化量・変化率は丸め後の値から計算するため、丸め誤差の累積も仕様の一部である。
"""

import logging
import math
from dataclasses import dataclass, field, fields

from islm_calculator.core.exceptions import CalculationError, PreconditionError
from islm_calculator.core.validation import leakage_rate, validate
from islm_calculator.parameters.constants import ROUNDING
from islm_calculator.parameters.defaults import ParameterSet

logger = logging.getLogger(__name__)


def round_half_away(value: float, decimals: int = ROUNDING.decimals) -> float:
    """0.01単位で四捨五入する（0から遠い側へ丸める）"""
    scale = 10**decimals
    magnitude = math.floor(abs(value) * scale + 0.5) / scale
    if magnitude == 0:
        return 0.0
    return math.copysign(magnitude, value)


def interest_rate(income: float, money_stock: float, params: ParameterSet) -> float:
    """LM曲線から金利を求める

    h = 0（貨幣需要が金利に反応しない）のときは h による除算を避け、
    IS側の投資感応度 b で解く。

    Raises:
        CalculationError: h と b が同時にゼロの場合
    """
    k, h, b = params.k, params.h, params.b
    if h == 0:
        if b == 0:
            raise CalculationError("h と b が同時にゼロのため金利を決定できません。")
        return (k * income - money_stock) / b
    return (k / h) * income - money_stock / h


@dataclass(frozen=True)
class EquilibriumValues:
    """均衡値の集合

    Attributes:
        Y: 均衡所得
        r: 均衡金利
        A0: 独立需要
        rho: 限界漏出率
        alpha: 単純乗数
        gamma: 財政政策乗数
        beta: 金融政策乗数
        C: 消費
        I: 投資
        G: 政府支出
        Sp: 民間貯蓄
        SSP: 公的部門収支
        SSE: 対外部門収支
    """

    Y: float
    r: float
    A0: float
    rho: float
    alpha: float
    gamma: float
    beta: float
    C: float
    I: float  # noqa: E741
    G: float
    Sp: float
    SSP: float
    SSE: float

    def rounded(self) -> "EquilibriumValues":
        return EquilibriumValues(
            **{name: round_half_away(getattr(self, name)) for name in OUTPUT_FIELDS}
        )

    def to_dict(self) -> dict[str, float]:
        return {name: getattr(self, name) for name in OUTPUT_FIELDS}


OUTPUT_FIELDS = tuple(f.name for f in fields(EquilibriumValues))


@dataclass(frozen=True)
class EquilibriumResult(EquilibriumValues):
    """丸め済みの均衡結果

    params は結果を生成したパラメータセットへの読み取り専用の参照。
    unrounded は丸め前の値で、均衡目標ソルバーが乗数を使う際に参照する。
    """

    params: ParameterSet = field(kw_only=True, repr=False)
    unrounded: EquilibriumValues = field(kw_only=True, repr=False, compare=False)


def compute_equilibrium(params: ParameterSet) -> EquilibriumValues:
    """丸め前の均衡値を計算する（検証は行わない）"""
    C0, c1, T0, t, TR0 = params.C0, params.c1, params.T0, params.t, params.TR0
    I0, b, G0, n = params.I0, params.b, params.G0, params.n
    m, k, h, Mp = params.m, params.k, params.h, params.Mp
    net_exports = params.autonomous_net_exports

    A0 = C0 + c1 * (TR0 - T0) + I0 + G0 + net_exports
    rho = leakage_rate(params)
    alpha = 1 / rho

    denominator = h * rho + b * k
    denominator_std = h + alpha * b * k

    Y = (h * A0 + b * Mp) / denominator
    r = interest_rate(Y, Mp, params)

    gamma = (alpha * h) / denominator_std
    beta = (alpha * b) / denominator_std

    disposable = Y - (T0 + t * Y) + TR0

    return EquilibriumValues(
        Y=Y,
        r=r,
        A0=A0,
        rho=rho,
        alpha=alpha,
        gamma=gamma,
        beta=beta,
        C=C0 + c1 * disposable,
        I=I0 - b * r,
        G=G0 + n * Y,
        Sp=-C0 + (1 - c1) * disposable,
        SSP=(T0 + t * Y) - (G0 + n * Y) - TR0,
        SSE=net_exports - m * Y,
    )


def solve(params: ParameterSet) -> EquilibriumResult:
    """一般均衡を解く

    事前条件: validate(params) が空であること。

    Raises:
        PreconditionError: パラメータセットが検証を通過しない場合
    """
    errors = validate(params)
    if errors:
        raise PreconditionError(errors)

    values = compute_equilibrium(params)
    display = values.rounded()
    logger.debug("均衡: Y=%.2f r=%.2f", display.Y, display.r)

    return EquilibriumResult(**display.to_dict(), params=params, unrounded=values)


def ensure_matching_result(params: ParameterSet, result: EquilibriumResult) -> None:
    """結果が params から解かれたものであることを確認する

    Raises:
        CalculationError: 別のパラメータセットから解かれた（古い）結果の場合
    """
    if result.params != params:
        raise CalculationError(
            "ベースの均衡結果が現在のパラメータセットと一致しません。解き直してください。"
        )
