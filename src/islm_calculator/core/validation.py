"""パラメータバリデーション

すべてのチェックを実行し、違反を全件集約して返す（短絡しない）。
呼び出し側が一度にすべての問題を表示できるようにするため。
"""

import logging
import math
from enum import StrEnum

from islm_calculator.core.exceptions import InvalidParameterSetError, ParameterValidationError
from islm_calculator.parameters.constants import PARAMETER_LIMITS
from islm_calculator.parameters.defaults import FIELD_NAMES, ParameterSet

logger = logging.getLogger(__name__)


class ValidationErrorKind(StrEnum):
    """バリデーション違反の種類"""

    MPC_OUT_OF_RANGE = "c1_out_of_range"
    TAX_RATE_OUT_OF_RANGE = "t_out_of_range"
    NEGATIVE_MONEY_DEMAND_SENSITIVITY = "h_negative"
    NEGATIVE_INVESTMENT_SENSITIVITY = "b_negative"
    NONPOSITIVE_LEAKAGE_RATE = "rho_nonpositive"
    ZERO_EQUILIBRIUM_DENOMINATOR = "denominator_zero"
    NON_FINITE_VALUE = "non_finite"


def leakage_rate(params: ParameterSet) -> float:
    """限界漏出率 rho = 1 - c1(1-t) + n + m"""
    return 1 - params.c1 * (1 - params.t) + params.n + params.m


def equilibrium_denominator(params: ParameterSet) -> float:
    """IS-LM均衡の分母 D = h*rho + b*k"""
    return params.h * leakage_rate(params) + params.b * params.k


def validate(params: ParameterSet) -> list[ParameterValidationError]:
    """パラメータセットを検証する

    NaN・無限大を含むセットは範囲・構造のチェックが意味を持たないため、
    非有限値の違反だけを返す。

    Returns:
        違反のリスト（空なら有効）
    """
    non_finite = [
        ParameterValidationError(
            ValidationErrorKind.NON_FINITE_VALUE,
            f"{name} は有限の数値である必要があります（{getattr(params, name)}）。",
            field=name,
        )
        for name in FIELD_NAMES
        if not math.isfinite(getattr(params, name))
    ]
    if non_finite:
        return non_finite

    limits = PARAMETER_LIMITS
    errors: list[ParameterValidationError] = []

    if not limits.min_marginal_propensity <= params.c1 <= limits.max_marginal_propensity:
        errors.append(
            ParameterValidationError(
                ValidationErrorKind.MPC_OUT_OF_RANGE,
                "c1（限界消費性向）は0から1の間である必要があります。",
                field="c1",
            )
        )
    if not limits.min_tax_rate <= params.t <= limits.max_tax_rate:
        errors.append(
            ParameterValidationError(
                ValidationErrorKind.TAX_RATE_OUT_OF_RANGE,
                "t（税率）は0から1の間である必要があります。",
                field="t",
            )
        )
    if params.h < limits.min_sensitivity:
        errors.append(
            ParameterValidationError(
                ValidationErrorKind.NEGATIVE_MONEY_DEMAND_SENSITIVITY,
                "h（貨幣需要の金利感応度）は0以上である必要があります。",
                field="h",
            )
        )
    if params.b < limits.min_sensitivity:
        errors.append(
            ParameterValidationError(
                ValidationErrorKind.NEGATIVE_INVESTMENT_SENSITIVITY,
                "b（投資の金利感応度）は0以上である必要があります。",
                field="b",
            )
        )

    rho = leakage_rate(params)
    if rho <= 0:
        errors.append(
            ParameterValidationError(
                ValidationErrorKind.NONPOSITIVE_LEAKAGE_RATE,
                f"乗数の分母（rho = {rho:.4f}）は正である必要があります。性向を確認してください。",
            )
        )

    if params.h * rho + params.b * params.k == 0:
        errors.append(
            ParameterValidationError(
                ValidationErrorKind.ZERO_EQUILIBRIUM_DENOMINATOR,
                "一般均衡の分母（h*rho + b*k）がゼロです。体系は一意の解を持ちません。",
            )
        )

    return errors


def ensure_valid(params: ParameterSet) -> ParameterSet:
    """検証を通過したパラメータセットをそのまま返す

    Raises:
        InvalidParameterSetError: 1つ以上のチェックに違反した場合
    """
    errors = validate(params)
    if errors:
        logger.warning("パラメータセットを却下: %d件の違反", len(errors))
        raise InvalidParameterSetError(errors)
    return params
