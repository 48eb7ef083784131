"""モデル定数の定義

マジックナンバーを排除し、意味のある名前を付ける
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class RoundingConstants:
    """表示・比較用の丸め"""

    decimals: int = 2  # 小数点以下2桁（0.01単位）


@dataclass(frozen=True)
class ComparisonConstants:
    """ショック比較の閾値"""

    change_threshold: float = 0.001  # これ以下の変化は「変化なし」
    base_threshold: float = 0.001  # ベース値がこれ以下なら変化率は±∞


@dataclass(frozen=True)
class ParameterLimits:
    """パラメータの有効範囲"""

    min_marginal_propensity: float = 0.0
    max_marginal_propensity: float = 1.0  # c1
    min_tax_rate: float = 0.0
    max_tax_rate: float = 1.0  # t
    min_sensitivity: float = 0.0  # b, h は非負


# デフォルトインスタンス
ROUNDING = RoundingConstants()
COMPARISON = ComparisonConstants()
PARAMETER_LIMITS = ParameterLimits()
