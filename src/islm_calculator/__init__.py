"""IS-LM Calculator - IS-LMモデル教育用計算機"""

from importlib.metadata import PackageNotFoundError, version


def _resolve_version() -> str:
    """配布メタデータからバージョンを解決する。"""
    try:
        return version("islm-calc")
    except PackageNotFoundError:
        # インストール前のローカル実行時フォールバック
        return "0+unknown"


__version__ = _resolve_version()

from islm_calculator.core.balanced import (
    BalancedResult,
    BalanceTarget,
    PolicyVariable,
    solve_balanced,
)
from islm_calculator.core.equilibrium import EquilibriumResult, solve
from islm_calculator.core.session import CalculatorSession
from islm_calculator.core.shocks import ShockComparison, simulate_shock
from islm_calculator.core.transmission import describe_transmission
from islm_calculator.core.validation import ensure_valid, validate
from islm_calculator.parameters.defaults import ParameterSet
from islm_calculator.parameters.loader import load_parameters

__all__ = [
    "BalanceTarget",
    "BalancedResult",
    "CalculatorSession",
    "EquilibriumResult",
    "ParameterSet",
    "PolicyVariable",
    "ShockComparison",
    "describe_transmission",
    "ensure_valid",
    "load_parameters",
    "simulate_shock",
    "solve",
    "solve_balanced",
    "validate",
]
