"""パラメータ管理"""

from islm_calculator.parameters.constants import (
    COMPARISON,
    PARAMETER_LIMITS,
    ROUNDING,
    ComparisonConstants,
    ParameterLimits,
    RoundingConstants,
)
from islm_calculator.parameters.defaults import FIELD_NAMES, ParameterSet
from islm_calculator.parameters.loader import load_parameters

__all__ = [
    "COMPARISON",
    "FIELD_NAMES",
    "PARAMETER_LIMITS",
    "ROUNDING",
    "ComparisonConstants",
    "ParameterLimits",
    "ParameterSet",
    "RoundingConstants",
    "load_parameters",
]
