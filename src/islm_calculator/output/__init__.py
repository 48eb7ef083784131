"""出力生成"""

from islm_calculator.output.reports import ReportGenerator
from islm_calculator.output.schemas import (
    BalancedReport,
    EquilibriumReport,
    ParameterReport,
    ShockReport,
    TransmissionReport,
)

__all__ = [
    "BalancedReport",
    "EquilibriumReport",
    "ParameterReport",
    "ReportGenerator",
    "ShockReport",
    "TransmissionReport",
]
