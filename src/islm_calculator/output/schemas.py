"""出力スキーマ（JSONエクスポート用）"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from islm_calculator.core.balanced import BalancedResult
from islm_calculator.core.equilibrium import EquilibriumResult
from islm_calculator.core.shocks import ShockComparison
from islm_calculator.core.transmission import TransmissionMechanism
from islm_calculator.parameters.defaults import ParameterSet


class EquilibriumReport(BaseModel):
    """均衡結果"""

    parameters: dict[str, float]
    results: dict[str, float] = Field(description="小数点以下2桁に丸めた均衡値")

    @classmethod
    def from_result(cls, result: EquilibriumResult) -> "EquilibriumReport":
        return cls(parameters=result.params.to_dict(), results=result.to_dict())


class VariableChangeReport(BaseModel):
    """1変数の比較

    ベースがほぼゼロの場合 percent は符号付きの無限大になるため、
    JSONでは null ではなく Infinity / -Infinity として出力する。
    """

    model_config = ConfigDict(ser_json_inf_nan="constants")

    name: str
    label: str
    base: float
    shocked: float
    change: float
    percent: float
    direction: Literal["up", "down", "unchanged"]


class TransmissionReport(BaseModel):
    """波及メカニズム"""

    title: str
    curve: str
    expansive: bool | None = None
    summary: str
    steps: list[str]

    @classmethod
    def from_mechanism(cls, mechanism: TransmissionMechanism) -> "TransmissionReport":
        return cls(
            title=mechanism.title,
            curve=mechanism.curve.value,
            expansive=mechanism.expansive,
            summary=mechanism.summary,
            steps=list(mechanism.steps),
        )


class ShockReport(BaseModel):
    """ショック比較"""

    model_config = ConfigDict(ser_json_inf_nan="constants")

    shocked_parameter: str | None = None
    is_increase: bool | None = None
    changed_parameters: dict[str, float] = Field(default_factory=dict)
    variables: list[VariableChangeReport]
    transmission: TransmissionReport | None = None

    @classmethod
    def from_comparison(
        cls,
        comparison: ShockComparison,
        mechanism: TransmissionMechanism | None = None,
    ) -> "ShockReport":
        return cls(
            shocked_parameter=comparison.shocked_parameter,
            is_increase=comparison.is_increase,
            changed_parameters={c.name: c.shocked for c in comparison.parameter_changes},
            variables=[
                VariableChangeReport(
                    name=v.name,
                    label=v.label,
                    base=v.base,
                    shocked=v.shocked,
                    change=v.change,
                    percent=v.percent,
                    direction=v.direction.value,
                )
                for v in comparison.variables
            ],
            transmission=(
                TransmissionReport.from_mechanism(mechanism) if mechanism is not None else None
            ),
        )


class BalancedReport(BaseModel):
    """部門収支均衡の結果"""

    target: Literal["nx", "ssp"]
    policy: Literal["Mp", "G0", "TR0", "T0"]
    title: str
    income: float
    interest_rate: float
    policy_value: float
    original_value: float
    delta: float

    @classmethod
    def from_result(cls, result: BalancedResult) -> "BalancedReport":
        return cls(
            target=result.query.target.value,
            policy=result.query.policy.value,
            title=result.query.title,
            income=result.income,
            interest_rate=result.interest_rate,
            policy_value=result.policy_value,
            original_value=result.original_value,
            delta=result.delta,
        )


class ParameterReport(BaseModel):
    """パラメータセット"""

    parameters: dict[str, float]

    @classmethod
    def from_params(cls, params: ParameterSet) -> "ParameterReport":
        return cls(parameters=params.to_dict())
