"""計算セッション

現在のベースパラメータセットとその均衡結果を保持するアプリケーション状態。
両者は常に対で置き換えられ、検証に失敗した再計算では以前の対を維持する。
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass

from islm_calculator.core.balanced import (
    BalancedResult,
    BalanceTarget,
    PolicyVariable,
    solve_balanced,
)
from islm_calculator.core.equilibrium import EquilibriumResult, solve
from islm_calculator.core.shocks import ShockComparison, simulate_shock
from islm_calculator.core.validation import ensure_valid
from islm_calculator.parameters.defaults import ParameterSet

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BaseScenario:
    """ベースのパラメータセットと均衡結果の対"""

    params: ParameterSet
    result: EquilibriumResult

    @classmethod
    def from_params(cls, params: ParameterSet) -> "BaseScenario":
        ensure_valid(params)
        return cls(params=params, result=solve(params))


class CalculatorSession:
    """IS-LM計算セッション

    例:
        session = CalculatorSession()
        comparison = session.simulate_shock({"G0": 3500})
        balanced = session.balance(BalanceTarget.EXTERNAL, PolicyVariable.MONEY_SUPPLY)
    """

    def __init__(self, params: ParameterSet | None = None) -> None:
        self._scenario = BaseScenario.from_params(params if params is not None else ParameterSet())

    @property
    def params(self) -> ParameterSet:
        return self._scenario.params

    @property
    def result(self) -> EquilibriumResult:
        return self._scenario.result

    @property
    def scenario(self) -> BaseScenario:
        return self._scenario

    def recalculate(self, params: ParameterSet) -> EquilibriumResult:
        """ベースを置き換えて均衡を解き直す

        Raises:
            InvalidParameterSetError: 新しいパラメータセットが検証を通過しない場合
        """
        scenario = BaseScenario.from_params(params)
        self._scenario = scenario
        logger.info("ベース均衡を再計算: Y=%.2f r=%.2f", scenario.result.Y, scenario.result.r)
        return scenario.result

    def simulate_shock(self, overrides: Mapping[str, float]) -> ShockComparison:
        return simulate_shock(self.params, overrides, base_result=self.result)

    def balance(
        self, target: BalanceTarget | str, policy: PolicyVariable | str
    ) -> BalancedResult:
        return solve_balanced(
            self.params, self.result, BalanceTarget(target), PolicyVariable(policy)
        )
