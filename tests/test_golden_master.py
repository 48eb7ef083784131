"""Golden Master テスト

初期パラメータでの計算結果を固定し、回帰を防ぐ。
"""

import numpy as np
import pytest

from islm_calculator.core.balanced import BalanceTarget, PolicyVariable, solve_balanced
from islm_calculator.core.equilibrium import OUTPUT_FIELDS, solve
from islm_calculator.core.shocks import simulate_shock
from islm_calculator.parameters.defaults import ParameterSet

DEFAULT_EQUILIBRIUM = {
    "Y": 25500.0,
    "r": 10.0,
    "A0": 15600.0,
    "rho": 0.6,
    "alpha": 1.67,
    "gamma": 1.11,
    "beta": 0.33,
    "C": 19820.0,
    "I": 4300.0,
    "G": 3000.0,
    "Sp": 2580.0,
    "SSP": 100.0,
    "SSE": -1620.0,
}

# (目標, 政策変数) -> (Y*, r*, 政策変数*, 変化量)
DEFAULT_BALANCED = {
    ("nx", "Mp"): (18750.0, 145.0, 4250.0, -20250.0),
    ("nx", "G0"): (18750.0, -57.5, -3075.0, -6075.0),
    ("nx", "TR0"): (18750.0, -57.5, -5593.75, -7593.75),
    ("nx", "T0"): (18750.0, -57.5, 7593.75, 7593.75),
    ("ssp", "Mp"): (25000.0, 20.0, 23000.0, -1500.0),
    ("ssp", "G0"): (25642.86, 11.43, 3128.57, 128.57),
    ("ssp", "TR0"): (25608.11, 11.08, 2121.62, 121.62),
    ("ssp", "T0"): (25608.11, 11.08, -121.62, -121.62),
}


class TestDefaultEquilibriumGoldenMaster:
    """初期パラメータの均衡値"""

    def test_all_outputs(self) -> None:
        result = solve(ParameterSet())
        actual = np.array([getattr(result, name) for name in OUTPUT_FIELDS])
        expected = np.array([DEFAULT_EQUILIBRIUM[name] for name in OUTPUT_FIELDS])
        np.testing.assert_allclose(actual, expected, rtol=0, atol=1e-9)

    def test_leakage_rate_follows_formula(self) -> None:
        """rho = 1 - 0.8*(1-0.2) + 0 + 0.24 = 0.6"""
        assert solve(ParameterSet()).rho == 0.6


class TestBalancedGoldenMaster:
    """初期パラメータでの部門収支均衡"""

    @pytest.mark.parametrize(("key", "expected"), list(DEFAULT_BALANCED.items()))
    def test_balanced_values(
        self, key: tuple[str, str], expected: tuple[float, float, float, float]
    ) -> None:
        params = ParameterSet()
        target, policy = key
        result = solve_balanced(
            params, solve(params), BalanceTarget(target), PolicyVariable(policy)
        )
        actual = np.array(
            [result.income, result.interest_rate, result.policy_value, result.delta]
        )
        np.testing.assert_allclose(actual, np.array(expected), rtol=0, atol=1e-9)


class TestShockGoldenMaster:
    """代表的なショックの結果"""

    def test_government_spending_shock(self) -> None:
        comparison = simulate_shock(ParameterSet(), {"G0": 3500.0})
        assert comparison.shocked.Y == pytest.approx(26055.56)
        assert comparison.shocked.r == pytest.approx(15.56)
        assert comparison.get("Y").change == pytest.approx(555.56)
        assert comparison.get("Y").percent == pytest.approx(555.56 / 25500.0 * 100)

    def test_money_supply_shock(self) -> None:
        comparison = simulate_shock(ParameterSet(), {"Mp": 27500.0})
        assert comparison.shocked.Y == pytest.approx(26500.0)
        assert comparison.shocked.r == pytest.approx(-10.0)
