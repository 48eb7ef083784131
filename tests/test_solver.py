"""均衡ソルバーのテスト"""

import math

import pytest

from islm_calculator.core.equilibrium import (
    OUTPUT_FIELDS,
    compute_equilibrium,
    interest_rate,
    round_half_away,
    solve,
)
from islm_calculator.core.exceptions import CalculationError, PreconditionError
from islm_calculator.parameters.defaults import ParameterSet

SCENARIOS = [
    ParameterSet(),
    ParameterSet(c1=0.6, t=0.3, n=0.05, m=0.1, b=50.0, h=80.0, k=0.5),
    ParameterSet(G0=4200.0, Mp=30000.0, T0=500.0),
    ParameterSet(k=0.0),
    ParameterSet(b=0.0),
]


class TestRounding:
    """丸めのテスト"""

    def test_two_decimals(self) -> None:
        assert round_half_away(1.234) == 1.23
        assert round_half_away(1.236) == 1.24

    def test_half_away_from_zero(self) -> None:
        assert round_half_away(0.125) == 0.13
        assert round_half_away(-0.125) == -0.13

    def test_negative_zero_is_normalized(self) -> None:
        assert str(round_half_away(-0.001)) == "0.0"


class TestSolve:
    """solveのテスト"""

    def test_result_keeps_params_reference(self) -> None:
        params = ParameterSet()
        assert solve(params).params is params

    def test_idempotent(self) -> None:
        """同一パラメータでの2回の計算は同一結果"""
        params = ParameterSet(G0=3500.0)
        first = solve(params)
        second = solve(params)
        assert first == second
        assert first.unrounded == second.unrounded

    def test_all_outputs_rounded(self) -> None:
        result = solve(SCENARIOS[1])
        for name in OUTPUT_FIELDS:
            value = getattr(result, name)
            assert value == round_half_away(value)

    @pytest.mark.parametrize("params", SCENARIOS)
    def test_goods_market_clears(self, params: ParameterSet) -> None:
        """Y = C + I + G + (X0 - IM0 - m*Y)"""
        v = compute_equilibrium(params)
        demand = v.C + v.I + v.G + (params.X0 - params.IM0 - params.m * v.Y)
        assert v.Y == pytest.approx(demand, abs=1e-6)

    def test_rounded_goods_market_clears_for_defaults(self) -> None:
        p = ParameterSet()
        r = solve(p)
        demand = r.C + r.I + r.G + (p.X0 - p.IM0 - p.m * r.Y)
        assert r.Y == pytest.approx(demand, abs=0.01)

    @pytest.mark.parametrize("params", SCENARIOS)
    def test_sectoral_balances_identity(self, params: ParameterSet) -> None:
        """Sp - I + SSP = SSE"""
        v = compute_equilibrium(params)
        assert v.Sp - v.I + v.SSP == pytest.approx(v.SSE, abs=1e-6)

    @pytest.mark.parametrize("params", SCENARIOS)
    def test_lm_curve_holds(self, params: ParameterSet) -> None:
        """Mp = k*Y - h*r"""
        v = compute_equilibrium(params)
        assert params.k * v.Y - params.h * v.r == pytest.approx(params.Mp, abs=1e-6)

    def test_multipliers_reproduce_income(self) -> None:
        """Y = gamma*A0 + beta*Mp"""
        params = SCENARIOS[1]
        v = compute_equilibrium(params)
        assert v.gamma * v.A0 + v.beta * params.Mp == pytest.approx(v.Y, rel=1e-12)

    def test_expansionary_fiscal_policy_raises_income_and_rate(self) -> None:
        base = solve(ParameterSet())
        shocked = solve(ParameterSet(G0=3500.0))
        assert shocked.Y > base.Y
        assert shocked.r > base.r
        assert shocked.I < base.I  # クラウディング・アウト

    def test_precondition_violation_raises(self) -> None:
        with pytest.raises(PreconditionError) as exc_info:
            solve(ParameterSet(c1=1.5))
        assert len(exc_info.value.errors) == 1

    def test_non_finite_parameter_raises_precondition(self) -> None:
        with pytest.raises(PreconditionError):
            solve(ParameterSet(h=math.nan))


class TestInterestRate:
    """金利計算の分岐テスト"""

    def test_zero_h_uses_investment_sensitivity(self) -> None:
        """h = 0 のとき r = (k*Y - Mp)/b"""
        params = ParameterSet(h=0.0)
        result = solve(params)
        assert result.Y == pytest.approx(params.Mp / params.k)
        assert result.r == pytest.approx((params.k * result.Y - params.Mp) / params.b)

    def test_zero_h_and_b_raises(self) -> None:
        with pytest.raises(CalculationError):
            interest_rate(25000.0, 24500.0, ParameterSet(h=0.0, b=0.0))

    def test_positive_h(self) -> None:
        assert interest_rate(25500.0, 24500.0, ParameterSet()) == pytest.approx(10.0)
