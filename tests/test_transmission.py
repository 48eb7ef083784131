"""波及メカニズムのテスト"""

import pytest

from islm_calculator.core.transmission import AffectedCurve, describe_transmission


class TestISShift:
    """IS曲線シフト"""

    @pytest.mark.parametrize("parameter", ["G0", "I0", "C0", "TR0"])
    def test_increase_is_expansive(self, parameter: str) -> None:
        mechanism = describe_transmission(parameter, True)
        assert mechanism.curve is AffectedCurve.IS
        assert mechanism.expansive is True
        assert "右" in mechanism.summary
        assert len(mechanism.steps) == 5

    def test_tax_increase_is_contractive(self) -> None:
        mechanism = describe_transmission("T0", True)
        assert mechanism.expansive is False
        assert "左" in mechanism.summary

    def test_tax_cut_is_expansive(self) -> None:
        assert describe_transmission("T0", False).expansive is True


class TestLMShift:
    """LM曲線シフト"""

    def test_money_supply_increase(self) -> None:
        mechanism = describe_transmission("Mp", True)
        assert mechanism.curve is AffectedCurve.LM
        assert mechanism.expansive is True
        assert "↓r" in mechanism.steps[0]

    def test_money_supply_decrease(self) -> None:
        mechanism = describe_transmission("Mp", False)
        assert mechanism.expansive is False
        assert "↑r" in mechanism.steps[0]


class TestStructural:
    """構造ショック"""

    @pytest.mark.parametrize("parameter", ["b", "k", "h"])
    def test_slope_rotation(self, parameter: str) -> None:
        mechanism = describe_transmission(parameter, True)
        assert mechanism.curve is AffectedCurve.STRUCTURAL
        assert mechanism.expansive is None
        assert len(mechanism.steps) == 4

    def test_tax_rate_increase_raises_leakage(self) -> None:
        mechanism = describe_transmission("t", True)
        assert mechanism.curve is AffectedCurve.STRUCTURAL
        assert "上昇させる" in mechanism.steps[0]

    def test_mpc_increase_lowers_leakage(self) -> None:
        mechanism = describe_transmission("c1", True)
        assert "低下させる" in mechanism.steps[0]


class TestUnknown:
    """未登録のパラメータ"""

    @pytest.mark.parametrize("parameter", ["X0", None])
    def test_unknown_mechanism(self, parameter: str | None) -> None:
        mechanism = describe_transmission(parameter, True)
        assert mechanism.curve is AffectedCurve.UNKNOWN
        assert len(mechanism.steps) == 1

    def test_title_names_parameter_and_curve(self) -> None:
        title = describe_transmission("G0", False).title
        assert "G0" in title
        assert "減少" in title
        assert "IS" in title
