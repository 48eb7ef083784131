"""ショックの波及メカニズム

ショックを受けたパラメータとその符号だけから、IS・LM曲線の動きと
因果の連鎖を段階的な文章として組み立てる。数値結果には依存しない。
"""

from dataclasses import dataclass
from enum import StrEnum

# IS曲線をシフトさせる独立支出・財政パラメータ
IS_SHIFT_PARAMETERS = ("G0", "I0", "C0", "TR0", "T0")
# 漏出率 rho を通じてIS曲線の傾きと乗数を変えるパラメータ
LEAKAGE_PARAMETERS = ("c1", "t", "m")
# 曲線の傾きを回転させるパラメータ
SLOPE_PARAMETERS = ("b", "k", "h")

_IS_SHIFT_SUBJECTS = {
    "G0": "政府支出（G0）",
    "I0": "独立投資（I0）",
    "C0": "独立消費（C0）",
    "TR0": "移転支払（TR0）。消費を通じて作用する（ΔC = c1·ΔTR0）",
    "T0": "独立税（T0）。消費を通じて作用する（ΔC = -c1·ΔT0）",
}


class AffectedCurve(StrEnum):
    IS = "IS"
    LM = "LM"
    STRUCTURAL = "IS/LM（構造）"
    UNKNOWN = "不明"


@dataclass(frozen=True)
class TransmissionMechanism:
    """波及メカニズムの説明

    Attributes:
        parameter: ショックを受けたパラメータ
        is_increase: 増加ショックか
        curve: 影響を受ける曲線
        expansive: 拡張的ショックか（構造ショックではNone）
        summary: 概要
        steps: 因果の連鎖（順序付き）
    """

    parameter: str | None
    is_increase: bool
    curve: AffectedCurve
    expansive: bool | None
    summary: str
    steps: tuple[str, ...]

    @property
    def title(self) -> str:
        change = "増加（↑）" if self.is_increase else "減少（↓）"
        return f"{self.parameter} の{change}。影響を受ける曲線: {self.curve.value}"


def _is_shift(parameter: str, is_increase: bool) -> TransmissionMechanism:
    # T0 の増加のみ縮小的、他は増加が拡張的
    expansive = not is_increase if parameter == "T0" else is_increase
    side = "右" if expansive else "左"
    effect = "増加させる" if expansive else "減少させる"
    excess = "超過需要" if expansive else "超過供給"
    y, r = ("↑Y", "↑r") if expansive else ("↓Y", "↓r")
    inv = "↓I" if expansive else "↑I"
    feedback = "クラウディング・アウト" if expansive else "投資の刺激"
    return TransmissionMechanism(
        parameter=parameter,
        is_increase=is_increase,
        curve=AffectedCurve.IS,
        expansive=expansive,
        summary=f"財政・独立支出ショックが総需要を変え、IS曲線を{side}へシフトさせる。",
        steps=(
            f"総需要とIS曲線への初期効果: {parameter} の変化が{_IS_SHIFT_SUBJECTS[parameter]}を通じて"
            f"総需要を{effect}。財市場に{excess}が生じ、IS曲線は{side}へシフトする。",
            f"財市場の一時的均衡: 需要の不均衡に生産が反応し、{y} となる。",
            f"IS-LMのフィードバック: {y} が取引需要 L(Y) を変え、貨幣市場を均衡させるため {r} となる。",
            f"財市場の最終調整（{feedback}）: {r} が投資 I = I0 - b·r を動かし {inv}。"
            "これが所得への初期効果を部分的に相殺する。",
            f"新しい均衡: {y}* かつ {r}*。",
        ),
    )


def _lm_shift(is_increase: bool) -> TransmissionMechanism:
    side = "右" if is_increase else "左"
    y = "↑Y" if is_increase else "↓Y"
    r = "↓r" if is_increase else "↑r"
    inv = "↑I" if is_increase else "↓I"
    excess = "貨幣の超過供給" if is_increase else "貨幣の超過需要"
    bonds = "購入" if is_increase else "売却"
    return TransmissionMechanism(
        parameter="Mp",
        is_increase=is_increase,
        curve=AffectedCurve.LM,
        expansive=is_increase,
        summary=f"金融ショックがLM曲線を{side}へシフトさせ、金利を動かす。",
        steps=(
            f"貨幣市場への初期効果: 実質貨幣供給 M/P の変化が{excess}を生む。"
            f"経済主体は債券を{bonds}し、{r} となる。LM曲線は{side}へシフトする。",
            f"貨幣市場の一時的均衡: {r} で貨幣需要 L が新しい M/P に一致する。",
            f"LM-ISのフィードバック: {r} が {inv}（I = I0 - b·r）をもたらし、総需要が変化する。",
            f"乗数効果: 所得が {y} となり、貨幣需要 L(Y) の変化が当初の金利変化を部分的に打ち消す。",
            f"新しい均衡: {y}* かつ {r}*。",
        ),
    )


def _leakage_change(parameter: str, is_increase: bool) -> TransmissionMechanism:
    # t, m の増加と c1 の減少が rho を上げる
    raises_rho = is_increase if parameter in ("t", "m") else not is_increase
    rho_effect = "上昇させる" if raises_rho else "低下させる"
    alpha_effect = "低下" if raises_rho else "上昇"
    slope = "より急" if raises_rho else "より緩やか"
    y, r = ("↓Y", "↓r") if raises_rho else ("↑Y", "↑r")
    return TransmissionMechanism(
        parameter=parameter,
        is_increase=is_increase,
        curve=AffectedCurve.STRUCTURAL,
        expansive=None,
        summary="限界漏出率（rho）が変わり、単純乗数（alpha）とIS曲線の傾きが変化する。",
        steps=(
            f"漏出率と乗数への効果: {parameter} の変化が rho = 1 - c1(1-t) + n + m を{rho_effect}。"
            f"単純乗数 alpha は{alpha_effect}する。",
            f"IS曲線の回転とシフト: IS曲線は{slope}になり、独立需要全体への乗数も変わるためシフトする。",
            f"増幅効果: 乗数の{alpha_effect}により、独立支出の変化が所得に与える効果も{alpha_effect}する。",
            "政策の有効性: ISの傾きの変化により、財政政策・金融政策の効果が変わる。",
            f"新しい均衡: 一般に {y}*（A0 > 0 の場合）かつ {r}*。",
        ),
    )


def _slope_change(parameter: str, is_increase: bool) -> TransmissionMechanism:
    if parameter == "b":
        curve, formula = "IS", "-rho/b"
        slope = "より緩やか" if is_increase else "より急"
        monetary = "高まる" if is_increase else "低下する"
        crowding = "大きく" if is_increase else "小さく"
    elif parameter == "k":
        curve, formula = "LM", "k/h"
        slope = "より急" if is_increase else "より緩やか"
        monetary = "低下する" if is_increase else "高まる"
        crowding = "大きく" if is_increase else "小さく"
    else:
        curve, formula = "LM", "k/h"
        slope = "より緩やか" if is_increase else "より急"
        monetary = "高まる" if is_increase else "低下する"
        crowding = "小さく" if is_increase else "大きく"
    return TransmissionMechanism(
        parameter=parameter,
        is_increase=is_increase,
        curve=AffectedCurve.STRUCTURAL,
        expansive=None,
        summary=f"{curve}曲線の傾きが変わり、市場間の相互作用と政策の有効性が変化する。",
        steps=(
            f"{curve}曲線の傾きへの効果: {parameter} の変化が傾き（{formula}）を変え、"
            f"{curve}曲線は{slope}になる。",
            f"金融政策の有効性: 有効性が{monetary}。",
            f"財政政策の有効性: クラウディング・アウトが{crowding}なる。",
            "新しい均衡: Y* と r* の変化は当初の均衡位置に依存し、主な影響は今後のショックへの感応度に現れる。",
        ),
    )


def describe_transmission(parameter: str | None, is_increase: bool) -> TransmissionMechanism:
    """ショックの波及メカニズムを説明する

    Args:
        parameter: ショックを受けたパラメータ（特定できない場合はNone）
        is_increase: 増加ショックか
    """
    if parameter in IS_SHIFT_PARAMETERS:
        return _is_shift(parameter, is_increase)
    if parameter == "Mp":
        return _lm_shift(is_increase)
    if parameter in LEAKAGE_PARAMETERS:
        return _leakage_change(parameter, is_increase)
    if parameter in SLOPE_PARAMETERS:
        return _slope_change(parameter, is_increase)
    return TransmissionMechanism(
        parameter=parameter,
        is_increase=is_increase,
        curve=AffectedCurve.UNKNOWN,
        expansive=None,
        summary="波及メカニズムを特定できません。",
        steps=(f"パラメータ {parameter} が変更されましたが、詳細な波及メカニズムは登録されていません。",),
    )
