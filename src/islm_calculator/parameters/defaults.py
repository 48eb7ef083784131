"""IS-LMモデルのパラメータセット

初期値は教材の標準シナリオ（開放経済・比例税）に対応する。
"""

from dataclasses import asdict, dataclass, fields, replace


@dataclass(frozen=True)
class ParameterSet:
    """IS-LMモデルの構造パラメータ（不変）

    フィールドの宣言順はショック帰属（最初に変化したパラメータ）の走査順でもある。
    範囲の検証は `core.validation.validate` が行い、生成時には行わない。
    """

    # 財市場
    C0: float = 1900.0  # 独立消費
    c1: float = 0.8  # 限界消費性向 [0, 1]
    T0: float = 0.0  # 独立税
    t: float = 0.2  # 所得税率 [0, 1]
    TR0: float = 2000.0  # 移転支払
    I0: float = 4600.0  # 独立投資
    b: float = 30.0  # 投資の金利感応度（>= 0）
    G0: float = 3000.0  # 独立政府支出
    n: float = 0.0  # 政府支出の所得反応
    X0: float = 5000.0  # 輸出
    IM0: float = 500.0  # 独立輸入
    m: float = 0.24  # 限界輸入性向

    # 貨幣市場
    k: float = 1.0  # 貨幣需要の所得感応度
    h: float = 100.0  # 貨幣需要の金利感応度（>= 0）
    Mp: float = 24500.0  # 実質貨幣供給 M/P

    @classmethod
    def field_names(cls) -> tuple[str, ...]:
        """宣言順のフィールド名"""
        return tuple(f.name for f in fields(cls))

    @property
    def autonomous_net_exports(self) -> float:
        """独立純輸出 X0 - IM0"""
        return self.X0 - self.IM0

    def with_updates(self, **changes: float) -> "ParameterSet":
        """一部を差し替えた新しいパラメータセットを返す"""
        unknown = set(changes) - set(self.field_names())
        if unknown:
            raise KeyError(f"未知のパラメータ: {', '.join(sorted(unknown))}")
        return replace(self, **{name: float(value) for name, value in changes.items()})

    def to_dict(self) -> dict[str, float]:
        return asdict(self)


FIELD_NAMES = ParameterSet.field_names()
