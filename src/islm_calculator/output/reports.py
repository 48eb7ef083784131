"""Markdownレポート生成"""

import math
from datetime import datetime

from islm_calculator.core.balanced import BalancedResult
from islm_calculator.core.equilibrium import EquilibriumResult
from islm_calculator.core.shocks import ShockComparison
from islm_calculator.core.transmission import TransmissionMechanism

# 均衡表の表示名
RESULT_LABELS: dict[str, str] = {
    "Y": "均衡所得（Y）",
    "r": "均衡金利（r）",
    "A0": "独立需要（A0）",
    "rho": "限界漏出率（rho）",
    "alpha": "単純乗数（alpha）",
    "gamma": "財政政策乗数（gamma）",
    "beta": "金融政策乗数（beta）",
    "C": "消費（C）",
    "I": "投資（I）",
    "G": "政府支出（G）",
    "Sp": "民間貯蓄（Sp）",
    "SSP": "公的部門収支（SSP）",
    "SSE": "対外部門収支（SSE）",
}


def format_percent(value: float) -> str:
    if math.isinf(value):
        return "+∞%" if value > 0 else "-∞%"
    return f"{value:.2f}%"


class ReportGenerator:
    """計算結果のMarkdownレポートを生成する"""

    def generate_equilibrium_section(self, result: EquilibriumResult) -> str:
        lines = [
            "## ベース均衡",
            "",
            "| 変数 | 値 |",
            "|------|-----|",
        ]
        for name, value in result.to_dict().items():
            lines.append(f"| {RESULT_LABELS.get(name, name)} | {value:.2f} |")
        return "\n".join(lines)

    def generate_shock_section(
        self, comparison: ShockComparison, mechanism: TransmissionMechanism | None = None
    ) -> str:
        lines = [
            "## ショック比較",
            "",
            "| 変数 | ベース | ショック後 | 変化率 |",
            "|------|--------|------------|--------|",
        ]
        for v in comparison.variables:
            lines.append(
                f"| {v.label} | {v.base:.2f} | {v.shocked:.2f} | {format_percent(v.percent)} |"
            )
        if not comparison.parameter_changes:
            lines.extend(["", "パラメータに変化なし。"])
        if mechanism is not None:
            lines.extend(["", f"### {mechanism.title}", "", mechanism.summary, ""])
            lines.extend(f"{i}. {step}" for i, step in enumerate(mechanism.steps, 1))
        return "\n".join(lines)

    def generate_balanced_section(self, results: list[BalancedResult]) -> str:
        lines = [
            "## 部門収支の強制均衡",
            "",
            "| 目標 | Y* | r* | 政策変数* | 変化量 |",
            "|------|----|----|-----------|--------|",
        ]
        for res in results:
            lines.append(
                f"| {res.query.title} | {res.income:.2f} | {res.interest_rate:.2f} | "
                f"{res.query.policy.value}* = {res.policy_value:.2f} | {res.delta:+.2f} |"
            )
        return "\n".join(lines)

    def generate_report(
        self,
        result: EquilibriumResult,
        balanced: list[BalancedResult] | None = None,
        comparison: ShockComparison | None = None,
        mechanism: TransmissionMechanism | None = None,
    ) -> str:
        """レポート全体を生成する"""
        sections = [
            "# IS-LM 計算レポート",
            "",
            f"生成日時: {datetime.now().strftime('%Y-%m-%d %H:%M')}",
            "",
            self.generate_equilibrium_section(result),
        ]
        if comparison is not None:
            sections.extend(["", self.generate_shock_section(comparison, mechanism)])
        if balanced:
            sections.extend(["", self.generate_balanced_section(balanced)])
        return "\n".join(sections) + "\n"
