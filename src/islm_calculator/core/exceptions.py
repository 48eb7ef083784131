"""ISLMカスタム例外階層

FailFast原則に従い、計算エラーは即座に報告される。
バリデーションエラーのみ、全件を集約してから報告する。
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from islm_calculator.core.validation import ValidationErrorKind


class ISLMError(Exception):
    """ISLMの基底例外クラス"""

    pass


class ValidationError(ISLMError):
    """入力バリデーションエラー"""

    pass


class ParameterValidationError(ValidationError):
    """パラメータ値が有効範囲外、または構造的に退化しているエラー

    Attributes:
        kind: 違反したチェックの種類
        field: 対象パラメータ名（複合条件の場合はNone）
    """

    def __init__(
        self, kind: "ValidationErrorKind", message: str, field: str | None = None
    ) -> None:
        super().__init__(message)
        self.kind = kind
        self.field = field


class InvalidParameterSetError(ValidationError):
    """パラメータセット全体の検証失敗

    違反したすべてのチェックをまとめて保持する。
    """

    def __init__(self, errors: list[ParameterValidationError]) -> None:
        super().__init__(" ".join(str(e) for e in errors))
        self.errors = errors


class ShockValidationError(ValidationError):
    """ショック指定が無効なエラー"""

    pass


class ParameterFileError(ValidationError):
    """パラメータファイルの読み込み・解釈エラー"""

    pass


class SolverError(ISLMError):
    """ソルバー関連のエラー"""

    pass


class CalculationError(SolverError):
    """均衡計算中の除数ゼロ・政策と目標の不整合

    Attributes:
        condition: 失敗した条件の説明
    """

    def __init__(self, condition: str) -> None:
        super().__init__(condition)
        self.condition = condition


class PreconditionError(SolverError):
    """検証を通過していないパラメータでソルバーが呼ばれたエラー"""

    def __init__(self, errors: list[ParameterValidationError]) -> None:
        super().__init__(
            "パラメータが検証を通過していません: " + " ".join(str(e) for e in errors)
        )
        self.errors = errors
