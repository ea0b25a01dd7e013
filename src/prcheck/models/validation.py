"""バリデーション関連のデータモデル。"""

from datetime import UTC, datetime
from enum import Enum

from pydantic import BaseModel, Field


class CheckboxNode(BaseModel):
    """Markdownのチェックボックス1項目。

    indentation は先頭空白の文字数そのもので、ネスト階層への正規化は行わない。
    """

    indentation: int = Field(ge=0)
    checked: bool
    text: str


class ValidationState(str, Enum):
    """検証実行の状態。"""

    NOT_STARTED = "not_started"
    ABORTED = "aborted"
    CONFIG_LOADING = "config_loading"
    EVALUATING = "evaluating"
    COMPLETED_PASSED = "completed_passed"
    COMPLETED_FAILED = "completed_failed"


class ValidationStep(BaseModel):
    """個別チェックの実行結果。"""

    name: str
    passed: bool


class ValidationReport(BaseModel):
    """プルリクエスト検証の最終結果。"""

    pull_number: int
    state: ValidationState
    errors: list[str] = Field(default_factory=list)
    steps: list[ValidationStep] = Field(default_factory=list)
    config_source: str | None = None
    evaluated_at: datetime = Field(default_factory=lambda: datetime.now(UTC))

    @classmethod
    def aborted(cls, reason: str, pull_number: int = 0) -> "ValidationReport":
        """評価に進めなかった実行の結果。reasonを唯一のエラーとして持つ。"""
        return cls(pull_number=pull_number, state=ValidationState.ABORTED, errors=[reason])

    @property
    def overall_passed(self) -> bool:
        return self.state == ValidationState.COMPLETED_PASSED

    def summary_lines(self) -> list[str]:
        """ログ出力用のチェック結果一覧。"""
        return [f"{'PASSED' if step.passed else 'FAILED'} {step.name}" for step in self.steps]
