"""検証ルール設定のデータモデル。"""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

SectionRuleType = Literal["any_checked", "all_checked"]

# issue_number がこの値の場合のみ Issue 参照チェックを有効にする
ISSUE_NUMBER_REQUIRED = "required"


class SemanticCommitsRule(BaseModel):
    """セマンティックコミット規約の設定。"""

    model_config = ConfigDict(extra="ignore")

    enabled: bool = False
    types: list[str] = Field(default_factory=list)
    allowed_scopes: list[str] | None = None

    @field_validator("types", mode="before")
    @classmethod
    def _none_types_as_empty(cls, value: Any) -> Any:
        return [] if value is None else value


class SectionRule(BaseModel):
    """PR本文セクションのチェックボックスルール。"""

    model_config = ConfigDict(extra="ignore")

    rule: SectionRuleType | None = None
    enforce_nested: bool = False


class RuleConfig(BaseModel):
    """リポジトリ単位の検証ルール設定。

    全フィールドが未設定の場合は空設定となり、すべてのチェックがスキップされる。
    """

    model_config = ConfigDict(extra="ignore")

    issue_number: str | None = None
    require_labels: bool = False
    require_assignees: int = Field(default=0, ge=0)
    require_reviewers: int = Field(default=0, ge=0)
    semantic_commits: SemanticCommitsRule | None = None
    sections: dict[str, SectionRule] = Field(default_factory=dict)

    @field_validator("issue_number", mode="before")
    @classmethod
    def _issue_number_as_text(cls, value: Any) -> Any:
        # YAMLの `issue_number: false` なども受け付け、"required" 以外は無効として扱う
        if value is None or isinstance(value, str):
            return value
        return str(value)

    @field_validator("require_assignees", "require_reviewers", mode="before")
    @classmethod
    def _none_count_as_zero(cls, value: Any) -> Any:
        return 0 if value is None else value

    @field_validator("sections", mode="before")
    @classmethod
    def _normalize_sections(cls, value: Any) -> Any:
        if value is None:
            return {}
        if isinstance(value, dict):
            return {str(title): ({} if rule is None else rule) for title, rule in value.items()}
        return value

    @property
    def issue_number_required(self) -> bool:
        return self.issue_number == ISSUE_NUMBER_REQUIRED

    @property
    def semantic_commits_enabled(self) -> bool:
        return self.semantic_commits is not None and self.semantic_commits.enabled

    @property
    def is_empty(self) -> bool:
        """どのチェックも有効になっていない場合にTrue。"""
        return not (
            self.issue_number_required
            or self.require_labels
            or self.require_assignees > 0
            or self.require_reviewers > 0
            or self.semantic_commits_enabled
            or self.sections
        )
