"""セマンティックコミット規約の検証。"""

import logging
import re
from typing import Protocol

from pydantic import BaseModel

from prcheck.models.errors import PRCheckError
from prcheck.models.pull_request import CommitInfo, PullRequestContext
from prcheck.models.rules import SemanticCommitsRule

logger = logging.getLogger(__name__)

# type(scope)!: subject
_SEMANTIC_PATTERN = re.compile(r"^([a-z]+)(?:\(([a-z0-9_-]+)\))?!?: (.+)$", re.IGNORECASE)


class CommitSource(Protocol):
    """プルリクエストのコミット一覧を取得する機能。"""

    async def list_pull_request_commits(self, pull_number: int) -> list[CommitInfo]: ...


class CommitViolation(BaseModel):
    """規約に違反したコミット。"""

    short_id: str
    subject: str
    reason: str

    def describe(self) -> str:
        return f"{self.short_id} - {self.subject} - {self.reason}"


def validate_commit_message(
    commit: CommitInfo,
    allowed_types: list[str],
    allowed_scopes: list[str] | None,
) -> CommitViolation | None:
    """コミットメッセージ1行目を規約に照らして検証する。

    Args:
        commit: 検証対象のコミット。
        allowed_types: 許可するtype。空の場合は任意のtypeを許可。
        allowed_scopes: 許可するscope。Noneまたは空の場合は任意のscopeを許可。

    Returns:
        違反内容。規約に沿っている場合はNone。
    """
    subject = commit.subject
    match = _SEMANTIC_PATTERN.match(subject)
    if match is None:
        logger.warning("Commit %s does not follow semantic format", commit.short_id)
        return CommitViolation(
            short_id=commit.short_id,
            subject=subject,
            reason="Does not follow semantic format: type(scope): subject",
        )

    commit_type, scope, _ = match.groups()
    types = [t.lower() for t in allowed_types]
    if types and commit_type.lower() not in types:
        logger.warning("Commit %s has invalid type: %s", commit.short_id, commit_type)
        return CommitViolation(
            short_id=commit.short_id,
            subject=subject,
            reason=f'Type "{commit_type}" is not allowed. Use one of: {", ".join(allowed_types)}',
        )

    scopes = [s.lower() for s in allowed_scopes or []]
    if scope and scopes and scope.lower() not in scopes:
        logger.warning("Commit %s has invalid scope: %s", commit.short_id, scope)
        return CommitViolation(
            short_id=commit.short_id,
            subject=subject,
            reason=f'Scope "{scope}" is not allowed. Use one of: {", ".join(allowed_scopes or [])}',
        )

    return None


async def collect_commits(pull_request: PullRequestContext, source: CommitSource | None) -> list[CommitInfo]:
    """検証対象のコミット一覧を取得する。

    ペイロードに埋め込まれたコミット一覧が報告されたコミット数と一致する場合はそれを使い、
    それ以外はコミット取得機能から全件を取得する。

    Raises:
        PRCheckError: コミットを取得できない場合。
    """
    embedded = pull_request.commits
    if embedded is not None and pull_request.commit_count is not None and len(embedded) == pull_request.commit_count:
        logger.debug("Using %d commits from event payload", len(embedded))
        return embedded

    if source is None:
        raise PRCheckError("no commit source is available to list pull request commits")

    logger.info("Fetching commits for PR #%d", pull_request.number)
    return await source.list_pull_request_commits(pull_request.number)


async def validate_semantic_commits(
    pull_request: PullRequestContext,
    rule: SemanticCommitsRule,
    source: CommitSource | None,
) -> list[str]:
    """プルリクエストの全コミットを規約に照らして検証する。

    Returns:
        違反コミットをまとめた1件のエラー、または取得失敗を示す1件のエラー。問題なければ空リスト。
    """
    try:
        commits = await collect_commits(pull_request, source)
    except PRCheckError as e:
        logger.error("Failed to validate semantic commits: %s", e)
        return [f"Failed to validate semantic commits: {e}"]

    violations = [
        violation
        for commit in commits
        if (violation := validate_commit_message(commit, rule.types, rule.allowed_scopes)) is not None
    ]
    if not violations:
        logger.info("All %d commit(s) follow semantic convention", len(commits))
        return []

    logger.warning("Found %d invalid commit(s) out of %d total", len(violations), len(commits))
    lines = ["The following commits do not follow the semantic commit convention:"]
    lines.extend(f"  • {violation.describe()}" for violation in violations)
    return ["\n".join(lines)]
