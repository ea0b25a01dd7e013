"""ラベル・担当者・レビュアー・Issue参照の検証。"""

import logging
import re

logger = logging.getLogger(__name__)

ISSUE_LINK_KEYWORDS = ("close", "closes", "closed", "fix", "fixes", "fixed", "resolve", "resolves", "resolved")

# キーワード + 任意のコロン + 空白 + `#123` または `owner/repo#123`
_ISSUE_REFERENCE_PATTERN = re.compile(
    rf"\b(?:{'|'.join(ISSUE_LINK_KEYWORDS)})(?:\s*:\s*|\s+)((?:[a-zA-Z0-9_.-]+/[a-zA-Z0-9_.-]+)?#\d+)",
    re.IGNORECASE,
)

ISSUE_REFERENCE_ERROR = (
    "Required issue reference is missing. Use a format like 'Fixes: #123' or "
    "'Closes owner/repo#456' in your PR description."
)


def validate_labels(labels: list[str]) -> list[str]:
    if not labels:
        logger.warning("No labels found on this pull request")
        return ["At least one label must be applied to this pull request"]
    logger.info("PR has the following labels: %s", ", ".join(labels))
    return []


def validate_assignees(assignees: list[str], required: int) -> list[str]:
    """担当者が required 人以上いるか検証する。"""
    if len(assignees) >= required:
        return []
    current = f"currently assigned: {', '.join(assignees)}" if assignees else "no assignees are set"
    logger.warning("PR has %d assignee(s), %d required", len(assignees), required)
    return [f"At least {required} assignee(s) required for this pull request; {current}"]


def validate_reviewers(reviewer_requests: list[str], required: int) -> list[str]:
    """レビュー依頼（ユーザー＋チーム）が required 件以上あるか検証する。"""
    if len(reviewer_requests) >= required:
        return []
    current = (
        f"currently requested: {', '.join(reviewer_requests)}" if reviewer_requests else "no reviewers are requested"
    )
    logger.warning("PR has %d reviewer request(s), %d required", len(reviewer_requests), required)
    return [f"At least {required} reviewer(s) required for this pull request; {current}"]


def find_issue_reference(body: str) -> str | None:
    """本文中の最初のIssue参照（`#123` / `owner/repo#123`）を返す。"""
    match = _ISSUE_REFERENCE_PATTERN.search(body or "")
    return match.group(1) if match else None


def validate_issue_reference(body: str) -> list[str]:
    reference = find_issue_reference(body)
    if reference is None:
        logger.warning("No issue reference found in PR description")
        return [ISSUE_REFERENCE_ERROR]
    logger.info("Found issue reference: %s", reference)
    return []
