"""ラベル・担当者・レビュアー・Issue参照検証のユニットテスト。"""

import pytest

from prcheck.validators.metadata import (
    find_issue_reference,
    validate_assignees,
    validate_issue_reference,
    validate_labels,
    validate_reviewers,
)


class TestValidateLabels:
    def test_passes_with_labels(self) -> None:
        assert validate_labels(["bug"]) == []

    def test_fails_without_labels(self) -> None:
        errors = validate_labels([])
        assert len(errors) == 1
        assert "At least one label" in errors[0]


class TestValidateAssignees:
    def test_enough_assignees(self) -> None:
        assert validate_assignees(["alice", "bob"], 2) == []

    def test_too_few_assignees_names_current(self) -> None:
        errors = validate_assignees(["alice"], 2)
        assert len(errors) == 1
        assert "At least 2 assignee(s)" in errors[0]
        assert "alice" in errors[0]

    def test_no_assignees(self) -> None:
        errors = validate_assignees([], 1)
        assert "no assignees" in errors[0]


class TestValidateReviewers:
    def test_enough_reviewers(self) -> None:
        assert validate_reviewers(["alice", "core-team"], 2) == []

    def test_too_few_reviewers_names_current(self) -> None:
        errors = validate_reviewers(["core-team"], 3)
        assert len(errors) == 1
        assert "At least 3 reviewer(s)" in errors[0]
        assert "core-team" in errors[0]

    def test_no_reviewers(self) -> None:
        errors = validate_reviewers([], 1)
        assert "no reviewers" in errors[0]


class TestValidateIssueReference:
    @pytest.mark.parametrize(
        "body",
        [
            "This PR\n\nFixes: #123\n\nOther content",
            "close: #123",
            "closes: #456",
            "closed: #789",
            "fix: #101",
            "fixes: #202",
            "fixed: #303",
            "resolve: #404",
            "resolves: #505",
            "resolved: #606",
            "close #123",
            "FIX: #123",
            "RESOLVED: #789",
            "Fixes octo-org/octo-repo#100",
            "closes owner/repo#45",
            "Fixes:#123",
            "Fixes:    #456",
            "Closes:  octo-org/octo-repo#100",
        ],
    )
    def test_accepts_linking_keywords(self, body: str) -> None:
        assert validate_issue_reference(body) == []

    @pytest.mark.parametrize(
        "body",
        [
            "No issue reference here",
            "Almost fixes #",
            "fixed repo#123",
            "resolving #123",
            "fix ##123",
            "Issue #123",
            "#123",
            "closes issue #123",
            "",
        ],
    )
    def test_rejects_missing_or_invalid_reference(self, body: str) -> None:
        errors = validate_issue_reference(body)
        assert len(errors) == 1
        assert errors[0].startswith("Required issue reference")

    def test_find_issue_reference_returns_reference(self) -> None:
        assert find_issue_reference("Resolves username/repo-name#99") == "username/repo-name#99"
        assert find_issue_reference("fixes #7 and closes #8") == "#7"
