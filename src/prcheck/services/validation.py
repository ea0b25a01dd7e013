"""プルリクエストの検証を順に実行し、結果を集約するサービス。"""

import logging
from typing import Any, cast

from prcheck.models.errors import MissingPullRequestError
from prcheck.models.pull_request import PullRequestContext
from prcheck.models.rules import RuleConfig, SemanticCommitsRule
from prcheck.models.validation import ValidationReport, ValidationState, ValidationStep
from prcheck.parsers.sections import extract_section
from prcheck.services.config_resolver import ConfigResolver, ResolutionOptions
from prcheck.validators.checkboxes import validate_section
from prcheck.validators.commits import CommitSource, validate_semantic_commits
from prcheck.validators.metadata import (
    validate_assignees,
    validate_issue_reference,
    validate_labels,
    validate_reviewers,
)

logger = logging.getLogger(__name__)


class ValidationService:
    """設定を解決し、有効なチェックを宣言順に実行する。

    チェックの失敗で処理を打ち切らず、すべてのエラーを集約する。
    """

    def __init__(self, resolver: ConfigResolver, commit_source: CommitSource | None = None) -> None:
        self._resolver = resolver
        self._commit_source = commit_source

    async def validate_event(
        self,
        payload: dict[str, Any],
        options: ResolutionOptions | None = None,
        event_name: str = "",
    ) -> ValidationReport:
        """GitHubイベントペイロードを検証する。

        Raises:
            MissingPullRequestError: ペイロードにプルリクエストが含まれない場合。
        """
        logger.debug("State: %s", ValidationState.NOT_STARTED.value)
        pull_request = payload.get("pull_request")
        if not pull_request:
            logger.error("State: %s, event carries no pull request", ValidationState.ABORTED.value)
            raise MissingPullRequestError(event_name)
        return await self.validate(PullRequestContext.from_payload(pull_request), options)

    async def validate(
        self,
        pull_request: PullRequestContext,
        options: ResolutionOptions | None = None,
    ) -> ValidationReport:
        """プルリクエストを検証する。"""
        logger.info("Validating PR #%d: %s", pull_request.number, pull_request.title)

        logger.debug("State: %s", ValidationState.CONFIG_LOADING.value)
        rules, source = await self._resolver.resolve_with_source(pull_request.body, options or ResolutionOptions())
        logger.debug("Loaded validation config: %s", rules.model_dump_json(exclude_defaults=True))

        logger.debug("State: %s", ValidationState.EVALUATING.value)
        errors, steps = await self.evaluate(pull_request, rules)

        state = ValidationState.COMPLETED_FAILED if errors else ValidationState.COMPLETED_PASSED
        report = ValidationReport(
            pull_number=pull_request.number,
            state=state,
            errors=errors,
            steps=steps,
            config_source=source,
        )
        for line in report.summary_lines():
            logger.info("  %s", line)
        if report.overall_passed:
            logger.info("Pull request validation passed successfully")
        else:
            logger.info("PR validation failed with %d error(s)", len(errors))
        return report

    async def evaluate(
        self,
        pull_request: PullRequestContext,
        rules: RuleConfig,
    ) -> tuple[list[str], list[ValidationStep]]:
        """解決済みの設定に従って各チェックを実行する。

        Returns:
            (エラーメッセージ一覧, チェック結果一覧)。いずれも実行順。
        """
        errors: list[str] = []
        steps: list[ValidationStep] = []

        def record(name: str, step_errors: list[str]) -> None:
            errors.extend(step_errors)
            steps.append(ValidationStep(name=name, passed=not step_errors))

        if rules.require_labels:
            record("Labels", validate_labels(pull_request.labels))

        if rules.require_assignees > 0:
            record("Assignees", validate_assignees(pull_request.assignees, rules.require_assignees))

        if rules.require_reviewers > 0:
            record("Reviewers", validate_reviewers(pull_request.reviewer_requests, rules.require_reviewers))

        if rules.issue_number_required:
            record("Issue Reference", validate_issue_reference(pull_request.body))

        if rules.semantic_commits_enabled:
            semantic_rule = cast(SemanticCommitsRule, rules.semantic_commits)
            record(
                "Semantic Commits",
                await validate_semantic_commits(pull_request, semantic_rule, self._commit_source),
            )

        for section_name, section_rule in rules.sections.items():
            content = extract_section(pull_request.body, section_name)
            if not content:
                record(f"Section: {section_name}", [f'Section "{section_name}" not found in PR description'])
                continue
            record(f"Section: {section_name}", validate_section(section_name, section_rule, content))

        return errors, steps
