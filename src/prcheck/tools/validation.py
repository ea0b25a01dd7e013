"""PR検証のMCPツール定義。"""

from typing import Any

from fastmcp import FastMCP

from prcheck.adapters.github import GitHubClient
from prcheck.models.errors import GitHubNotConfiguredError, PRCheckError
from prcheck.models.rules import SectionRule
from prcheck.models.validation import ValidationReport
from prcheck.parsers.checkboxes import parse_checkboxes
from prcheck.parsers.sections import extract_section
from prcheck.services.config_resolver import ConfigResolver, ResolutionOptions
from prcheck.services.validation import ValidationService
from prcheck.validators.checkboxes import validate_section


def _report_payload(report: ValidationReport) -> dict[str, Any]:
    return {
        "pull_number": report.pull_number,
        "overall_passed": report.overall_passed,
        "state": report.state.value,
        "errors": report.errors,
        "steps": [s.model_dump() for s in report.steps],
        "config_source": report.config_source,
    }


def register_validation_tools(
    mcp: FastMCP,
    validation_service: ValidationService,
    resolver: ConfigResolver,
    github: GitHubClient | None,
    defaults: ResolutionOptions,
) -> None:
    """PR検証関連のMCPツールを登録する。"""

    def _options(config_path: str | None, branch: str | None) -> ResolutionOptions:
        return ResolutionOptions(
            config_path=config_path or defaults.config_path,
            branch=branch or defaults.branch,
        )

    @mcp.tool()
    async def validate_pull_request(
        pull_number: int,
        config_path: str | None = None,
        branch: str | None = None,
    ) -> dict[str, Any]:
        """GitHub上のプルリクエストを取得して検証する。

        Args:
            pull_number: プルリクエスト番号。
            config_path: 設定ファイルのパス（任意）。
            branch: 設定ファイルを取得するブランチ（任意）。
        """
        try:
            if github is None:
                raise GitHubNotConfiguredError()
            pull_request = await github.get_pull_request(pull_number)
            report = await validation_service.validate_event(
                {"pull_request": pull_request}, _options(config_path, branch)
            )
            return _report_payload(report)
        except PRCheckError as e:
            return {"error": type(e).__name__, "message": str(e)}

    @mcp.tool()
    async def validate_pull_request_payload(
        pull_request: dict[str, Any],
        config_path: str | None = None,
        branch: str | None = None,
    ) -> dict[str, Any]:
        """プルリクエストのペイロードを検証する。

        Args:
            pull_request: GitHubの `pull_request` オブジェクト。
                body, labels, assignees, requested_reviewers, requested_teams,
                commits（件数）, included_commits を参照します。
            config_path: 設定ファイルのパス（任意）。
            branch: 設定ファイルを取得するブランチ（任意）。
        """
        try:
            report = await validation_service.validate_event(
                {"pull_request": pull_request}, _options(config_path, branch)
            )
            return _report_payload(report)
        except PRCheckError as e:
            return {"error": type(e).__name__, "message": str(e)}

    @mcp.tool()
    async def resolve_rules(
        pr_body: str = "",
        config_path: str | None = None,
        branch: str | None = None,
    ) -> dict[str, Any]:
        """有効な検証ルール設定と、その取得元を返す。

        Args:
            pr_body: PR本文。他の取得元が無い場合にフロントマターを参照します。
            config_path: 設定ファイルのパス（任意）。
            branch: 設定ファイルを取得するブランチ（任意）。
        """
        rules, source = await resolver.resolve_with_source(pr_body, _options(config_path, branch))
        return {
            "rules": rules.model_dump(exclude_defaults=True),
            "source": source,
            "empty": rules.is_empty,
        }

    @mcp.tool()
    async def inspect_section(
        body: str,
        section_title: str,
        rule: str | None = None,
        enforce_nested: bool = False,
    ) -> dict[str, Any]:
        """PR本文の1セクションを抽出し、チェックボックスとルール検証結果を返す。

        Args:
            body: PR本文。
            section_title: `###` 見出しのテキスト。
            rule: "any_checked" または "all_checked"（任意）。
            enforce_nested: 親子チェックボックスの整合性を検証するか。
        """
        try:
            section_rule = SectionRule.model_validate({"rule": rule, "enforce_nested": enforce_nested})
        except ValueError as e:
            return {"error": "InvalidSectionRule", "message": str(e)}

        content = extract_section(body, section_title)
        if not content:
            return {
                "found": False,
                "content": "",
                "checkboxes": [],
                "errors": [f'Section "{section_title}" not found in PR description'],
            }
        return {
            "found": True,
            "content": content,
            "checkboxes": [node.model_dump() for node in parse_checkboxes(content)],
            "errors": validate_section(section_title, section_rule, content),
        }
