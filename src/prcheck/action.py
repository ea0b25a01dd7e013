"""GitHub Actionsから実行するためのエントリポイント。"""

import asyncio
import json
import logging
import sys
from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings

from prcheck.adapters.github import GitHubClient
from prcheck.models.errors import PRCheckError
from prcheck.models.validation import ValidationReport
from prcheck.services.config_resolver import ConfigResolver, ResolutionOptions
from prcheck.services.validation import ValidationService
from prcheck.storage.workspace import WorkspaceReader

logger = logging.getLogger(__name__)


class ActionInputs(BaseSettings):
    """`with:` で指定されたアクション入力（INPUT_* 環境変数）。"""

    model_config = {"env_prefix": "INPUT_"}

    config_file: str | None = None
    config_branch: str | None = None
    fail_on_error: bool = True
    github_token: str = ""

    @field_validator("config_file", "config_branch", mode="before")
    @classmethod
    def _blank_as_none(cls, value: str | None) -> str | None:
        if value is None or not str(value).strip():
            return None
        return str(value).strip()


class GitHubEnvironment(BaseSettings):
    """ランナーが設定する GITHUB_* 環境変数。"""

    model_config = {"env_prefix": "GITHUB_"}

    event_name: str = ""
    event_path: Path | None = None
    repository: str = ""
    api_url: str = "https://api.github.com"
    workspace: Path | None = None
    output: Path | None = None


def write_outputs(output_file: Path | None, report: ValidationReport) -> None:
    """`validation-result` と `validation-errors` をステップ出力に書き込む。"""
    result = "passed" if report.overall_passed else "failed"
    errors = "\n".join(report.errors)
    if output_file is None:
        logger.debug("GITHUB_OUTPUT is not set, skipping step outputs")
        return
    with open(output_file, "a", encoding="utf-8") as f:
        f.write(f"validation-result={result}\n")
        f.write("validation-errors<<PRCHECK_EOF\n")
        f.write(f"{errors}\nPRCHECK_EOF\n")


async def run(inputs: ActionInputs, env: GitHubEnvironment) -> int:
    """アクションを実行し、終了コードを返す。"""
    github = (
        GitHubClient(token=inputs.github_token, repository=env.repository, base_url=env.api_url)
        if inputs.github_token and "/" in env.repository
        else None
    )
    resolver = ConfigResolver(workspace=WorkspaceReader(root=env.workspace or Path.cwd()), fetcher=github)
    service = ValidationService(resolver=resolver, commit_source=github)
    options = ResolutionOptions(config_path=inputs.config_file, branch=inputs.config_branch)

    logger.info("Using %s", f"custom config path: {inputs.config_file}" if inputs.config_file else "default config paths")
    logger.info("Using config from %s", f"branch: {inputs.config_branch}" if inputs.config_branch else "current branch")
    logger.info("Fail on error: %s", "Yes" if inputs.fail_on_error else "No")

    try:
        payload = json.loads(env.event_path.read_text(encoding="utf-8")) if env.event_path else {}
    except (OSError, ValueError) as e:
        logger.error("Could not read event payload %s: %s", env.event_path, e)
        write_outputs(env.output, ValidationReport.aborted(f"Could not read event payload: {e}"))
        return 1

    try:
        report = await service.validate_event(payload, options, event_name=env.event_name)
    except PRCheckError as e:
        logger.error("%s", e)
        write_outputs(env.output, ValidationReport.aborted(str(e)))
        return 1

    write_outputs(env.output, report)
    if report.overall_passed:
        logger.info("Action completed successfully")
        return 0

    for error in report.errors:
        logger.error("  - %s", error)
    if inputs.fail_on_error:
        return 1
    logger.warning("PR validation had errors but the action is configured not to fail")
    return 0


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s", stream=sys.stdout)
    sys.exit(asyncio.run(run(ActionInputs(), GitHubEnvironment())))


if __name__ == "__main__":
    main()
