"""検証ルール設定を優先順位付きの取得元から解決するサービス。"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Protocol

import yaml
from pydantic import ValidationError

from prcheck.models.errors import ConfigSourceError, PRCheckError
from prcheck.models.rules import RuleConfig
from prcheck.parsers.front_matter import load_validation_block
from prcheck.storage.workspace import WorkspaceReader

logger = logging.getLogger(__name__)

# GitHubがPRテンプレートとして認識する配置場所（探索順）
TEMPLATE_PATHS: tuple[str, ...] = (
    ".github/pull_request_template.md",
    ".github/PULL_REQUEST_TEMPLATE.md",
    ".github/PULL_REQUEST_TEMPLATE/pull_request_template.md",
    "docs/pull_request_template.md",
    "pull_request_template.md",
)

_DIRECT_CONFIG_SUFFIXES = (".yml", ".yaml")


class ContentFetcher(Protocol):
    """ブランチ上のファイル内容を取得する機能。存在しない場合はNoneを返す。"""

    async def get_file_content(self, path: str, ref: str) -> str | None: ...


@dataclass(frozen=True)
class ResolutionOptions:
    """設定ファイルの取得元を指定するオプション。"""

    config_path: str | None = None
    branch: str | None = None


def parse_config_document(text: str, source: str, markdown: bool) -> RuleConfig:
    """設定文書を解析してRuleConfigを返す。

    Markdown文書はフロントマターの `validation` キーを、YAML文書は全体を設定として扱う。

    Raises:
        ConfigSourceError: 文書が空、解析不能、または設定として不正な場合。
    """
    if not text or not text.strip():
        raise ConfigSourceError(source, "document is empty")

    try:
        if markdown:
            data: Any = load_validation_block(text)
            if data is None:
                raise ConfigSourceError(source, "no front matter found")
        else:
            data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ConfigSourceError(source, f"invalid YAML: {e}") from e
    except ValueError as e:
        raise ConfigSourceError(source, str(e)) from e

    if not isinstance(data, dict) or not data:
        raise ConfigSourceError(source, "configuration is empty or not a mapping")

    try:
        return RuleConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigSourceError(source, f"invalid configuration: {e}") from e


class ConfigCandidate(ABC):
    """設定の取得元候補。attempt()は成功時のみRuleConfigを返す。"""

    def __init__(self, description: str, path: str | None = None) -> None:
        self.description = description
        self.path = path

    @property
    def is_markdown(self) -> bool:
        if self.path is None:
            return True
        return not self.path.lower().endswith(_DIRECT_CONFIG_SUFFIXES)

    @abstractmethod
    async def _load(self) -> str | None:
        """候補の文書を読み込む。存在しないことが確定した場合はNone。"""

    async def attempt(self) -> RuleConfig | None:
        try:
            text = await self._load()
        except (PRCheckError, OSError, UnicodeDecodeError) as e:
            logger.warning("Could not read %s: %s", self.description, e)
            return None

        if text is None:
            logger.info("No configuration at %s", self.description)
            return None

        try:
            return parse_config_document(text, self.description, self.is_markdown)
        except ConfigSourceError as e:
            logger.warning("%s", e)
            return None


class RemoteFileCandidate(ConfigCandidate):
    """指定ブランチ上のファイル。"""

    def __init__(self, path: str, branch: str, fetcher: ContentFetcher) -> None:
        super().__init__(f"{path} on branch {branch}", path)
        self.branch = branch
        self._fetcher = fetcher

    async def _load(self) -> str | None:
        return await self._fetcher.get_file_content(self.path or "", self.branch)


class LocalFileCandidate(ConfigCandidate):
    """ワーキングツリー上のファイル。"""

    def __init__(self, path: str, workspace: WorkspaceReader) -> None:
        super().__init__(f"local file {path}", path)
        self._workspace = workspace

    async def _load(self) -> str | None:
        try:
            return await self._workspace.read_text(self.path or "")
        except FileNotFoundError:
            return None


class PullRequestBodyCandidate(ConfigCandidate):
    """PR本文に埋め込まれたフロントマター。作成者が編集できるため最後に試す。"""

    def __init__(self, body: str) -> None:
        super().__init__("pull request description")
        self._body = body

    async def _load(self) -> str | None:
        return self._body or None


class ConfigResolver:
    """優先順位に従って候補を順に試し、最初に成功した設定を採用する。

    候補は並列に取得しない。すべて失敗した場合は空の設定を返す。
    """

    def __init__(
        self,
        workspace: WorkspaceReader,
        fetcher: ContentFetcher | None = None,
        template_paths: tuple[str, ...] = TEMPLATE_PATHS,
    ) -> None:
        self._workspace = workspace
        self._fetcher = fetcher
        self._template_paths = template_paths

    def build_candidates(self, pr_body: str, options: ResolutionOptions) -> list[ConfigCandidate]:
        """試行順に並んだ候補リストを組み立てる。"""
        fetcher = self._fetcher
        branch = options.branch
        candidates: list[ConfigCandidate] = []

        if options.config_path:
            if fetcher is not None and branch:
                candidates.append(RemoteFileCandidate(options.config_path, branch, fetcher))
            candidates.append(LocalFileCandidate(options.config_path, self._workspace))

        if fetcher is not None and branch:
            candidates.extend(RemoteFileCandidate(path, branch, fetcher) for path in self._template_paths)
        candidates.extend(LocalFileCandidate(path, self._workspace) for path in self._template_paths)

        candidates.append(PullRequestBodyCandidate(pr_body))
        return candidates

    async def resolve_with_source(self, pr_body: str, options: ResolutionOptions) -> tuple[RuleConfig, str | None]:
        """有効な設定と、その取得元の説明を返す。"""
        if options.branch and self._fetcher is None:
            logger.warning("Config branch %s requested but GitHub access is not configured", options.branch)

        for candidate in self.build_candidates(pr_body, options):
            config = await candidate.attempt()
            if config is not None:
                logger.info("Loaded validation config from %s", candidate.description)
                return config, candidate.description

        logger.info("No validation configuration found, no checks will be enforced")
        return RuleConfig(), None

    async def resolve(self, pr_body: str, options: ResolutionOptions | None = None) -> RuleConfig:
        config, _ = await self.resolve_with_source(pr_body, options or ResolutionOptions())
        return config
