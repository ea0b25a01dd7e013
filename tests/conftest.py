"""テスト共通フィクスチャ。"""

from pathlib import Path

import pytest
from fakes import FakeCommitSource, FakeContentFetcher

from prcheck.config import ServerConfig
from prcheck.services.config_resolver import ConfigResolver
from prcheck.services.validation import ValidationService
from prcheck.storage.workspace import WorkspaceReader


@pytest.fixture
def config_dir() -> Path:
    """サンプル設定ファイルディレクトリ。"""
    return Path(__file__).parent.parent / "config"


@pytest.fixture
def workspace_dir(tmp_path: Path) -> Path:
    """テスト用の空のワーキングツリー。"""
    root = tmp_path / "workspace"
    root.mkdir()
    return root


@pytest.fixture
def workspace(workspace_dir: Path) -> WorkspaceReader:
    """テスト用WorkspaceReader。"""
    return WorkspaceReader(root=workspace_dir)


@pytest.fixture
def fetcher() -> FakeContentFetcher:
    """テスト用のブランチ上ファイル取得。"""
    return FakeContentFetcher()


@pytest.fixture
def commit_source() -> FakeCommitSource:
    """テスト用のコミット一覧取得。"""
    return FakeCommitSource()


@pytest.fixture
def resolver(workspace: WorkspaceReader, fetcher: FakeContentFetcher) -> ConfigResolver:
    """テスト用ConfigResolver。"""
    return ConfigResolver(workspace=workspace, fetcher=fetcher)


@pytest.fixture
def validation_service(resolver: ConfigResolver, commit_source: FakeCommitSource) -> ValidationService:
    """テスト用ValidationService。"""
    return ValidationService(resolver=resolver, commit_source=commit_source)


@pytest.fixture
def server_config(workspace_dir: Path) -> ServerConfig:
    """テスト用ServerConfig。GitHubアクセスは無効。"""
    return ServerConfig(workspace_dir=workspace_dir, github_token="", github_repository="")

