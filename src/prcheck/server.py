"""FastMCPベースのMCPサーバーエントリポイント。"""

from fastmcp import FastMCP
from starlette.requests import Request
from starlette.responses import JSONResponse

from prcheck.adapters.github import GitHubClient
from prcheck.config import ServerConfig
from prcheck.services.config_resolver import ConfigResolver, ResolutionOptions
from prcheck.services.validation import ValidationService
from prcheck.storage.workspace import WorkspaceReader
from prcheck.tools.validation import register_validation_tools


def create_github_client(config: ServerConfig) -> GitHubClient | None:
    """設定からGitHubクライアントを作成する。未設定の場合はNone。"""
    if not config.github_configured:
        return None
    return GitHubClient(
        token=config.github_token,
        repository=config.github_repository,
        base_url=config.github_api_url,
        timeout=config.request_timeout,
    )


def create_server(config: ServerConfig | None = None, github: GitHubClient | None = None) -> FastMCP:
    """prcheck MCPサーバーを作成し、ツールを登録する。

    Args:
        config: サーバー設定。Noneの場合はデフォルト設定を使用。
        github: GitHubクライアント。Noneの場合は設定から作成する。

    Returns:
        設定済みのFastMCPインスタンス。
    """
    if config is None:
        config = ServerConfig()
    if github is None:
        github = create_github_client(config)

    mcp = FastMCP("prcheck")

    # データアクセス層
    workspace = WorkspaceReader(root=config.workspace_dir)

    # サービス層
    resolver = ConfigResolver(workspace=workspace, fetcher=github)
    validation_service = ValidationService(resolver=resolver, commit_source=github)

    defaults = ResolutionOptions(config_path=config.config_file, branch=config.config_branch)
    register_validation_tools(mcp, validation_service, resolver, github, defaults)

    # ヘルスチェックエンドポイント
    @mcp.custom_route("/health", methods=["GET"])
    async def health_check(request: Request) -> JSONResponse:
        return JSONResponse({"status": "ok", "github": github is not None})

    return mcp
