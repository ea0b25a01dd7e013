"""prcheck MCPサーバーのコマンドラインエントリポイント。"""

import logging

import uvicorn
from starlette.middleware import Middleware

from prcheck.config import ServerConfig
from prcheck.middleware import TokenAuthMiddleware
from prcheck.server import create_server

logger = logging.getLogger(__name__)


def main() -> None:
    """環境変数の設定でstreamable-httpサーバーを起動する。"""
    config = ServerConfig()
    logging.basicConfig(level=config.log_level.upper(), format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    if not config.github_configured:
        logger.warning("GitHub access is not configured, branch configs and validate_pull_request are unavailable")
    if not config.url_token:
        logger.warning("PRCHECK_URL_TOKEN not set, the MCP endpoint accepts unauthenticated requests")

    app = create_server(config).http_app(
        transport="streamable-http",
        middleware=[Middleware(TokenAuthMiddleware, url_token=config.url_token)],
    )
    logger.info("Serving prcheck on %s:%d (workspace: %s)", config.host, config.port, config.workspace_dir)
    uvicorn.run(app, host=config.host, port=config.port)


if __name__ == "__main__":
    main()
