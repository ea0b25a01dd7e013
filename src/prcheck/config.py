"""prcheckの設定管理。"""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings


class ServerConfig(BaseSettings):
    """サーバー設定。環境変数から読み込み可能。"""

    model_config = {"env_prefix": "PRCHECK_"}

    # ローカル設定ファイル・PRテンプレートを探すワーキングツリー
    workspace_dir: Path = Field(default_factory=Path.cwd)

    # GitHub API
    github_token: str = ""
    github_repository: str = ""
    github_api_url: str = "https://api.github.com"
    request_timeout: float = 30.0

    # 検証ルールの取得元
    config_file: str | None = None
    config_branch: str | None = None

    host: str = "0.0.0.0"
    port: int = 8000
    url_token: str = ""
    log_level: str = "INFO"

    @property
    def github_configured(self) -> bool:
        return bool(self.github_token and "/" in self.github_repository)
