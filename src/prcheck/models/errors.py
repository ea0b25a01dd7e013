"""prcheckのカスタム例外クラス。"""


class PRCheckError(Exception):
    """prcheckの基底例外クラス。"""


class MissingPullRequestError(PRCheckError):
    """イベントにプルリクエスト情報が含まれていない場合の例外。

    検証を開始できない致命的エラーとして扱う。
    """

    def __init__(self, event_name: str = "") -> None:
        detail = f" (event: {event_name})" if event_name else ""
        super().__init__(f"This action can only be run on pull request events{detail}")
        self.event_name = event_name


class ConfigSourceError(PRCheckError):
    """設定ファイル候補の読み込みに失敗した場合の例外。"""

    def __init__(self, source: str, reason: str) -> None:
        super().__init__(f"Failed to read configuration from {source}: {reason}")
        self.source = source
        self.reason = reason


class WorkspaceError(PRCheckError):
    """ワークスペース外のパスが指定された場合の例外。"""

    def __init__(self, path: str) -> None:
        super().__init__(f"Path escapes the workspace: {path}")
        self.path = path


class GitHubAPIError(PRCheckError):
    """GitHub APIの通信エラー。"""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class GitHubNotConfiguredError(PRCheckError):
    """GitHubのトークンまたはリポジトリが未設定の場合の例外。"""

    def __init__(self) -> None:
        super().__init__(
            "GitHub access is not configured. "
            "Set PRCHECK_GITHUB_TOKEN and PRCHECK_GITHUB_REPOSITORY (owner/repo)."
        )
