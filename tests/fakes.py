"""テスト用の外部機能フェイクとヘルパー。"""

from pathlib import Path

from prcheck.models.errors import GitHubAPIError
from prcheck.models.pull_request import CommitInfo


class FakeContentFetcher:
    """ブランチ上のファイル取得をメモリ上で再現する。"""

    def __init__(self) -> None:
        self.files: dict[tuple[str, str], str] = {}
        self.failing: set[tuple[str, str]] = set()
        self.calls: list[tuple[str, str]] = []

    def add(self, path: str, branch: str, content: str) -> None:
        self.files[(path, branch)] = content

    def fail(self, path: str, branch: str) -> None:
        self.failing.add((path, branch))

    async def get_file_content(self, path: str, ref: str) -> str | None:
        self.calls.append((path, ref))
        if (path, ref) in self.failing:
            raise GitHubAPIError(f"Failed to fetch {path}@{ref}: HTTP 500", status_code=500)
        return self.files.get((path, ref))


class FakeCommitSource:
    """コミット一覧の取得をメモリ上で再現する。"""

    def __init__(self, commits: list[CommitInfo] | None = None, error: Exception | None = None) -> None:
        self.commits = commits or []
        self.error = error
        self.calls: list[int] = []

    async def list_pull_request_commits(self, pull_number: int) -> list[CommitInfo]:
        self.calls.append(pull_number)
        if self.error is not None:
            raise self.error
        return self.commits


def write_file(root: Path, relative: str, content: str) -> Path:
    path = root / relative
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path
