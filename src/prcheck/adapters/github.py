"""GitHub REST APIクライアント。"""

import logging
from typing import Any

import httpx

from prcheck.models.errors import GitHubAPIError, GitHubNotConfiguredError
from prcheck.models.pull_request import CommitInfo

logger = logging.getLogger(__name__)

_PAGE_SIZE = 100


class GitHubClient:
    """PR検証に必要なGitHub APIの読み取り操作。

    リトライは行わない。タイムアウトはhttpxに委ねる。
    """

    def __init__(
        self,
        token: str,
        repository: str,
        base_url: str = "https://api.github.com",
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        if not token or "/" not in repository:
            raise GitHubNotConfiguredError()
        self.owner, self.repo = repository.split("/", 1)
        self.base = base_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport
        self.headers = {
            "Authorization": f"Bearer {token}",
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": "2022-11-28",
            "User-Agent": "prcheck",
        }

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self.base,
            headers=self.headers,
            timeout=self.timeout,
            transport=self._transport,
        )

    @property
    def _repo_path(self) -> str:
        return f"/repos/{self.owner}/{self.repo}"

    async def get_file_content(self, path: str, ref: str) -> str | None:
        """指定ブランチのファイル内容を返す。存在しない場合はNone。

        Raises:
            GitHubAPIError: 404以外のHTTPエラーまたは通信エラーの場合。
        """
        normalized = path.removeprefix("./").lstrip("/")
        url = f"{self._repo_path}/contents/{normalized}"
        try:
            async with self._client() as client:
                resp = await client.get(
                    url,
                    params={"ref": ref},
                    headers={"Accept": "application/vnd.github.raw+json"},
                )
        except httpx.HTTPError as e:
            raise GitHubAPIError(f"Failed to fetch {normalized}@{ref}: {e}") from e

        if resp.status_code == httpx.codes.NOT_FOUND:
            logger.debug("File %s not found on branch %s", normalized, ref)
            return None
        if resp.is_error:
            raise GitHubAPIError(
                f"Failed to fetch {normalized}@{ref}: HTTP {resp.status_code}",
                status_code=resp.status_code,
            )
        return resp.text

    async def list_pull_request_commits(self, pull_number: int) -> list[CommitInfo]:
        """プルリクエストの全コミットを取得する。

        Raises:
            GitHubAPIError: HTTPエラー、通信エラー、または応答がJSON配列でない場合。
        """
        url = f"{self._repo_path}/pulls/{pull_number}/commits"
        commits: list[CommitInfo] = []
        page = 1
        async with self._client() as client:
            while True:
                data = await self._get_json(client, url, params={"per_page": _PAGE_SIZE, "page": page})
                if not isinstance(data, list):
                    raise GitHubAPIError(f"GitHub API request failed: {url}: expected a list of commits")
                if not data:
                    break
                commits.extend(CommitInfo.from_api(c) for c in data)
                if len(data) < _PAGE_SIZE:
                    break
                page += 1
        logger.info("Fetched %d commits for PR #%d", len(commits), pull_number)
        return commits

    async def get_pull_request(self, pull_number: int) -> dict[str, Any]:
        """プルリクエストのペイロードを取得する。"""
        async with self._client() as client:
            data = await self._get_json(client, f"{self._repo_path}/pulls/{pull_number}")
        if not isinstance(data, dict):
            raise GitHubAPIError(f"GitHub API request failed: pull request #{pull_number} is not an object")
        return data

    @staticmethod
    async def _get_json(client: httpx.AsyncClient, url: str, params: dict[str, Any] | None = None) -> Any:
        try:
            resp = await client.get(url, params=params)
            resp.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise GitHubAPIError(
                f"GitHub API request failed: {url}: HTTP {e.response.status_code}",
                status_code=e.response.status_code,
            ) from e
        except httpx.HTTPError as e:
            raise GitHubAPIError(f"GitHub API request failed: {url}: {e}") from e
        try:
            return resp.json()
        except ValueError as e:
            raise GitHubAPIError(
                f"GitHub API request failed: {url}: response is not JSON",
                status_code=resp.status_code,
            ) from e
