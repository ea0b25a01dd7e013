"""プルリクエスト関連のデータモデル。"""

from typing import Any

from pydantic import BaseModel, Field

SHORT_SHA_LENGTH = 7


class CommitInfo(BaseModel):
    """プルリクエストに含まれるコミット。"""

    sha: str
    message: str

    @property
    def short_id(self) -> str:
        return self.sha[:SHORT_SHA_LENGTH]

    @property
    def subject(self) -> str:
        """コミットメッセージの1行目。"""
        return self.message.split("\n", 1)[0].strip()

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "CommitInfo":
        """GitHub APIのコミットオブジェクトから生成する。

        `{"sha", "commit": {"message"}}` 形式と `{"sha", "message"}` 形式の両方を受け付ける。
        """
        commit = data.get("commit") or {}
        message = commit.get("message") if isinstance(commit, dict) else None
        if message is None:
            message = data.get("message", "")
        return cls(sha=str(data.get("sha") or data.get("id") or ""), message=message or "")


class PullRequestContext(BaseModel):
    """検証対象のプルリクエスト情報。"""

    number: int
    title: str = ""
    body: str = ""
    labels: list[str] = Field(default_factory=list)
    assignees: list[str] = Field(default_factory=list)
    requested_reviewers: list[str] = Field(default_factory=list)
    requested_teams: list[str] = Field(default_factory=list)
    commit_count: int | None = None
    commits: list[CommitInfo] | None = None

    @property
    def reviewer_requests(self) -> list[str]:
        """レビュアーとチームのレビュー依頼を重複なく返す。"""
        return list(dict.fromkeys([*self.requested_reviewers, *self.requested_teams]))

    @classmethod
    def from_payload(cls, pull_request: dict[str, Any]) -> "PullRequestContext":
        """GitHubの `pull_request` ペイロードから生成する。"""
        commit_count = pull_request.get("commits")
        included = pull_request.get("included_commits")
        return cls(
            number=int(pull_request.get("number") or 0),
            title=pull_request.get("title") or "",
            body=pull_request.get("body") or "",
            labels=_names(pull_request.get("labels"), "name"),
            assignees=_names(pull_request.get("assignees"), "login"),
            requested_reviewers=_names(pull_request.get("requested_reviewers"), "login"),
            requested_teams=_names(pull_request.get("requested_teams"), "name"),
            commit_count=commit_count if isinstance(commit_count, int) else None,
            commits=[CommitInfo.from_api(c) for c in included] if isinstance(included, list) else None,
        )


def _names(items: Any, key: str) -> list[str]:
    if not items:
        return []
    names: list[str] = []
    for item in items:
        value = item.get(key) if isinstance(item, dict) else item
        if value:
            names.append(str(value))
    return names
