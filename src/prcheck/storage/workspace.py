"""ローカルのワーキングツリーからファイルを読み込む。"""

from pathlib import Path, PurePosixPath

from prcheck.models.errors import WorkspaceError


class WorkspaceReader:
    """チェックアウト済みのワーキングツリーを読むデータアクセス層。

    パスは大文字小文字を区別せずに解決する。
    """

    def __init__(self, root: Path) -> None:
        self._root = root

    @property
    def root(self) -> Path:
        return self._root

    def resolve(self, path: str) -> Path | None:
        """パスを大文字小文字を区別せずに解決する。見つからない場合はNone。

        Raises:
            WorkspaceError: 相対パスがワークスペース外を指す場合。
        """
        candidate = PurePosixPath(path.replace("\\", "/"))
        if candidate.is_absolute():
            current = Path(candidate.anchor)
            parts = candidate.parts[1:]
        else:
            current = self._root
            parts = candidate.parts
            # ディレクトリトラバーサル防止
            if ".." in parts:
                raise WorkspaceError(path)

        for part in parts:
            if part in ("", "."):
                continue
            exact = current / part
            if exact.exists():
                current = exact
                continue
            if not current.is_dir():
                return None
            lowered = part.lower()
            match = next((child for child in sorted(current.iterdir()) if child.name.lower() == lowered), None)
            if match is None:
                return None
            current = match

        return current if current.is_file() else None

    async def read_text(self, path: str) -> str:
        """ファイル内容を読み込む。

        Raises:
            FileNotFoundError: ファイルが存在しない場合。
            WorkspaceError: パスがワークスペース外を指す場合。
        """
        resolved = self.resolve(path)
        if resolved is None:
            raise FileNotFoundError(f"File not found in workspace: {path}")
        return resolved.read_text(encoding="utf-8")
