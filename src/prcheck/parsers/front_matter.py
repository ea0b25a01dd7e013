"""Markdown文書に埋め込まれたフロントマターの抽出。"""

import re
from typing import Any

import yaml

# `---` で囲まれたブロック。全体が `<!-- ... -->` コメントで囲まれていてもよい
_FRONT_MATTER_PATTERN = re.compile(
    r"\A\s*(?:<!--[ \t]*\r?\n\s*)?---[ \t]*\r?\n(.*?)\r?\n---[ \t]*(?:\r?\n|\Z)",
    re.DOTALL,
)

VALIDATION_KEY = "validation"


def find_front_matter(text: str) -> str | None:
    """文書先頭のフロントマター本文を返す。見つからない場合はNone。"""
    match = _FRONT_MATTER_PATTERN.match(text or "")
    return match.group(1) if match else None


def load_validation_block(text: str) -> dict[str, Any] | None:
    """フロントマター内の `validation` キーを読み込む。

    Returns:
        `validation` の中身。フロントマターが無い場合はNone。

    Raises:
        yaml.YAMLError: フロントマターのYAMLが不正な場合。
        ValueError: `validation` キーが無い、またはマッピングでない場合。
    """
    front_matter = find_front_matter(text)
    if front_matter is None:
        return None

    data = yaml.safe_load(front_matter)
    if not isinstance(data, dict) or VALIDATION_KEY not in data:
        raise ValueError(f"front matter found but missing '{VALIDATION_KEY}' section")
    block = data[VALIDATION_KEY]
    if block is not None and not isinstance(block, dict):
        raise ValueError(f"'{VALIDATION_KEY}' section must be a mapping")
    return block or {}
