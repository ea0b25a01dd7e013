"""PR本文から見出し単位のセクションを切り出す。"""

import logging
import re

logger = logging.getLogger(__name__)

SECTION_HEADING_MARKER = "###"


def extract_section(body: str, section_title: str) -> str:
    """`### <section_title>` 見出し直後から次の同レベル見出しまでの本文を返す。

    見出しは大文字小文字を区別せずに照合する。セクションが存在しない、または
    中身が空の場合は空文字列を返す。

    Args:
        body: PR本文。
        section_title: セクション見出しのテキスト。

    Returns:
        前後の空白を除去したセクション本文。
    """
    if not body:
        return ""

    pattern = re.compile(
        rf"^{SECTION_HEADING_MARKER}[ \t]*{re.escape(section_title)}[ \t]*\r?\n"
        rf"(.*?)(?=^{SECTION_HEADING_MARKER}(?!#)|\Z)",
        re.IGNORECASE | re.DOTALL | re.MULTILINE,
    )
    match = pattern.search(body)
    content = match.group(1).strip() if match else ""

    if content:
        logger.debug("Found section %r with %d lines", section_title, len(content.splitlines()))
    else:
        logger.debug("Section %r not found or empty", section_title)
    return content
