"""Markdownのチェックボックスリストを解析する。"""

import logging
import re

from prcheck.models.validation import CheckboxNode

logger = logging.getLogger(__name__)

_CHECKBOX_PATTERN = re.compile(r"^(\s*)- \[([xX ])\] (.+)$")


def parse_checkboxes(content: str) -> list[CheckboxNode]:
    """テキストを行単位で走査し、チェックボックス項目を出現順に返す。

    チェックボックス形式でない行は無視する。
    """
    if not content:
        return []

    nodes: list[CheckboxNode] = []
    for line_number, line in enumerate(content.split("\n"), start=1):
        match = _CHECKBOX_PATTERN.match(line.rstrip("\r"))
        if match is None:
            continue
        node = CheckboxNode(
            indentation=len(match.group(1)),
            checked=match.group(2).lower() == "x",
            text=match.group(3).strip(),
        )
        logger.debug(
            "Found checkbox at line %d: [%s] %s (indentation: %d)",
            line_number,
            "x" if node.checked else " ",
            node.text,
            node.indentation,
        )
        nodes.append(node)

    logger.debug("Parsed %d checkboxes", len(nodes))
    return nodes
