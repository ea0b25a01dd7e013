"""セクション内チェックボックスのルール検証。"""

import logging

from prcheck.models.rules import SectionRule
from prcheck.models.validation import CheckboxNode
from prcheck.parsers.checkboxes import parse_checkboxes

logger = logging.getLogger(__name__)


def find_direct_children(nodes: list[CheckboxNode], parent_index: int) -> list[CheckboxNode]:
    """親項目の直下の子項目を返す。

    親の後ろから走査し、親と同じかそれより浅いインデントの項目で打ち切る。
    直下の子は、最初に現れた親より深い項目と同じインデントを持つ項目のみ。
    孫以降の項目は、その親が走査されるときに評価される。
    """
    parent = nodes[parent_index]
    child_indentation: int | None = None
    children: list[CheckboxNode] = []

    for node in nodes[parent_index + 1 :]:
        if node.indentation <= parent.indentation:
            break
        if child_indentation is None:
            child_indentation = node.indentation
        if node.indentation == child_indentation:
            children.append(node)

    return children


def validate_nested_checkboxes(section_name: str, nodes: list[CheckboxNode]) -> list[str]:
    """チェック済みの親項目に未チェックの子項目がないか検証する。

    Returns:
        違反した親項目ごとに1件のエラーメッセージ。
    """
    errors: list[str] = []
    for index, node in enumerate(nodes):
        if not node.checked:
            continue

        children = find_direct_children(nodes, index)
        unchecked = [child.text for child in children if not child.checked]
        logger.debug("Checkbox %r has %d direct children", node.text, len(children))
        if unchecked:
            logger.warning(
                "In %r section, parent checkbox %r is checked but has unchecked children: %s",
                section_name,
                node.text,
                ", ".join(unchecked),
            )
            errors.append(f'In "{section_name}" section, "{node.text}" is checked but has unchecked sub-items')
    return errors


def validate_section_rules(section_name: str, rule: SectionRule, nodes: list[CheckboxNode]) -> list[str]:
    """解析済みのチェックボックスにセクションルールを適用する。"""
    errors: list[str] = []
    checked = [node for node in nodes if node.checked]

    if rule.rule == "any_checked" and not checked:
        logger.warning("Section %r requires at least one checked option", section_name)
        errors.append(f'In "{section_name}" section, at least one option must be checked')
    elif rule.rule == "all_checked" and len(checked) < len(nodes):
        unchecked = ", ".join(node.text for node in nodes if not node.checked)
        logger.warning("Section %r requires all options to be checked. Unchecked items: %s", section_name, unchecked)
        errors.append(f'In "{section_name}" section, all options must be checked')

    if rule.enforce_nested and checked:
        errors.extend(validate_nested_checkboxes(section_name, nodes))

    return errors


def validate_section(section_name: str, rule: SectionRule, content: str) -> list[str]:
    """セクション本文を解析してルールを検証する。

    セクションの存在確認は呼び出し側で行う。チェックボックスが1つも無い場合は検証しない。
    """
    nodes = parse_checkboxes(content)
    if not nodes:
        logger.info("Section %r contains no checkboxes, skipping rule %s", section_name, rule.rule or "none")
        return []

    logger.info(
        "Section %r has %d checkboxes, %d are checked",
        section_name,
        len(nodes),
        sum(1 for node in nodes if node.checked),
    )
    return validate_section_rules(section_name, rule, nodes)
