"""フロントマター抽出のユニットテスト。"""

import pytest
import yaml

from prcheck.parsers.front_matter import find_front_matter, load_validation_block


class TestFindFrontMatter:
    def test_plain_block(self) -> None:
        text = "---\nvalidation:\n  require_labels: true\n---\nContent"
        assert find_front_matter(text) == "validation:\n  require_labels: true"

    def test_block_inside_comment(self) -> None:
        text = "<!--\n---\nvalidation:\n  issue_number: required\n---\n-->\n\nPR Template"
        assert find_front_matter(text) == "validation:\n  issue_number: required"

    def test_block_must_lead_document(self) -> None:
        text = "Intro\n---\nvalidation:\n  require_labels: true\n---\n"
        assert find_front_matter(text) is None

    def test_no_block(self) -> None:
        assert find_front_matter("Just a description") is None

    def test_block_at_end_of_document(self) -> None:
        assert find_front_matter("---\nkey: value\n---") == "key: value"


class TestLoadValidationBlock:
    def test_returns_validation_mapping(self) -> None:
        text = "---\nvalidation:\n  require_assignees: 2\n---\n"
        assert load_validation_block(text) == {"require_assignees": 2}

    def test_returns_none_without_front_matter(self) -> None:
        assert load_validation_block("No front matter") is None

    def test_missing_validation_key(self) -> None:
        with pytest.raises(ValueError, match="missing 'validation'"):
            load_validation_block("---\ntitle: hello\n---\n")

    def test_validation_must_be_mapping(self) -> None:
        with pytest.raises(ValueError, match="must be a mapping"):
            load_validation_block("---\nvalidation: [a, b]\n---\n")

    def test_invalid_yaml(self) -> None:
        with pytest.raises(yaml.YAMLError):
            load_validation_block("---\nvalidation: [unclosed\n---\n")
