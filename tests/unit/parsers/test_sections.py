"""extract_sectionのユニットテスト。"""

from prcheck.parsers.sections import extract_section


class TestExtractSection:
    def test_extracts_section_until_next_heading(self) -> None:
        body = "### Section A\nContent\n\n### Section B\nOther"
        assert extract_section(body, "Section A") == "Content"
        assert extract_section(body, "Section B") == "Other"

    def test_missing_section_returns_empty(self) -> None:
        body = "### Section A\nContent\n\n### Section B\nOther"
        assert extract_section(body, "Missing") == ""

    def test_multiline_sections(self) -> None:
        body = """
# Title

### Section A
Content of section A
with multiple lines

### Section B
Content of section B

### Final Section
The end
"""
        assert extract_section(body, "Section A") == "Content of section A\nwith multiple lines"
        assert extract_section(body, "Section B") == "Content of section B"
        assert extract_section(body, "Final Section") == "The end"

    def test_heading_match_is_case_insensitive(self) -> None:
        body = "### CHECKLIST\n- [x] done\n"
        assert extract_section(body, "Checklist") == "- [x] done"

    def test_special_characters_in_title(self) -> None:
        body = "\n### Section (with parentheses)\nContent here\n\n### Section [with brackets]\nMore content\n"
        assert extract_section(body, "Section (with parentheses)") == "Content here"
        assert extract_section(body, "Section [with brackets]") == "More content"

    def test_title_is_not_a_prefix_match(self) -> None:
        body = "### Section AB\nContent\n"
        assert extract_section(body, "Section A") == ""

    def test_deeper_heading_stays_inside_section(self) -> None:
        body = "### Parent\nintro\n#### Detail\nmore\n### Next\nother"
        assert extract_section(body, "Parent") == "intro\n#### Detail\nmore"

    def test_empty_section_returns_empty(self) -> None:
        body = "### Empty\n\n### Next\ncontent"
        assert extract_section(body, "Empty") == ""

    def test_empty_body(self) -> None:
        assert extract_section("", "Anything") == ""
