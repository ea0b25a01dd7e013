"""parse_checkboxesのユニットテスト。"""

from prcheck.parsers.checkboxes import parse_checkboxes


class TestParseCheckboxes:
    def test_parses_flat_list(self) -> None:
        content = "\n- [ ] Item 1\n- [x] Item 2\n- [ ] Item 3"
        nodes = parse_checkboxes(content)
        assert [n.text for n in nodes] == ["Item 1", "Item 2", "Item 3"]
        assert [n.checked for n in nodes] == [False, True, False]

    def test_uppercase_x_is_checked(self) -> None:
        nodes = parse_checkboxes("- [X] Done")
        assert nodes[0].checked is True

    def test_records_raw_indentation(self) -> None:
        content = (
            "- [x] Level 1\n"
            "    - [x] Level 2\n"
            "        - [x] Level 3\n"
            "    - [x] Level 2 again\n"
            "- [x] Another Level 1"
        )
        nodes = parse_checkboxes(content)
        assert len(nodes) == 5
        assert [n.indentation for n in nodes] == [0, 4, 8, 4, 0]

    def test_indentation_is_not_normalized(self) -> None:
        nodes = parse_checkboxes("- [x] A\n  - [ ] B\n\t- [ ] C")
        assert [n.indentation for n in nodes] == [0, 2, 1]

    def test_skips_non_checkbox_lines(self) -> None:
        content = "Intro text\n- plain bullet\n- [x] Real item\n* [x] star bullet\n-[x] no space\n- [y] wrong mark"
        nodes = parse_checkboxes(content)
        assert [n.text for n in nodes] == ["Real item"]

    def test_strips_label_and_carriage_return(self) -> None:
        nodes = parse_checkboxes("- [ ] Item with spaces   \r\n- [x] Next\r")
        assert [n.text for n in nodes] == ["Item with spaces", "Next"]

    def test_empty_content(self) -> None:
        assert parse_checkboxes("") == []

    def test_parsing_is_deterministic(self) -> None:
        content = "- [x] A\n    - [ ] B\n- [ ] C"
        assert parse_checkboxes(content) == parse_checkboxes(content)
