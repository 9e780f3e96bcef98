"""
Unit tests for test-case file parsing.
"""

import logging

import pytest

from nn_infer.data.test_cases import (
    TestCase,
    load_test_cases,
    parse_float_list,
    parse_line,
    parse_test_cases
)


class TestParseFloatList:
    """Test comma-separated float parsing."""

    def test_basic(self):
        assert parse_float_list("1.0,2.5,-3") == (1.0, 2.5, -3.0)

    def test_whitespace_and_empty_tokens(self):
        assert parse_float_list(" 1.0 , 2.0,, 3.0 ,") == (1.0, 2.0, 3.0)

    def test_empty(self):
        assert parse_float_list("   ") == ()

    def test_invalid_token(self):
        with pytest.raises(ValueError):
            parse_float_list("1.0,abc")


class TestParseLine:
    """Test single-line parsing in both formats."""

    def test_three_field_format(self):
        case = parse_line("1.0,2.0,-0.5 | 0.5,0.3,0.2,0.1 | 1.1", 7)

        assert case.input == (1.0, 2.0, -0.5)
        assert case.parameters == (0.5, 0.3, 0.2, 0.1)
        assert case.expected_output == (1.1,)
        assert case.line_number == 7
        assert case.description == "Line 7"
        assert case.has_parameters

    def test_two_field_format(self):
        case = parse_line("0.6, -0.4 -> 0.3, 0.2, 0.5", 2)

        assert case.input == (0.6, -0.4)
        assert case.parameters == ()
        assert case.expected_output == (0.3, 0.2, 0.5)
        assert not case.has_parameters

    def test_negative_numbers_with_arrow(self):
        case = parse_line("-1.0,-2.0->-3.0")
        assert case.input == (-1.0, -2.0)
        assert case.expected_output == (-3.0,)

    @pytest.mark.parametrize("line, message", [
        ("1.0,2.0 3.0", "separator"),
        ("1.0 | 2.0", "Expected 3 fields"),
        ("1.0 | 2.0 | 3.0 | 4.0", "Expected 3 fields"),
        ("1.0,x | 2.0 | 3.0", "Invalid input"),
        (" -> 1.0", "Empty input"),
        ("1.0 -> ", "Empty output"),
        ("1.0 |  | 3.0", "Empty parameters"),
    ])
    def test_malformed(self, line, message):
        with pytest.raises(ValueError, match=message):
            parse_line(line)


class TestParseTestCases:
    """Test multi-line parsing with comments and malformed lines."""

    def test_skips_comments_and_blank_lines(self):
        lines = [
            "# header comment",
            "",
            "   ",
            "1.0 -> 2.0",
            "  # indented comment",
            "3.0 -> 4.0",
        ]

        cases = parse_test_cases(lines)

        assert [c.input for c in cases] == [(1.0,), (3.0,)]
        assert [c.line_number for c in cases] == [4, 6]

    def test_malformed_line_is_skipped_not_fatal(self, caplog):
        lines = [
            "1.0 -> 2.0",
            "this is not a test case",
            "1.0,bad | 2.0 | 3.0",
            "5.0 -> 6.0",
        ]

        with caplog.at_level(logging.WARNING, logger="nn_infer.data.test_cases"):
            cases = parse_test_cases(lines, source="cases.txt")

        assert [c.expected_output for c in cases] == [(2.0,), (6.0,)]
        assert "Error parsing line 2 in cases.txt" in caplog.text
        assert "Error parsing line 3 in cases.txt" in caplog.text

    def test_mixed_formats(self):
        cases = parse_test_cases(["1 | 2,3 | 4", "5 -> 6"])
        assert cases[0].has_parameters
        assert not cases[1].has_parameters


class TestLoadTestCases:
    """Test loading from files."""

    def test_load_file(self, tmp_path, caplog):
        path = tmp_path / "cases.txt"
        path.write_text(
            "# Linear regression cases\n"
            "1.0,2.0 | 1.0,1.0,0.0 | 3.0\n"
            "\n"
            "broken line\n"
            "2.0,2.0 | 1.0,1.0,1.0 | 5.0\n"
        )

        with caplog.at_level(logging.INFO, logger="nn_infer.data.test_cases"):
            cases = load_test_cases(path)

        assert len(cases) == 2
        assert cases[1] == TestCase(
            input=(2.0, 2.0),
            parameters=(1.0, 1.0, 1.0),
            expected_output=(5.0,),
            line_number=5
        )
        assert "Loaded 2 test cases" in caplog.text
        assert "Error parsing line 4" in caplog.text

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_test_cases(tmp_path / "missing.txt")

    def test_repository_data_files(self, data_dir):
        for name in [
            "linear_regression_demo.txt",
            "logistic_regression_demo.txt",
            "multi_class_demo.txt",
            "two_layer_mlp_demo.txt",
            "linear_arrow_demo.txt",
        ]:
            assert load_test_cases(data_dir / name), name
