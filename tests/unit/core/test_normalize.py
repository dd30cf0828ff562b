"""Unit tests for whitespaced option normalization."""

import pytest

from execbridge.core.normalize import normalize_argument, normalize_arguments


class TestNormalizeArgument:
    """Tests for normalize_argument()."""

    def test_long_option_with_value(self):
        """Whitespace between a long option and its value becomes '='."""
        assert normalize_argument("--option true", "=") == "--option=true"

    def test_already_normalized_is_unchanged(self):
        """Normalizing an already normalized option is a no-op."""
        assert normalize_argument("--option=true", "=") == "--option=true"
        once = normalize_argument("--option true")
        assert normalize_argument(once) == once

    def test_positional_value_is_unchanged(self):
        """Arguments without a leading dash are never touched."""
        assert normalize_argument("positional-value", "=") == "positional-value"
        assert normalize_argument("some value with spaces") == "some value with spaces"

    def test_only_first_whitespace_run_is_replaced(self):
        """Later whitespace in the value is kept as-is."""
        assert normalize_argument("-v true extra", "=") == "-v=true extra"
        assert normalize_argument("--env  production  mode") == "--env=production  mode"

    def test_whitespace_run_collapses_to_single_replacement(self):
        """A run of mixed whitespace is replaced as one separator."""
        assert normalize_argument("--gruntfile \t Gruntfile.js") == "--gruntfile=Gruntfile.js"

    def test_option_name_with_hyphens_and_word_characters(self):
        """Option names may contain hyphens, digits and underscores."""
        assert normalize_argument("--max_old-space2 4096") == "--max_old-space2=4096"

    def test_whitespace_after_equals_is_unchanged(self):
        """A value that follows '=' is not an option/value pair to rewrite."""
        assert normalize_argument("--title=hello world") == "--title=hello world"

    def test_custom_replacement(self):
        """The replacement text is inserted literally."""
        assert normalize_argument("--option true", ":") == "--option:true"
        assert normalize_argument("--option true", "\\1") == "--option\\1true"

    def test_option_without_value_is_unchanged(self):
        """A bare flag has no whitespace to replace."""
        assert normalize_argument("--no-color") == "--no-color"
        assert normalize_argument("-v") == "-v"

    @pytest.mark.parametrize(
        "argument, expected",
        [
            ("- value", "-=value"),
            ("--- x y", "---=x y"),
            ("--option ", "--option="),
        ],
    )
    def test_heuristic_edge_cases(self, argument, expected):
        """Matching keeps the loose dash/name heuristic exactly."""
        assert normalize_argument(argument) == expected

    @pytest.mark.parametrize(
        "argument, expected",
        [
            ("--opt\xa0value", "--opt\xa0value"),
            ("--émoji value", "--émoji value"),
            ("--opt\u2003value", "--opt\u2003value"),
            ("--opt\tvalue", "--opt=value"),
        ],
    )
    def test_only_ascii_word_and_whitespace_characters_match(self, argument, expected):
        """Option names and separators are matched as ASCII only."""
        assert normalize_argument(argument) == expected


class TestNormalizeArguments:
    """Tests for normalize_arguments()."""

    def test_preserves_order(self):
        """Each argument is normalized in place."""
        result = normalize_arguments(["build", "--gruntfile Gruntfile.js", "-v true"])
        assert result == ["build", "--gruntfile=Gruntfile.js", "-v=true"]

    def test_empty(self):
        """No arguments yield no arguments."""
        assert normalize_arguments([]) == []
