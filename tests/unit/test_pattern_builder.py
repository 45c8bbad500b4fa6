"""
Unit tests for the pattern builder module.

Tests derivation of the file and directory patterns, the extension rule,
case-insensitivity and handling of regex syntax in queries.
"""

import pytest

from rsearch.errors import PatternCompilationError
from rsearch.tools.pattern_builder import (
    build_patterns,
    create_base_pattern,
    create_extension_pattern,
    has_extension,
)


class TestFilePattern:
    """Test cases for file pattern matching."""

    def setup_method(self):
        """Set up test fixtures."""
        self.patterns = build_patterns("vacation", ["jpg", "png"])

    def test_exact_name_with_extension(self):
        """Test that the query plus an allowed extension matches."""
        assert self.patterns.matches_file("vacation.jpg")
        assert self.patterns.matches_file("vacation.png")

    def test_case_insensitive(self):
        """Test that matching ignores case."""
        assert self.patterns.matches_file("Vacation.JPG")
        assert self.patterns.matches_file("VACATION.png")

    def test_extension_must_end_name(self):
        """Test that nothing may follow the allowed extension."""
        assert not self.patterns.matches_file("vacation.jpgx")
        assert not self.patterns.matches_file("vacation.jpg.bak")

    def test_disallowed_extension(self):
        """Test that other extensions do not match."""
        assert not self.patterns.matches_file("vacation.txt")
        assert not self.patterns.matches_file("vacation")

    def test_leading_characters(self):
        """Test the character class allowed before the query."""
        assert self.patterns.matches_file("old copy.vacation.jpg")
        assert self.patterns.matches_file("2020-vacation.jpg")
        assert not self.patterns.matches_file("my_vacation.jpg")

    def test_trailing_characters(self):
        """Test the character class allowed after the query."""
        assert self.patterns.matches_file("vacation-2020.jpg")
        assert self.patterns.matches_file("vacations.png")
        assert not self.patterns.matches_file("vacation 2020.jpg")
        assert not self.patterns.matches_file("vacation_2020.jpg")

    def test_repeated_extension(self):
        """Test that the extension alternation may repeat."""
        assert self.patterns.matches_file("vacation.jpgpng")

    def test_whole_name_must_match(self):
        """Test that a substring match is not enough."""
        assert not self.patterns.matches_file("vacation.jpg~")
        assert not self.patterns.matches_file("#vacation.jpg")


class TestDirectoryPattern:
    """Test cases for directory pattern matching."""

    def test_directory_ignores_extensions(self):
        """Test that directories are matched without an extension."""
        patterns = build_patterns("vacation", ["jpg"])

        assert patterns.matches_directory("vacation")
        assert patterns.matches_directory("2020 vacation")
        assert patterns.matches_directory("Vacation-Photos")

    def test_directory_trailing_dot_rejected(self):
        """Test that a dot after the query is not allowed."""
        patterns = build_patterns("vacation", ["jpg"])

        assert not patterns.matches_directory("vacation.jpg")
        assert not patterns.matches_directory("vacation.old")

    def test_directory_pattern_text(self):
        """Test that the directory pattern never carries an extension suffix."""
        patterns = build_patterns("vacation", ["jpg", "png"])

        assert patterns.directory_pattern.pattern == create_base_pattern("vacation")
        assert patterns.file_pattern.pattern.startswith(patterns.directory_pattern.pattern)


class TestExtensionRule:
    """Test cases for the extension suffix rule."""

    def test_query_with_allowed_extension(self):
        """Test that no suffix is appended when the query ends in an allowed extension."""
        patterns = build_patterns("notes.txt", ["txt", "pdf"])

        assert patterns.file_pattern.pattern == patterns.directory_pattern.pattern
        assert patterns.matches_file("notes.txt")

    def test_query_extension_check_is_case_insensitive(self):
        """Test the extension check against the query ignores case."""
        patterns = build_patterns("notes.TXT", ["txt"])

        assert patterns.file_pattern.pattern == patterns.directory_pattern.pattern

    def test_query_with_other_extension(self):
        """Test that a query ending in another extension still gets a suffix."""
        patterns = build_patterns("notes.txt", ["jpg"])

        assert not patterns.matches_file("notes.txt")
        assert patterns.matches_file("notes.txt.jpg")

    def test_no_extensions_disables_filtering(self):
        """Test that an empty extension set leaves the file pattern unconstrained."""
        patterns = build_patterns("vacation", [])

        assert patterns.file_pattern.pattern == patterns.directory_pattern.pattern
        assert patterns.matches_file("vacation")
        assert not patterns.matches_file("vacation.jpg")

    def test_create_extension_pattern(self):
        """Test extension suffix pattern creation."""
        assert create_extension_pattern([]) is None
        assert create_extension_pattern(["jpg", "png"]) == r"\.(?:jpg|png)+"

    def test_extensions_are_escaped(self):
        """Test that extensions are matched literally."""
        assert create_extension_pattern(["tar.gz"]) == r"\.(?:tar\.gz)+"

        patterns = build_patterns("backup", ["tar.gz"])
        assert patterns.matches_file("backup.tar.gz")
        assert not patterns.matches_file("backup.tarxgz")

    def test_has_extension(self):
        """Test detection of an allowed extension at the end of a name."""
        extension_pattern = create_extension_pattern(["jpg", "png"])

        assert has_extension("photo.jpg", extension_pattern)
        assert has_extension("photo.PNG", extension_pattern)
        assert not has_extension("photo.jpg.txt", extension_pattern)
        assert not has_extension("photojpg", extension_pattern)


class TestQuerySyntax:
    """Test cases for regex syntax and edge-case queries."""

    def test_empty_query(self):
        """Test that an empty query matches on character classes alone."""
        patterns = build_patterns("", ["jpg"])

        assert patterns.matches_file("anything.jpg")
        assert patterns.matches_file("with spaces.jpg")
        assert not patterns.matches_file("under_score.jpg")
        assert patterns.matches_directory("any-dir")

    def test_metacharacters_are_interpreted(self):
        """Test that regex syntax in the query keeps its meaning."""
        patterns = build_patterns("vac.tion", [])

        assert patterns.matches_file("vacation")
        assert patterns.matches_file("vac.tion")

    def test_alternation_is_grouped(self):
        """Test that an alternation in the query stays inside its group."""
        patterns = build_patterns("cat|dog", ["jpg"])

        assert patterns.matches_file("cat.jpg")
        assert patterns.matches_file("dog.jpg")
        assert not patterns.matches_file("dog")

    def test_escaped_query(self):
        """Test that escaped mode matches the query literally."""
        patterns = build_patterns("vac.tion", [], escape=True)

        assert patterns.matches_file("vac.tion")
        assert not patterns.matches_file("vacation")

    def test_invalid_query(self):
        """Test that an invalid regex raises PatternCompilationError."""
        with pytest.raises(PatternCompilationError) as exc_info:
            build_patterns("file(", ["jpg"])

        assert "file(" in exc_info.value.pattern
        assert exc_info.value.reason

    def test_invalid_query_escaped(self):
        """Test that escaped mode accepts any query."""
        patterns = build_patterns("file(", [], escape=True)

        assert patterns.matches_file("file(")
