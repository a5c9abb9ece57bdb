"""Tests for wordlist line streaming and counting."""

import os
import pytest
from shared.exceptions import LineCountError
from scanner.infrastructure.line_streamer import (
    lines_from_files,
    numbered_lines_from_files,
    count_lines,
    count_lines_result,
)


class TestLinesFromFiles:
    """Tests for multi-file line streaming."""
    
    def test_single_file_in_order(self, make_wordlist):
        """Test that lines come back in file order without terminators."""
        path = make_wordlist(lines=["alpha", "beta", "gamma"])
        assert list(lines_from_files([path])) == ["alpha", "beta", "gamma"]
    
    def test_concatenates_files_in_order(self, make_wordlist):
        """Test that files are streamed one after another."""
        first = make_wordlist("a.txt", lines=["1", "2"])
        second = make_wordlist("b.txt", lines=["3"])
        assert list(lines_from_files([second, first])) == ["3", "1", "2"]
    
    def test_skips_missing_file(self, make_wordlist, missing_path):
        """Test that an unopenable file is skipped, not raised."""
        path = make_wordlist(lines=["kept"])
        assert list(lines_from_files([missing_path, path, missing_path])) == ["kept"]
    
    def test_skips_directory(self, make_wordlist, tmp_path):
        """Test that a directory path is skipped like a missing file."""
        path = make_wordlist(lines=["kept"])
        assert list(lines_from_files([str(tmp_path), path])) == ["kept"]
    
    def test_all_missing_yields_nothing(self, missing_path):
        """Test that only missing files produce an empty stream."""
        assert list(lines_from_files([missing_path])) == []
    
    def test_strips_crlf(self, make_wordlist):
        """Test that Windows line endings are stripped."""
        path = make_wordlist(raw=b"one\r\ntwo\r\n")
        assert list(lines_from_files([path])) == ["one", "two"]
    
    def test_keeps_inner_whitespace_and_bare_cr(self, make_wordlist):
        """Test that lines are verbatim apart from the terminator."""
        path = make_wordlist(raw=b"  spaced  \na\rb\n")
        assert list(lines_from_files([path])) == ["  spaced  ", "a\rb"]
    
    def test_last_line_without_newline(self, make_wordlist):
        """Test that a final unterminated line is still yielded."""
        path = make_wordlist(raw=b"first\nlast")
        assert list(lines_from_files([path])) == ["first", "last"]
    
    def test_empty_lines_preserved(self, make_wordlist):
        """Test that blank lines are yielded as empty strings."""
        path = make_wordlist(raw=b"a\n\nb\n")
        assert list(lines_from_files([path])) == ["a", "", "b"]
    
    def test_undecodable_bytes_survive(self, make_wordlist):
        """Test that invalid UTF-8 round-trips back to the original bytes."""
        path = make_wordlist(raw=b"caf\xe9\n")
        (line,) = list(lines_from_files([path]))
        assert line.encode("utf-8", "surrogateescape") == b"caf\xe9"
    
    def test_opens_file_on_first_read(self, missing_path):
        """Test that a file created after the stream is built is still read."""
        stream = lines_from_files([missing_path])
        with open(missing_path, "w", encoding="utf-8") as f:
            f.write("late\n")
        assert list(stream) == ["late"]

    def test_single_pass_after_delete(self, make_wordlist):
        """Test that deleting a file mid-stream ends cleanly without reopening it."""
        path = make_wordlist(lines=["first", "second"])
        stream = lines_from_files([path])

        assert next(stream) == "first"
        os.remove(path)

        assert list(stream) == ["second"]
        assert list(stream) == []
    
    def test_numbered_lines_carry_source(self, make_wordlist):
        """Test that numbered lines report path and 1-based line number."""
        first = make_wordlist("a.txt", lines=["x", "y"])
        second = make_wordlist("b.txt", lines=["z"])
        refs = list(numbered_lines_from_files([first, second]))
        
        assert [(r.path, r.line_number, r.text) for r in refs] == [
            (first, 1, "x"),
            (first, 2, "y"),
            (second, 1, "z"),
        ]


class TestCountLines:
    """Tests for strict single-file line counting."""
    
    def test_empty_file(self, make_wordlist):
        """Test that an empty file has zero lines."""
        path = make_wordlist(raw=b"")
        assert count_lines(path) == 0
    
    def test_counts_lines(self, make_wordlist):
        """Test counting a terminated file."""
        path = make_wordlist(lines=["a", "b", "c"])
        assert count_lines(path) == 3
    
    def test_counts_unterminated_last_line(self, make_wordlist):
        """Test that a final line without newline counts."""
        path = make_wordlist(raw=b"a\nb")
        assert count_lines(path) == 2
    
    def test_missing_file_raises(self, missing_path):
        """Test that a missing file is an explicit error."""
        with pytest.raises(LineCountError, match="Cannot count lines"):
            count_lines(missing_path)
    
    def test_result_form_success(self, make_wordlist):
        """Test the (count, error) form on a readable file."""
        path = make_wordlist(raw=b"")
        result = count_lines_result(path)
        assert result.count == 0
        assert result.error is None
    
    def test_result_form_error(self, missing_path):
        """Test the (count, error) form on a missing file."""
        result = count_lines_result(missing_path)
        assert result.count == 0
        assert result.error is not None
        assert missing_path in result.error
