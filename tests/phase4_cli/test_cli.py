"""
Phase 4 Tests: CLI

Tests for the CLI commands including:
- Main CLI group
- search command
- bench command
- algorithms command
"""

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from subsearch.cli.main import cli
from subsearch.constants import PATHOLOGICAL_TEXT_SIZE


@pytest.fixture
def runner():
    """Create a CLI test runner."""
    return CliRunner()


@pytest.fixture
def corpus(tmp_path: Path) -> Path:
    """A small text file to search."""
    path = tmp_path / "corpus.txt"
    path.write_text("ABABABABAC and then ABABAC again\n", encoding="utf-8")
    return path


@pytest.fixture
def utf8_corpus(tmp_path: Path) -> Path:
    """A UTF-8 file with characters beyond the 256-symbol alphabet."""
    path = tmp_path / "utf8.txt"
    path.write_text("café — needle here\n", encoding="utf-8")
    return path


class TestCLIGroup:
    """Tests for main CLI group."""

    def test_cli_help(self, runner):
        """CLI shows help."""
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "Substring Search Algorithms" in result.output

    def test_cli_version(self, runner):
        """CLI shows version."""
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert "subsearch v" in result.output

    def test_cli_no_command(self, runner):
        """CLI shows help when no command."""
        result = runner.invoke(cli)
        assert result.exit_code == 0
        assert "Usage:" in result.output


class TestSearchCommand:
    """Tests for search command."""

    def test_first_match(self, runner, corpus):
        """Prints the first match index."""
        result = runner.invoke(cli, ["search", "ABABAC", str(corpus)])
        assert result.exit_code == 0
        assert result.output.strip() == "4"

    def test_all_matches(self, runner, corpus):
        """--all prints every index."""
        result = runner.invoke(cli, ["search", "ABABAC", str(corpus), "--all"])
        assert result.exit_code == 0
        assert result.output.split() == ["4", "20"]

    @pytest.mark.parametrize("algorithm", ["kmp", "kmp-dfa", "z", "rabin-karp", "bad-character", "naive"])
    def test_algorithm_option(self, runner, corpus, algorithm):
        """Every algorithm gives the same answer."""
        result = runner.invoke(cli, ["search", "ABABAC", str(corpus), "-a", algorithm])
        assert result.exit_code == 0
        assert result.output.strip() == "4"

    def test_json_output(self, runner, corpus):
        """--json prints a result object."""
        result = runner.invoke(cli, ["search", "ABABAC", str(corpus), "--all", "--json"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data == {"pattern": "ABABAC", "algorithm": "boyer-moore", "positions": [4, 20]}

    def test_not_found_exit_code(self, runner, corpus):
        """Exit status 1 when the pattern is absent."""
        result = runner.invoke(cli, ["search", "XYZ", str(corpus)])
        assert result.exit_code == 1
        assert "not found" in result.output.lower()

    def test_reads_stdin(self, runner):
        """Omitting SOURCE reads standard input."""
        result = runner.invoke(cli, ["search", "needle"], input="haystack needle\n")
        assert result.exit_code == 0
        assert result.output.strip() == "9"

    def test_binary_mode(self, runner, tmp_path):
        """--binary searches raw bytes."""
        path = tmp_path / "data.bin"
        path.write_bytes(b"\xff\xfe\x00needle")
        result = runner.invoke(cli, ["search", "needle", str(path), "--binary"])
        assert result.exit_code == 0
        assert result.output.strip() == "3"

    def test_unicode_alphabet(self, runner, tmp_path):
        """--alphabet unicode handles characters beyond 256."""
        path = tmp_path / "jp.txt"
        path.write_text("こんにちは日本語", encoding="utf-8")
        result = runner.invoke(cli, ["search", "日本", str(path), "--alphabet", "unicode"])
        assert result.exit_code == 0
        assert result.output.strip() == "5"

    @pytest.mark.parametrize("algorithm", ["boyer-moore", "bad-character", "rabin-karp"])
    def test_utf8_text_without_alphabet(self, runner, utf8_corpus, algorithm):
        """Decoded text is searched with sparse tables by default."""
        result = runner.invoke(cli, ["search", "needle", str(utf8_corpus), "-a", algorithm])
        assert result.exit_code == 0
        assert result.output.strip() == "7"

    def test_utf8_pattern_without_alphabet(self, runner, utf8_corpus):
        """Patterns beyond 256 need no --alphabet in text mode."""
        result = runner.invoke(cli, ["search", "—", str(utf8_corpus)])
        assert result.exit_code == 0
        assert result.output.strip() == "5"

    def test_symbol_outside_alphabet(self, runner, tmp_path):
        """A pattern outside an explicit alphabet exits with status 2."""
        path = tmp_path / "jp.txt"
        path.write_text("日本", encoding="utf-8")
        result = runner.invoke(cli, ["search", "日本", str(path), "--alphabet", "256"])
        assert result.exit_code == 2
        assert "outside the alphabet" in result.output

    def test_environment_alphabet_applies(self, runner, utf8_corpus, monkeypatch):
        """SUBSEARCH_ALPHABET_SIZE still bounds the alphabet in text mode."""
        monkeypatch.setenv("SUBSEARCH_ALPHABET_SIZE", "256")
        result = runner.invoke(cli, ["search", "—", str(utf8_corpus)])
        assert result.exit_code == 2
        assert "outside the alphabet" in result.output

    def test_bad_alphabet_value(self, runner, corpus):
        """--alphabet must be an integer or 'unicode'."""
        result = runner.invoke(cli, ["search", "A", str(corpus), "--alphabet", "many"])
        assert result.exit_code == 2

    def test_missing_file(self, runner, tmp_path):
        """Unreadable source exits with status 2."""
        result = runner.invoke(cli, ["search", "A", str(tmp_path / "missing.txt")])
        assert result.exit_code == 2
        assert "Cannot read search text" in result.output


class TestBenchCommand:
    """Tests for bench command."""

    def test_bench_file(self, runner, corpus):
        """Times every algorithm against the built-in find."""
        result = runner.invoke(cli, ["bench", str(corpus), "-p", "ABABAC", "-p", "XYZ"])
        assert result.exit_code == 0
        assert "built-in find" in result.output
        assert "using boyer-moore" in result.output
        assert "using rabin-karp" in result.output
        assert result.output.count("Results = [4, -1]") == 8

    def test_bench_selected_algorithm(self, runner, corpus):
        """-a restricts the algorithms timed."""
        result = runner.invoke(cli, ["bench", str(corpus), "-p", "ABABAC", "-a", "kmp", "-r", "3"])
        assert result.exit_code == 0
        assert "using kmp" in result.output
        assert "using boyer-moore" not in result.output
        assert "Searching 3 time(s)" in result.output

    def test_bench_pathological(self, runner):
        """--pathological builds the run-of-A input."""
        result = runner.invoke(cli, ["bench", "--pathological", "1000", "-a", "boyer-moore"])
        assert result.exit_code == 0
        assert "Search text size = 1001" in result.output
        assert result.output.count("Results = [948]") == 2

    def test_bench_utf8_file(self, runner, utf8_corpus):
        """Table-driven algorithms run on UTF-8 text without --alphabet."""
        result = runner.invoke(cli, ["bench", str(utf8_corpus), "-p", "needle"])
        assert result.exit_code == 0
        assert result.output.count("Results = [7]") == 7
        # the dense DFA is the one algorithm limited to 256 symbols
        assert result.output.count("Skipped") == 1
        assert "using kmp-dfa\nSkipped" in result.output

    @pytest.mark.slow
    def test_bench_pathological_default_size(self, runner):
        """--pathological without N uses the full-size input."""
        result = runner.invoke(cli, ["bench", "--pathological", "-a", "boyer-moore"])
        assert result.exit_code == 0
        assert f"Search text size = {PATHOLOGICAL_TEXT_SIZE + 1}" in result.output
        assert result.output.count(f"Results = [{PATHOLOGICAL_TEXT_SIZE - 52}]") == 2

    def test_bench_skips_incompatible_algorithm(self, runner):
        """The dense DFA is skipped with an unbounded alphabet."""
        result = runner.invoke(
            cli,
            ["bench", "--pathological", "100", "-a", "kmp-dfa", "--alphabet", "unicode"],
        )
        assert result.exit_code == 0
        assert "Skipped" in result.output

    def test_bench_requires_source(self, runner):
        """Without SOURCE or --pathological the command is misused."""
        result = runner.invoke(cli, ["bench"])
        assert result.exit_code == 2


class TestAlgorithmsCommand:
    """Tests for algorithms command."""

    def test_lists_algorithms(self, runner):
        """Every algorithm is listed, default marked."""
        result = runner.invoke(cli, ["algorithms"])
        assert result.exit_code == 0
        assert "boyer-moore (default)" in result.output
        for name in ("bad-character", "kmp", "kmp-dfa", "z", "rabin-karp", "naive"):
            assert f"{name}:" in result.output
