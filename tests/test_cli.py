# =============================================================================
# test_cli.py - Command-Line Driver Tests
# =============================================================================

import pytest
from click.testing import CliRunner

from rcc import __version__
from rcc.cli.errors import ExitCode, Fatal
from rcc.cli.rcc import main, validate_files
from rcc.options import LexerOptions


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def source_file(tmp_path):
    path = tmp_path / "main.c"
    path.write_text("int main() {\n    return 0;\n}\n")
    return path


class TestFatal:
    """Tests for the report-and-terminate helper."""

    def test_default_prefix(self):
        assert Fatal("boom").format(color=False) == "error: boom"

    def test_prefix_specifier(self):
        fatal = Fatal("boom").with_prefix_specifier("lexer")
        assert fatal.format(color=False) == "error(lexer): boom"

    def test_custom_prefix(self):
        fatal = Fatal("boom").with_prefix("warning")
        assert fatal.format(color=False) == "warning: boom"

    def test_styled_prefix(self):
        assert "\x1b[" in Fatal("boom").format()

    def test_exit(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            Fatal("boom").with_prefix_specifier("lexer").exit()
        assert exc_info.value.code == ExitCode.BUILD_ERROR
        assert "error(lexer):" in capsys.readouterr().err


class TestValidateFiles:
    """Tests for source file validation."""

    def test_valid_files(self, source_file):
        assert validate_files([str(source_file)]) == [source_file]

    def test_missing_file(self, tmp_path, capsys):
        with pytest.raises(SystemExit) as exc_info:
            validate_files([str(tmp_path / "nope.c")])
        assert exc_info.value.code == 1
        assert "No file found with the name" in capsys.readouterr().err

    def test_wrong_extension(self, tmp_path, capsys):
        path = tmp_path / "notes.txt"
        path.write_text("int x;")
        with pytest.raises(SystemExit):
            validate_files([str(path)])
        assert 'does not end with ".c"!' in capsys.readouterr().err

    def test_custom_extensions(self, tmp_path):
        path = tmp_path / "header.h"
        path.write_text("int x;")
        options = LexerOptions(source_extensions=(".c", ".h"))
        assert validate_files([str(path)], options) == [path]


class TestCLI:
    """Tests for the rcc command."""

    def test_help(self, runner):
        result = runner.invoke(main, ["--help"])
        assert result.exit_code == 0
        assert "A C compiler written in Python" in result.output

    def test_version(self, runner):
        result = runner.invoke(main, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_no_files(self, runner):
        result = runner.invoke(main, [])
        assert result.exit_code == 2

    def test_prints_tokens(self, runner, source_file):
        result = runner.invoke(main, [str(source_file)])
        assert result.exit_code == 0
        assert result.output.startswith("TOKENS: [Token(KEYWORD, int), Token(IDENTIFIER, 'main')")

    def test_only_first_file_is_lexed(self, runner, source_file, tmp_path):
        other = tmp_path / "other.c"
        other.write_text("@@@")
        result = runner.invoke(main, [str(source_file), str(other)])
        assert result.exit_code == 0
        assert "TOKENS:" in result.output

    def test_lexer_error(self, runner, tmp_path):
        path = tmp_path / "bad.c"
        path.write_text("@@@")
        result = runner.invoke(main, [str(path)])
        assert result.exit_code == ExitCode.BUILD_ERROR
        assert "error(lexer): invalid token encountered at line 1, column 0: @@@" in result.output

    def test_missing_file(self, runner, tmp_path):
        result = runner.invoke(main, [str(tmp_path / "missing.c")])
        assert result.exit_code == 1
        assert "No file found with the name" in result.output

    def test_encoding_error(self, runner, tmp_path):
        path = tmp_path / "latin1.c"
        path.write_bytes(b"int \xff;")
        result = runner.invoke(main, [str(path)])
        assert result.exit_code == ExitCode.BUILD_ERROR
        assert "error(lexer): could not read or write a file" in result.output

    def test_encoding_option(self, runner, tmp_path):
        path = tmp_path / "latin1.c"
        path.write_bytes(b'char *s = "\xe9";')
        result = runner.invoke(main, ["--encoding", "latin-1", str(path)])
        assert result.exit_code == 0
        assert "String('é')" in result.output
