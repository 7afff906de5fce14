import pytest

from icg_compiler import (
    CompilationError,
    IntermediateCodeCompiler,
    format_postfix,
    format_quadruple_table,
    interactive_session,
    main,
)
from intermediate_code_structures import Quadruple


def test_format_postfix():
    assert format_postfix(["a", "b", "+"]) == "Reverse polish notation: ab+"


def test_format_quadruple_table():
    table = format_quadruple_table([Quadruple("+", "a", "b", "rslt1")]).splitlines()
    assert table[0].startswith("Quadruple table")
    assert table[2].split() == ["Operator", "Operand1", "Operand2", "Result"]
    assert table[3].split() == ["+", "a", "b", "rslt1"]


def test_compile_expression():
    compiler = IntermediateCodeCompiler()
    assert compiler.compile_expression("a+b*c")
    assert len(compiler.result.quadruples) == 2


def test_compile_expression_error_message():
    compiler = IntermediateCodeCompiler()
    with pytest.raises(CompilationError) as excinfo:
        compiler.compile_expression("a + #")
    message = str(excinfo.value)
    assert "ERROR DE SINTAXIS" in message
    assert "'#'" in message
    assert compiler.result is None


def test_structural_error_message():
    compiler = IntermediateCodeCompiler()
    with pytest.raises(CompilationError) as excinfo:
        compiler.compile_expression("a+")
    assert "ERROR ESTRUCTURAL" in str(excinfo.value)


def test_main_single_expression(capsys):
    assert main(["(a+b)*c"]) == 0
    out = capsys.readouterr().out
    assert "Reverse polish notation: ab+c*" in out
    assert "rslt2" in out


def test_main_joins_unquoted_arguments(capsys):
    assert main(["a", "+", "b"]) == 0
    assert "Reverse polish notation: ab+" in capsys.readouterr().out


def test_main_invalid_expression(capsys):
    assert main(["a+#"]) == 1
    out = capsys.readouterr().out
    assert "Reverse polish notation" not in out
    assert "Quadruple table" not in out


def test_main_show_tree(capsys):
    assert main(["a^b", "--tree"]) == 0
    assert "^ [rslt1]" in capsys.readouterr().out


def test_main_verbose(capsys):
    assert main(["a-b", "--verbose"]) == 0
    assert "[INFO]" in capsys.readouterr().out


def test_main_unknown_option(capsys):
    assert main(["--bogus"]) == 1


def test_main_file(tmp_path, capsys):
    source = tmp_path / "expresiones.txt"
    source.write_text("# comentario\na-b-c\n\n(a+b)*c\n", encoding="utf-8")
    assert main(["--file", str(source)]) == 0
    out = capsys.readouterr().out
    assert "ab-c-" in out
    assert "ab+c*" in out


def test_main_file_with_bad_line(tmp_path):
    source = tmp_path / "expresiones.txt"
    source.write_text("a+b\na+#\n", encoding="utf-8")
    assert main(["--file", str(source)]) == 1


def test_main_missing_file(tmp_path):
    assert main(["--file", str(tmp_path / "no_existe.txt")]) == 1


def test_interactive_session_retries_after_error(capsys):
    lines = iter(["a+#", "a*b", ""])
    compiler = IntermediateCodeCompiler()
    assert not interactive_session(compiler, read_line=lambda prompt: next(lines))
    out = capsys.readouterr().out
    assert "ERROR DE SINTAXIS" in out
    assert "Reverse polish notation: ab*" in out


def test_interactive_session_stops_on_eof():
    def read_line(prompt):
        raise EOFError

    assert interactive_session(IntermediateCodeCompiler(), read_line=read_line)
