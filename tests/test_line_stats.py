from textwrap import dedent

import pytest

from ssp.errors import FileUnreadable
from ssp.line_stats import LineKind, analyze, analyze_file, analyze_text, classify_line, split_lines
from ssp.rules import rules_for


def test_empty_text_is_all_zero():
	result = analyze_text("", "python")
	assert (result.stats.total, result.stats.blank, result.stats.comment, result.stats.code) == (0, 0, 0, 0)


def test_trailing_unterminated_line_counts():
	assert split_lines("a\nb") == ["a", "b"]
	assert split_lines("a\nb\n") == ["a", "b"]
	assert split_lines("\n") == [""]
	assert analyze_text("a\nb").stats.total == 2


def test_python_lines_and_structure():
	code = dedent(
		'''\
		# comment
		import os

		def f(a: int) -> str:
		    """Doc."""
		    return str(a)

		class A:
		    flag: bool = True
		'''
	)
	result = analyze_text(code, "python")
	assert result.stats.total == 9
	assert result.stats.blank == 2
	assert result.stats.comment == 2
	assert result.stats.code == 5
	assert result.function_count == 1
	assert result.class_count == 1
	assert result.type_decls.get("int") == 1
	assert result.type_decls.get("string") == 1
	assert result.type_decls.get("bool") == 1


def test_c_block_comments():
	code = dedent(
		"""\
		/* header
		 * more
		 */
		int main(void) {
		    int x = 1; /* trailing */
		    return x;
		}
		"""
	)
	result = analyze_text(code, "c")
	assert result.stats.total == 7
	assert result.stats.comment == 3
	assert result.stats.code == 4
	assert result.function_count == 1
	assert result.type_decls.get("int") == 2


def test_code_after_block_close_is_code():
	rules = rules_for("c")
	kind, in_block = classify_line("*/ x = 1;", rules, True)
	assert kind is LineKind.CODE
	assert not in_block


def test_blank_inside_block_comment_is_blank():
	result = analyze_text("/*\n\n*/\n", "c")
	assert result.stats.blank == 1
	assert result.stats.comment == 2


def test_block_state_does_not_leak_between_files():
	analyze_text("/* never closed\n", "c")
	assert analyze_text("x = 1;\n", "c").stats.code == 1


def test_rust_heuristics():
	code = dedent(
		"""\
		// entry point
		pub struct Point { x: f64, y: f64 }

		pub fn main() {
		    let n: i32 = 5;
		    let ok: bool = true;
		}
		"""
	)
	result = analyze_text(code, "rust")
	assert result.stats.comment == 1
	assert result.function_count == 1
	assert result.class_count == 1
	assert result.type_decls.get("float") == 2
	assert result.type_decls.get("int") == 1
	assert result.type_decls.get("bool") == 1


def test_trailing_line_comment_keeps_code():
	result = analyze_text("x = 1  # note\n", "python")
	assert result.stats.code == 1
	assert result.stats.comment == 0


def test_unknown_language_uses_common_markers():
	result = analyze_text("; ini style\n// c style\n# shell style\nvalue\n", "unknown")
	assert result.stats.comment == 3
	assert result.stats.code == 1


def test_plain_text_has_no_comments():
	result = analyze_text("# Heading\n\nbody\n", "text")
	assert result.stats.comment == 0
	assert result.stats.code == 2


def test_lua_block_comment_wins_over_line_marker():
	result = analyze_text("--[[ start\nstill comment\n]]\nlocal x = 1\n", "lua")
	assert result.stats.comment == 3
	assert result.stats.code == 1


def test_counts_always_add_up():
	samples = ["", "\n\n", "/* a */ b\n", "  # x\n\t\n y", '"""\n\n"""']
	for text in samples:
		s = analyze_text(text, "python").stats
		assert s.blank + s.comment + s.code == s.total


def test_analyze_file_reads_and_detects_language(tmp_path):
	p = tmp_path / "m.py"
	p.write_text("def f():\n    return 1\n")
	result = analyze_file(p)
	assert result.language == "python"
	assert result.function_count == 1
	assert result.text is None
	assert analyze_file(p, keep_text=True).text == p.read_text()
	assert analyze(p).total == 2


def test_binary_file_counts_zero(tmp_path):
	p = tmp_path / "blob.bin"
	p.write_bytes(b"\x00\x01\x02\nabc")
	result = analyze_file(p)
	assert result.binary
	assert result.stats.total == 0


def test_non_utf8_file_counts_zero(tmp_path):
	p = tmp_path / "latin.txt"
	p.write_bytes(b"caf\xe9\n")
	assert analyze_file(p).binary


def test_missing_file_raises_file_unreadable(tmp_path):
	with pytest.raises(FileUnreadable):
		analyze_file(tmp_path / "gone.py")
