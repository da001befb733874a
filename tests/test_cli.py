import pytest

from cli import build_parser, main


def test_prints_tree(make_tree, capsys):
	root = make_tree({"a.txt": "", "b": {"c.txt": ""}})
	assert main([str(root)]) == 0
	out = capsys.readouterr().out
	assert out == "root/\n├── b\n│   └── c.txt\n├── a.txt\n"


def test_short_flags(make_tree, capsys):
	root = make_tree({"src": {"main.rs": "fn main() {}\n", "notes.txt": "x"}, "lib": {}})
	assert main([str(root), "-of"]) == 0
	assert capsys.readouterr().out.splitlines() == ["root/", "├── lib", "├── src"]

	assert main([str(root), "-l", "-e", "rs"]) == 0
	out = capsys.readouterr().out
	assert "main.rs (1)" in out
	assert "notes.txt" not in out


def test_missing_path(tmp_path, capsys):
	missing = tmp_path / "nope"
	assert main([str(missing)]) == 1
	captured = capsys.readouterr()
	assert captured.out == ""
	assert captured.err.strip() == f"Error: Path '{missing}' does not exist"


def test_not_a_directory(tmp_path, capsys):
	f = tmp_path / "f.txt"
	f.write_text("x")
	assert main([str(f)]) == 1
	assert capsys.readouterr().err.strip() == f"Error: '{f}' is not a directory"


def test_unknown_mode_prints_nothing(make_tree, capsys):
	root = make_tree({"a.txt": ""})
	assert main([str(root), "-m", "sparkly"]) == 1
	captured = capsys.readouterr()
	assert captured.out == ""
	assert captured.err.startswith("Error: Unknown mode 'sparkly'")


def test_output_file(make_tree, tmp_path, capsys):
	root = make_tree({"a.py": "x = 1\n"})
	target = tmp_path / "out.txt"
	assert main([str(root), "-a", "-o", str(target)]) == 0
	assert capsys.readouterr().out == ""
	text = target.read_text(encoding="utf-8")
	assert text.startswith("root/\n├── a.py\n")
	assert "Code density: 100.0%" in text


def test_output_file_not_created_on_error(tmp_path):
	target = tmp_path / "out.txt"
	assert main([str(tmp_path / "nope"), "-o", str(target)]) == 1
	assert not target.exists()


def test_list_modes(capsys):
	assert main(["--list-modes"]) == 0
	assert capsys.readouterr().out.split() == ["ascii", "bold", "default", "rounded"]


def test_negative_depth_is_usage_error(tmp_path):
	with pytest.raises(SystemExit) as info:
		main([str(tmp_path), "-d", "-1"])
	assert info.value.code == 2


def test_parser_defaults():
	args = build_parser().parse_args([])
	assert args.path is None
	assert args.ignore == []
	assert not args.only_folders
