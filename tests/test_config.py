from pathlib import Path

import pytest
from pydantic import ValidationError

from ssp.config import DEFAULT_IGNORES, ModeFile, available_modes, load_mode_file, make_config, parse_modes
from ssp.errors import ModeFileError, UnknownMode
from ssp.symbols import BUILTIN_MODES, build_mode_table, resolve_mode


def test_ignores_union_with_defaults(tmp_path):
	config = make_config(tmp_path, ignore=["dist"])
	assert config.ignore == DEFAULT_IGNORES | {"dist"}


def test_ignores_can_be_cleared(tmp_path):
	config = make_config(tmp_path, ignore=["dist"], clear_default_ignores=True)
	assert config.ignore == frozenset({"dist"})


def test_root_defaults_to_cwd(tmp_path, monkeypatch):
	monkeypatch.chdir(tmp_path)
	assert make_config().root.resolve() == tmp_path.resolve()


def test_configuration_is_frozen(tmp_path):
	config = make_config(tmp_path)
	with pytest.raises(ValidationError):
		config.show_lines = True


def test_negative_depth_rejected(tmp_path):
	with pytest.raises(ValidationError):
		make_config(tmp_path, max_depth=-1)


def test_unknown_mode_fails_before_traversal(tmp_path):
	with pytest.raises(UnknownMode) as info:
		make_config(tmp_path / "does-not-matter", mode="sparkly")
	assert info.value.mode == "sparkly"
	assert "default" in info.value.available


def test_resolve_mode_defaults():
	assert resolve_mode(None) == BUILTIN_MODES["default"]
	assert resolve_mode("ascii").elbow == "`--"


def test_override_table_keeps_builtins():
	custom = BUILTIN_MODES["ascii"].model_copy(update={"tee": "+--"})
	table = build_mode_table({"ascii": custom, "mine": custom})
	assert table["ascii"].tee == "+--"
	assert "bold" in table
	with pytest.raises(TypeError):
		table["other"] = custom


def test_blank_padding_matches_vertical_width():
	symbols = BUILTIN_MODES["default"].model_copy(update={"vertical": "│ ", "indent": "    "})
	assert symbols.blank == "  "


def test_load_mode_file(tmp_path):
	path = tmp_path / "modes.toml"
	path.write_text(
		'default_mode = "plus"\n'
		"\n"
		"[modes.plus]\n"
		'vertical = "|   "\n'
		'tee = "+--"\n'
		'elbow = "\\\\--"\n',
		encoding="utf-8",
	)
	modes = load_mode_file(path)
	assert modes.default_mode == "plus"
	assert modes.modes["plus"].elbow == "\\--"
	assert modes.modes["plus"].indent == "    "

	config = make_config(tmp_path, modes=modes)
	assert config.symbols.tee == "+--"
	assert make_config(tmp_path, modes=modes, mode="bold").symbols.tee == "┣━━"
	assert "plus" in available_modes(modes)


def test_mode_file_errors(tmp_path):
	bad = tmp_path / "bad.toml"
	bad.write_text("modes = [", encoding="utf-8")
	with pytest.raises(ModeFileError):
		load_mode_file(bad)
	with pytest.raises(ModeFileError):
		load_mode_file(tmp_path / "missing.toml")
	with pytest.raises(ModeFileError):
		parse_modes({"modes": {"x": {"colour": "red"}}})
	with pytest.raises(ModeFileError):
		parse_modes({"modes": {"x": {"tee": 3}}})
	with pytest.raises(ModeFileError):
		parse_modes({"default_mode": 1})


def test_mode_file_default_must_exist(tmp_path):
	modes = parse_modes({"default_mode": "nope"})
	with pytest.raises(UnknownMode):
		make_config(tmp_path, modes=modes)


def test_mode_file_is_a_model():
	modes = parse_modes({"default_mode": "plain", "modes": {"plain": {"tee": "+--"}}})
	assert isinstance(modes, ModeFile)
	dumped = modes.model_dump()
	assert dumped["default_mode"] == "plain"
	assert dumped["modes"]["plain"]["tee"] == "+--"
	assert ModeFile().modes == {}
