from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any, Dict, Iterable, Mapping, Optional, Tuple, Union

from pydantic import BaseModel, Field, ValidationError

from .errors import ModeFileError
from .model import Configuration, SymbolSet
from .symbols import BUILTIN_MODES, DEFAULT_MODE, build_mode_table, resolve_mode


DEFAULT_IGNORES = frozenset({".git", "node_modules", "__pycache__", "target", ".idea", ".vscode"})

SYMBOL_KEYS = ("vertical", "tee", "elbow", "indent")


class ModeFile(BaseModel):
	"""Mode definitions loaded from a TOML file."""

	modes: Dict[str, SymbolSet] = Field(default_factory=dict)
	default_mode: Optional[str] = None


def parse_modes(data: Mapping[str, Any], source: Union[str, Path] = "<modes>") -> ModeFile:
	default_mode = data.get("default_mode")
	if default_mode is not None and not isinstance(default_mode, str):
		raise ModeFileError(source, "default_mode must be a string")

	raw_modes = data.get("modes", {})
	if not isinstance(raw_modes, dict):
		raise ModeFileError(source, "[modes] must be a table")

	base = BUILTIN_MODES[DEFAULT_MODE].model_dump()
	modes: Dict[str, SymbolSet] = {}
	for name, fields in raw_modes.items():
		if not isinstance(fields, dict):
			raise ModeFileError(source, f"mode '{name}' must be a table")
		unknown = set(fields) - set(SYMBOL_KEYS)
		if unknown:
			raise ModeFileError(source, f"mode '{name}' has unknown keys: {', '.join(sorted(unknown))}")
		try:
			modes[name] = SymbolSet(**{**base, **fields})
		except ValidationError as exc:
			raise ModeFileError(source, f"mode '{name}': {exc.errors()[0]['msg']}") from exc
	return ModeFile(modes=modes, default_mode=default_mode)


def load_mode_file(path: Union[str, Path]) -> ModeFile:
	path = Path(path)
	try:
		with path.open("rb") as fh:
			data = tomllib.load(fh)
	except OSError as exc:
		raise ModeFileError(path, exc.strerror or str(exc)) from exc
	except tomllib.TOMLDecodeError as exc:
		raise ModeFileError(path, str(exc)) from exc
	return parse_modes(data, path)


def resolve_ignores(extra: Iterable[str] = (), clear_defaults: bool = False) -> frozenset:
	base = frozenset() if clear_defaults else DEFAULT_IGNORES
	return base | frozenset(extra)


def make_config(
	root: Union[str, Path, None] = None,
	*,
	ignore: Iterable[str] = (),
	clear_default_ignores: bool = False,
	extension: Optional[str] = None,
	max_depth: Optional[int] = None,
	only_folders: bool = False,
	show_lines: bool = False,
	show_code: bool = False,
	analyze: bool = False,
	mode: Optional[str] = None,
	modes: Optional[ModeFile] = None,
	sink: Any = None,
) -> Configuration:
	"""Build the immutable run configuration.

	The display mode is resolved here, so an unknown mode name raises
	UnknownMode before anything is traversed or written.
	"""
	table = build_mode_table(modes.modes if modes is not None else None)
	if mode is None and modes is not None:
		mode = modes.default_mode
	symbols = resolve_mode(mode, table)

	return Configuration(
		root=Path(root) if root is not None else Path(os.getcwd()),
		ignore=resolve_ignores(ignore, clear_default_ignores),
		extension=extension,
		max_depth=max_depth,
		only_folders=only_folders,
		show_lines=show_lines,
		show_code=show_code,
		analyze=analyze,
		symbols=symbols,
		sink=sink,
	)


def available_modes(modes: Optional[ModeFile] = None) -> Tuple[str, ...]:
	return tuple(sorted(build_mode_table(modes.modes if modes is not None else None)))
