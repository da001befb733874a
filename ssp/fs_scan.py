from __future__ import annotations

import fnmatch
import logging
import os
from pathlib import Path
from typing import Dict, Iterable, List, Optional

from .errors import UnreadableDirectory
from .model import Configuration, DirEntry, EntryKind


logger = logging.getLogger("ssp.fs_scan")

EXTENSION_LANGUAGE: Dict[str, str] = {
	".py": "python",
	".pyi": "python",
	".pyw": "python",
	".ts": "typescript",
	".tsx": "typescript",
	".js": "javascript",
	".jsx": "javascript",
	".mjs": "javascript",
	".cjs": "javascript",
	".java": "java",
	".kt": "kotlin",
	".kts": "kotlin",
	".scala": "scala",
	".swift": "swift",
	".cs": "csharp",
	".go": "go",
	".rs": "rust",
	".c": "c",
	".h": "c",
	".cpp": "cpp",
	".cc": "cpp",
	".cxx": "cpp",
	".hpp": "cpp",
	".hh": "cpp",
	".php": "php",
	".rb": "ruby",
	".sh": "shell",
	".bash": "shell",
	".zsh": "shell",
	".pl": "perl",
	".r": "r",
	".toml": "config",
	".yaml": "config",
	".yml": "config",
	".cfg": "config",
	".conf": "config",
	".ini": "ini",
	".asm": "assembly",
	".s": "assembly",
	".lisp": "lisp",
	".el": "lisp",
	".clj": "lisp",
	".scm": "lisp",
	".sql": "sql",
	".lua": "lua",
	".hs": "haskell",
	".md": "text",
	".txt": "text",
	".rst": "text",
	".json": "text",
	".csv": "text",
	".html": "markup",
	".xml": "markup",
	".css": "css",
}

GLOB_CHARS = ("*", "?", "[")


def detect_language(filename: str) -> str:
	_, ext = os.path.splitext(filename)
	return EXTENSION_LANGUAGE.get(ext.lower(), "unknown")


def is_ignored(name: str, ignore: Iterable[str]) -> bool:
	for pattern in ignore:
		if name == pattern:
			return True
		if any(ch in pattern for ch in GLOB_CHARS) and fnmatch.fnmatchcase(name, pattern):
			return True
	return False


def list_entries(directory: Path, depth: int, root: Optional[Path] = None) -> List[DirEntry]:
	"""Raw, unsorted children of `directory`, each tagged with `depth`.

	Entries whose type cannot be determined are left out. Symbolic links are
	never descended into: a link to a directory is a directory-kind entry
	flagged `is_symlink`, which the walker treats as a leaf.
	"""
	root = root or directory
	entries: List[DirEntry] = []
	try:
		with os.scandir(directory) as it:
			children = list(it)
	except OSError as exc:
		raise UnreadableDirectory(directory, exc.strerror or str(exc)) from exc

	for child in children:
		try:
			is_symlink = child.is_symlink()
			is_dir = child.is_dir()
		except OSError as exc:
			logger.debug("Skipping %s: %s", child.path, exc)
			continue
		path = Path(child.path)
		entries.append(
			DirEntry(
				name=child.name,
				path=path,
				rel_path=os.path.relpath(path, root),
				kind=EntryKind.DIRECTORY if is_dir else EntryKind.FILE,
				depth=depth,
				is_symlink=is_symlink,
			)
		)
	return entries


def sort_key(entry: DirEntry):
	return (not entry.is_dir, entry.name.lower(), entry.name)


def filter_and_sort(raw_entries: Iterable[DirEntry], config: Configuration) -> List[DirEntry]:
	kept: List[DirEntry] = []
	for entry in raw_entries:
		if is_ignored(entry.name, config.ignore):
			continue
		if not entry.is_dir:
			if config.only_folders:
				continue
			# "RS" does not match "rs".
			if config.extension is not None and entry.extension != config.extension:
				continue
		kept.append(entry)
	kept.sort(key=sort_key)
	return kept
