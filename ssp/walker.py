from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Callable, List, Optional, Tuple, Union

from .errors import FileUnreadable, NotADirectory, PathNotFound, UnreadableDirectory
from .fs_scan import filter_and_sort, list_entries
from .line_stats import analyze_file
from .model import Configuration, DirEntry, ExtensionAggregate, RenderRecord, TraversalWarning


logger = logging.getLogger("ssp.walker")

Emit = Callable[[RenderRecord], None]


def check_root(path: Union[str, Path]) -> Path:
	path = Path(path)
	# A dangling symlink exists but is not a directory.
	if not path.exists() and not path.is_symlink():
		raise PathNotFound(path)
	if not path.is_dir():
		raise NotADirectory(path)
	return path


def _children(
	directory: Path,
	depth: int,
	root: Path,
	config: Configuration,
	warnings: List[TraversalWarning],
) -> List[Tuple[DirEntry, bool]]:
	try:
		raw = list_entries(directory, depth, root)
	except UnreadableDirectory as exc:
		logger.warning("%s; skipping subtree", exc)
		warnings.append(TraversalWarning(path=os.path.relpath(directory, root), message=str(exc)))
		return []
	entries = filter_and_sort(raw, config)
	return [(entry, i == len(entries) - 1) for i, entry in enumerate(entries)]


def _can_expand(entry: DirEntry, config: Configuration) -> bool:
	if not entry.is_dir or entry.is_symlink:
		return False
	return config.max_depth is None or entry.depth < config.max_depth


def walk(
	path: Union[str, Path],
	depth: int,
	config: Configuration,
	emit: Emit,
	aggregate: Optional[ExtensionAggregate] = None,
) -> List[TraversalWarning]:
	"""Pre-order traversal of `path`, emitting one RenderRecord per kept entry.

	`depth` is the depth of `path` itself; its children are `depth + 1`.
	A work-list is used instead of recursion so deep trees cannot exhaust the
	call stack. Unreadable directories and files are logged, reported in the
	returned warning list, and skipped.
	"""
	root = check_root(path)
	warnings: List[TraversalWarning] = []

	if config.max_depth is not None and depth >= config.max_depth:
		return warnings

	stack = list(reversed(_children(root, depth + 1, root, config, warnings)))
	while stack:
		entry, is_last = stack.pop()
		analysis = None

		if not entry.is_dir and config.needs_file_read and entry.path.is_file():
			try:
				analysis = analyze_file(entry.path, keep_text=config.show_code)
			except FileUnreadable as exc:
				logger.warning("%s; skipping", exc)
				warnings.append(TraversalWarning(path=entry.rel_path, message=str(exc)))
			else:
				if aggregate is not None and config.analyze:
					aggregate.add(entry.extension, analysis)

		emit(RenderRecord(entry=entry, is_last_sibling=is_last, analysis=analysis))

		if _can_expand(entry, config):
			stack.extend(reversed(_children(entry.path, entry.depth + 1, root, config, warnings)))

	return warnings
