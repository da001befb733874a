from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Dict, List, Optional, Tuple, Union

from .errors import FileUnreadable
from .fs_scan import detect_language
from .model import TYPE_BUCKETS, FileAnalysis, LineStats, TypeDeclCounts
from .rules import LanguageRules, rules_for


class LineKind(str, Enum):
	BLANK = "blank"
	COMMENT = "comment"
	CODE = "code"


def read_source(path: Union[str, Path]) -> Optional[str]:
	"""Return the file's text, or None when it looks binary or is not UTF-8.

	Raises FileUnreadable when the file cannot be opened at all.
	"""
	try:
		data = Path(path).read_bytes()
	except OSError as exc:
		raise FileUnreadable(path, exc.strerror or str(exc)) from exc
	if b"\x00" in data:
		return None
	try:
		return data.decode("utf-8")
	except UnicodeDecodeError:
		return None


def split_lines(text: str) -> List[str]:
	if not text:
		return []
	lines = text.split("\n")
	if lines[-1] == "":
		lines.pop()
	return lines


def _next_marker(rest: str, rules: LanguageRules) -> Tuple[int, str]:
	"""Position and kind ("line" or "block") of the first comment marker in `rest`."""
	best = (-1, "")
	if rules.block_comment is not None:
		idx = rest.find(rules.block_comment[0])
		if idx >= 0:
			best = (idx, "block")
	for marker in rules.line_comments:
		idx = rest.find(marker)
		if idx >= 0 and (best[0] < 0 or idx < best[0]):
			best = (idx, "line")
	return best


def classify_line(line: str, rules: LanguageRules, in_block: bool) -> Tuple[LineKind, bool]:
	"""Classify one line and return the block-comment state for the next one."""
	rest = line.strip()
	if not rest:
		return LineKind.BLANK, in_block

	has_code = False
	while rest:
		if in_block:
			close = rules.block_comment[1]
			end = rest.find(close)
			if end < 0:
				break
			rest = rest[end + len(close):].lstrip()
			in_block = False
			continue
		if rules.block_comment is not None and rest.startswith(rules.block_comment[0]):
			rest = rest[len(rules.block_comment[0]):]
			in_block = True
			continue
		if rest.startswith(rules.line_comments):
			break
		has_code = True
		idx, kind = _next_marker(rest, rules)
		if idx < 0 or kind == "line":
			break
		rest = rest[idx:]

	return (LineKind.CODE if has_code else LineKind.COMMENT), in_block


def _count(patterns, line: str) -> int:
	return sum(len(p.findall(line)) for p in patterns)


def analyze_text(text: str, language: str = "unknown") -> FileAnalysis:
	rules = rules_for(language)
	total = blank = comment = 0
	functions = classes = 0
	decls: Dict[str, int] = {b: 0 for b in TYPE_BUCKETS}
	in_block = False

	for line in split_lines(text):
		total += 1
		kind, in_block = classify_line(line, rules, in_block)
		if kind is LineKind.BLANK:
			blank += 1
		elif kind is LineKind.COMMENT:
			comment += 1
		else:
			functions += 1 if any(p.search(line) for p in rules.functions) else 0
			classes += 1 if any(p.search(line) for p in rules.classes) else 0
			for bucket, patterns in rules.type_decls.items():
				decls[bucket] += _count(patterns, line)

	return FileAnalysis(
		stats=LineStats(total=total, blank=blank, comment=comment),
		function_count=functions,
		class_count=classes,
		type_decls=TypeDeclCounts(counts=decls),
		language=language,
	)


def analyze_file(path: Union[str, Path], keep_text: bool = False) -> FileAnalysis:
	"""Read `path` once and compute its line statistics and heuristic counts.

	Binary or non-UTF-8 content yields an all-zero analysis flagged `binary`.
	"""
	path = Path(path)
	language = detect_language(path.name)
	text = read_source(path)
	if text is None:
		return FileAnalysis(language=language, binary=True)
	analysis = analyze_text(text, language)
	if keep_text:
		analysis.text = text
	return analysis


def analyze(path: Union[str, Path]) -> LineStats:
	return analyze_file(path).stats
