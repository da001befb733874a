from __future__ import annotations

from pathlib import Path
from typing import Iterable, List, Optional

from .model import TYPE_BUCKETS, Configuration, ExtensionAggregate, RenderRecord


RULE_WIDTH = 80
BINARY_PLACEHOLDER = "<binary or non-UTF-8 content omitted>"


def root_label(root: Path) -> str:
	name = Path(root).resolve().name
	return f"{name or '.'}/"


def render_tree(records: Iterable[RenderRecord], config: Configuration) -> List[str]:
	symbols = config.symbols
	lines: List[str] = [root_label(config.root)]
	# open_columns[k] is True while the ancestor at level k+1 still has siblings below it
	open_columns: List[bool] = []
	base: Optional[int] = None

	for record in records:
		if base is None:
			base = record.entry.depth - 1
		level = record.entry.depth - base
		del open_columns[level - 1:]
		prefix = "".join(symbols.vertical if more else symbols.blank for more in open_columns)
		connector = symbols.elbow if record.is_last_sibling and level > 1 else symbols.tee
		line = f"{prefix}{connector} {record.entry.name}"
		if config.show_lines and not record.entry.is_dir and record.stats is not None:
			line += f" ({record.stats.total})"
		lines.append(line)
		open_columns.append(not record.is_last_sibling)

	return lines


def render_code(records: Iterable[RenderRecord]) -> List[str]:
	rule = "=" * RULE_WIDTH
	lines: List[str] = []
	number = 0
	for record in records:
		if record.entry.is_dir or record.analysis is None:
			continue
		number += 1
		lines.extend(["", rule, f"[{number}] {record.entry.rel_path}", rule])
		if record.analysis.binary:
			lines.append(BINARY_PLACEHOLDER)
		elif record.analysis.text:
			lines.extend(record.analysis.text.rstrip("\n").split("\n"))
	return lines


def code_density(code_lines: int, total_lines: int) -> float:
	if total_lines == 0:
		return 0.0
	return round(code_lines / total_lines * 100, 1)


def render_report(aggregate: ExtensionAggregate) -> List[str]:
	totals = aggregate.totals()
	items = aggregate.sorted_items()
	width = max([len(ext) for ext, _ in items] + [9])

	lines = [
		"",
		"Analysis",
		f"  Files: {totals.file_count}",
		f"  Lines: {totals.line_count} total, {totals.blank_count} blank, "
		f"{totals.comment_count} comment, {totals.code_count} code",
		f"  Code density: {code_density(totals.code_count, totals.line_count):.1f}%",
		"  By extension:",
	]
	for ext, stats in items:
		lines.append(f"    {ext:<{width}} {stats.file_count:>6} files {stats.line_count:>8} lines")

	decls = ", ".join(f"{b} {totals.type_decls.get(b)}" for b in TYPE_BUCKETS)
	lines.extend([
		"  Heuristic estimates (pattern based, not exact):",
		f"    Functions: ~{totals.function_count}",
		f"    Classes/types: ~{totals.class_count}",
		f"    Typed declarations: {decls}",
	])
	return lines


def render(
	records: Iterable[RenderRecord],
	config: Configuration,
	aggregate: Optional[ExtensionAggregate] = None,
) -> str:
	records = list(records)
	lines = render_tree(records, config)
	if config.show_code:
		lines.extend(render_code(records))
	if config.analyze:
		lines.extend(render_report(aggregate or ExtensionAggregate()))
	return "\n".join(lines) + "\n"
