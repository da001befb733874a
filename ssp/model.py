from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Any, Dict, FrozenSet, List, Optional

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator, model_validator


NO_EXTENSION = "(none)"
TYPE_BUCKETS = ("int", "float", "string", "bool")


class EntryKind(str, Enum):
	DIRECTORY = "directory"
	FILE = "file"


class SymbolSet(BaseModel):
	"""Connector strings for one display mode."""

	model_config = ConfigDict(frozen=True)

	vertical: str
	tee: str
	elbow: str
	indent: str

	@property
	def blank(self) -> str:
		# Padding for a finished ancestor column, always as wide as `vertical`.
		if len(self.indent) == len(self.vertical):
			return self.indent
		return " " * len(self.vertical)


class DirEntry(BaseModel):
	model_config = ConfigDict(frozen=True)

	name: str
	path: Path
	rel_path: str
	kind: EntryKind
	depth: int
	is_symlink: bool = False

	@property
	def is_dir(self) -> bool:
		return self.kind is EntryKind.DIRECTORY

	@property
	def extension(self) -> Optional[str]:
		suffix = Path(self.name).suffix
		return suffix[1:] if suffix else None


class LineStats(BaseModel):
	model_config = ConfigDict(frozen=True)

	total: int = 0
	blank: int = 0
	comment: int = 0

	@computed_field
	@property
	def code(self) -> int:
		return self.total - self.blank - self.comment

	@model_validator(mode="after")
	def _check_counts(self) -> "LineStats":
		if min(self.total, self.blank, self.comment) < 0 or self.blank + self.comment > self.total:
			raise ValueError(f"inconsistent line counts: {self.total}/{self.blank}/{self.comment}")
		return self


class TypeDeclCounts(BaseModel):
	"""Heuristic typed-declaration tallies, keyed by primitive bucket."""

	counts: Dict[str, int] = Field(default_factory=lambda: {b: 0 for b in TYPE_BUCKETS})

	def get(self, bucket: str) -> int:
		return self.counts.get(bucket, 0)

	def total(self) -> int:
		return sum(self.counts.values())

	def __add__(self, other: "TypeDeclCounts") -> "TypeDeclCounts":
		return TypeDeclCounts(counts={b: self.get(b) + other.get(b) for b in TYPE_BUCKETS})


class FileAnalysis(BaseModel):
	stats: LineStats = Field(default_factory=LineStats)
	function_count: int = 0
	class_count: int = 0
	type_decls: TypeDeclCounts = Field(default_factory=TypeDeclCounts)
	language: str = "unknown"
	binary: bool = False
	text: Optional[str] = Field(default=None, exclude=True)


class RenderRecord(BaseModel):
	entry: DirEntry
	is_last_sibling: bool
	analysis: Optional[FileAnalysis] = None

	@property
	def stats(self) -> Optional[LineStats]:
		return self.analysis.stats if self.analysis is not None else None


class ExtensionStats(BaseModel):
	file_count: int = 0
	line_count: int = 0
	blank_count: int = 0
	comment_count: int = 0
	function_count: int = 0
	class_count: int = 0
	type_decls: TypeDeclCounts = Field(default_factory=TypeDeclCounts)

	@computed_field
	@property
	def code_count(self) -> int:
		return self.line_count - self.blank_count - self.comment_count

	def __add__(self, other: "ExtensionStats") -> "ExtensionStats":
		return ExtensionStats(
			file_count=self.file_count + other.file_count,
			line_count=self.line_count + other.line_count,
			blank_count=self.blank_count + other.blank_count,
			comment_count=self.comment_count + other.comment_count,
			function_count=self.function_count + other.function_count,
			class_count=self.class_count + other.class_count,
			type_decls=self.type_decls + other.type_decls,
		)


class ExtensionAggregate(BaseModel):
	"""Run-wide statistics grouped by file extension."""

	by_extension: Dict[str, ExtensionStats] = Field(default_factory=dict)

	def add(self, extension: Optional[str], analysis: FileAnalysis) -> None:
		key = extension or NO_EXTENSION
		contribution = ExtensionStats(
			file_count=1,
			line_count=analysis.stats.total,
			blank_count=analysis.stats.blank,
			comment_count=analysis.stats.comment,
			function_count=analysis.function_count,
			class_count=analysis.class_count,
			type_decls=analysis.type_decls,
		)
		self.by_extension[key] = self.by_extension.get(key, ExtensionStats()) + contribution

	def merge(self, other: "ExtensionAggregate") -> "ExtensionAggregate":
		merged: Dict[str, ExtensionStats] = dict(self.by_extension)
		for key, stats in other.by_extension.items():
			merged[key] = merged.get(key, ExtensionStats()) + stats
		return ExtensionAggregate(by_extension=merged)

	def sorted_items(self) -> List[tuple]:
		return sorted(self.by_extension.items())

	def totals(self) -> ExtensionStats:
		result = ExtensionStats()
		for stats in self.by_extension.values():
			result = result + stats
		return result


class TraversalWarning(BaseModel):
	path: str
	message: str


class Configuration(BaseModel):
	model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

	root: Path
	ignore: FrozenSet[str] = frozenset()
	extension: Optional[str] = None
	max_depth: Optional[int] = Field(default=None, ge=0)
	only_folders: bool = False
	show_lines: bool = False
	show_code: bool = False
	analyze: bool = False
	symbols: SymbolSet
	sink: Any = Field(default=None, exclude=True)

	@field_validator("extension")
	@classmethod
	def _strip_dot(cls, value: Optional[str]) -> Optional[str]:
		if value is None:
			return None
		value = value[1:] if value.startswith(".") else value
		return value or None

	@property
	def needs_file_read(self) -> bool:
		return self.show_lines or self.analyze or self.show_code
