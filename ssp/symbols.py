from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Optional

from .errors import UnknownMode
from .model import SymbolSet


DEFAULT_MODE = "default"

BUILTIN_MODES: Mapping[str, SymbolSet] = MappingProxyType({
	"default": SymbolSet(vertical="│   ", tee="├──", elbow="└──", indent="    "),
	"ascii": SymbolSet(vertical="|   ", tee="|--", elbow="`--", indent="    "),
	"bold": SymbolSet(vertical="┃   ", tee="┣━━", elbow="┗━━", indent="    "),
	"rounded": SymbolSet(vertical="│   ", tee="├──", elbow="╰──", indent="    "),
})


def build_mode_table(overrides: Optional[Mapping[str, SymbolSet]] = None) -> Mapping[str, SymbolSet]:
	"""Built-in modes plus caller overrides; overrides win on name clashes."""
	table = dict(BUILTIN_MODES)
	if overrides:
		table.update(overrides)
	return MappingProxyType(table)


def resolve_mode(name: Optional[str], table: Optional[Mapping[str, SymbolSet]] = None) -> SymbolSet:
	table = table if table is not None else BUILTIN_MODES
	key = name or DEFAULT_MODE
	try:
		return table[key]
	except KeyError:
		raise UnknownMode(key, table.keys()) from None
