"""Per-language heuristics used by the line analyzer.

Each language is described by data only: single-line comment markers, an
optional block-comment pair, and regular expressions for function-like,
class-like and typed declarations. Adding a language means adding a table
entry. None of this is a parser; counts derived from these patterns are
estimates and are reported as such.

Typed-declaration buckets are implementation-defined approximations:

- int: integral keywords (``int``, ``long``, ``i32``, ``usize``, ``Int``...)
- float: ``float``/``double``/``f64``, and TypeScript ``number``
- string: ``str``/``String``/``string``, and C ``char *``
- bool: ``bool``/``boolean``/``Bool``
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Dict, Optional, Pattern, Tuple


def _rx(*patterns: str) -> Tuple[Pattern[str], ...]:
	return tuple(re.compile(p) for p in patterns)


@dataclass(frozen=True)
class LanguageRules:
	name: str
	line_comments: Tuple[str, ...] = ()
	block_comment: Optional[Tuple[str, str]] = None
	functions: Tuple[Pattern[str], ...] = ()
	classes: Tuple[Pattern[str], ...] = ()
	type_decls: Dict[str, Tuple[Pattern[str], ...]] = field(default_factory=dict)


C_BLOCK = ("/*", "*/")

# return-type, identifier, "(" with no ";" afterwards (prototypes and calls end in ";")
_C_STYLE_FUNCTION = (
	r"^\s*(?!(?:return|else|if|for|while|switch|case|new|throw|delete|goto|do)\b)"
	r"(?:[\w:<>\[\],*&.]+\s+)+[*&]*"
	r"(?!(?:if|for|while|switch|return|catch|sizeof)\b)\w+\s*\([^;]*$"
)

_C_INT = r"\b(?:unsigned\s+|signed\s+)?(?:int|long|short|size_t|u?int(?:8|16|32|64)_t)\s+\**\w+"
_C_FLOAT = r"\b(?:float|double)\s+\**\w+"
_C_BOOL = r"\b(?:bool|_Bool)\s+\w+"

_RUST_INT = r":\s*&?(?:mut\s+)?(?:[iu](?:8|16|32|64|128|size))\b"
_RUST_FLOAT = r":\s*&?(?:mut\s+)?f(?:32|64)\b"
_RUST_STRING = r":\s*&?(?:'\w+\s+)?(?:mut\s+)?(?:String|str)\b"
_RUST_BOOL = r":\s*&?(?:mut\s+)?bool\b"

_COLON_INT = r":\s*(?:Int|Long|Short|Int(?:8|16|32|64)|UInt)\b"
_COLON_FLOAT = r":\s*(?:Double|Float)\b"
_COLON_STRING = r":\s*String\b"


RULES: Dict[str, LanguageRules] = {
	"python": LanguageRules(
		name="python",
		line_comments=("#",),
		block_comment=('"""', '"""'),
		functions=_rx(r"^\s*(?:async\s+)?def\s+\w+\s*\("),
		classes=_rx(r"^\s*class\s+\w+"),
		type_decls={
			"int": _rx(r"(?::|->)\s*int\b"),
			"float": _rx(r"(?::|->)\s*float\b"),
			"string": _rx(r"(?::|->)\s*str\b"),
			"bool": _rx(r"(?::|->)\s*bool\b"),
		},
	),
	"rust": LanguageRules(
		name="rust",
		line_comments=("//",),
		block_comment=C_BLOCK,
		functions=_rx(
			r"^\s*(?:pub(?:\([\w:]+\))?\s+)?(?:const\s+)?(?:async\s+)?(?:unsafe\s+)?"
			r"(?:extern\s+\"[^\"]*\"\s+)?fn\s+\w+"
		),
		classes=_rx(r"^\s*(?:pub(?:\([\w:]+\))?\s+)?(?:struct|enum|trait|union)\s+\w+"),
		type_decls={
			"int": _rx(_RUST_INT),
			"float": _rx(_RUST_FLOAT),
			"string": _rx(_RUST_STRING),
			"bool": _rx(_RUST_BOOL),
		},
	),
	"c": LanguageRules(
		name="c",
		line_comments=("//",),
		block_comment=C_BLOCK,
		functions=_rx(_C_STYLE_FUNCTION),
		classes=_rx(r"^\s*(?:typedef\s+)?(?:struct|union|enum)\s+\w+\s*\{?\s*$"),
		type_decls={
			"int": _rx(_C_INT),
			"float": _rx(_C_FLOAT),
			"string": _rx(r"\bchar\s*\*\s*\w+"),
			"bool": _rx(_C_BOOL),
		},
	),
	"cpp": LanguageRules(
		name="cpp",
		line_comments=("//",),
		block_comment=C_BLOCK,
		functions=_rx(_C_STYLE_FUNCTION),
		classes=_rx(r"^\s*(?:template\s*<[^>]*>\s*)?(?:class|struct|union|enum(?:\s+class)?)\s+\w+(?!.*;\s*$)"),
		type_decls={
			"int": _rx(_C_INT),
			"float": _rx(_C_FLOAT),
			"string": _rx(r"\b(?:std::)?string\s+&?\w+", r"\bchar\s*\*\s*\w+"),
			"bool": _rx(_C_BOOL),
		},
	),
	"java": LanguageRules(
		name="java",
		line_comments=("//",),
		block_comment=C_BLOCK,
		functions=_rx(_C_STYLE_FUNCTION),
		classes=_rx(r"\b(?:class|interface|enum|record)\s+\w+"),
		type_decls={
			"int": _rx(r"\b(?:int|long|short|byte|Integer|Long)\s+\w+"),
			"float": _rx(r"\b(?:float|double|Float|Double)\s+\w+"),
			"string": _rx(r"\bString\s+\w+"),
			"bool": _rx(r"\b(?:boolean|Boolean)\s+\w+"),
		},
	),
	"csharp": LanguageRules(
		name="csharp",
		line_comments=("//",),
		block_comment=C_BLOCK,
		functions=_rx(_C_STYLE_FUNCTION),
		classes=_rx(r"\b(?:class|struct|interface|enum|record)\s+\w+"),
		type_decls={
			"int": _rx(r"\b(?:int|long|short|uint|ulong)\s+\w+"),
			"float": _rx(r"\b(?:float|double|decimal)\s+\w+"),
			"string": _rx(r"\b(?:string|String)\s+\w+"),
			"bool": _rx(r"\bbool\s+\w+"),
		},
	),
	"go": LanguageRules(
		name="go",
		line_comments=("//",),
		block_comment=C_BLOCK,
		functions=_rx(r"^\s*func\s+(?:\([^)]*\)\s*)?\w+\s*\("),
		classes=_rx(r"^\s*type\s+\w+\s+(?:struct|interface)\b"),
		type_decls={
			"int": _rx(r"\bu?int(?:8|16|32|64)?\b"),
			"float": _rx(r"\bfloat(?:32|64)\b"),
			"string": _rx(r"\bstring\b"),
			"bool": _rx(r"\bbool\b"),
		},
	),
	"javascript": LanguageRules(
		name="javascript",
		line_comments=("//",),
		block_comment=C_BLOCK,
		functions=_rx(
			r"\bfunction\b\s*\*?\s*\w*\s*\(",
			r"^\s*(?:export\s+)?(?:const|let|var)\s+\w+\s*=\s*(?:async\s+)?(?:\([^)]*\)|\w+)\s*=>",
		),
		classes=_rx(r"^\s*(?:export\s+)?(?:default\s+)?class\s+\w+"),
	),
	"typescript": LanguageRules(
		name="typescript",
		line_comments=("//",),
		block_comment=C_BLOCK,
		functions=_rx(
			r"\bfunction\b\s*\*?\s*\w*\s*[<(]",
			r"^\s*(?:export\s+)?(?:const|let|var)\s+\w+\s*(?::[^=]+)?=\s*(?:async\s+)?(?:\([^)]*\)|\w+)\s*(?::[^=]+)?=>",
		),
		classes=_rx(r"^\s*(?:export\s+)?(?:default\s+)?(?:abstract\s+)?(?:class|interface|enum)\s+\w+"),
		type_decls={
			"int": _rx(r":\s*bigint\b"),
			"float": _rx(r":\s*number\b"),
			"string": _rx(r":\s*string\b"),
			"bool": _rx(r":\s*boolean\b"),
		},
	),
	"kotlin": LanguageRules(
		name="kotlin",
		line_comments=("//",),
		block_comment=C_BLOCK,
		functions=_rx(r"\bfun\s+(?:<[^>]*>\s*)?[\w.]+\s*\("),
		classes=_rx(r"\b(?:class|interface|object)\s+\w+"),
		type_decls={
			"int": _rx(_COLON_INT),
			"float": _rx(_COLON_FLOAT),
			"string": _rx(_COLON_STRING),
			"bool": _rx(r":\s*Boolean\b"),
		},
	),
	"swift": LanguageRules(
		name="swift",
		line_comments=("//",),
		block_comment=C_BLOCK,
		functions=_rx(r"\bfunc\s+\w+"),
		classes=_rx(r"\b(?:class|struct|protocol|enum|extension)\s+\w+"),
		type_decls={
			"int": _rx(_COLON_INT),
			"float": _rx(_COLON_FLOAT),
			"string": _rx(_COLON_STRING),
			"bool": _rx(r":\s*Bool\b"),
		},
	),
	"scala": LanguageRules(
		name="scala",
		line_comments=("//",),
		block_comment=C_BLOCK,
		functions=_rx(r"^\s*(?:override\s+)?(?:private\s+|protected\s+)?def\s+\w+"),
		classes=_rx(r"\b(?:class|trait|object)\s+\w+"),
		type_decls={
			"int": _rx(_COLON_INT),
			"float": _rx(_COLON_FLOAT),
			"string": _rx(_COLON_STRING),
			"bool": _rx(r":\s*Boolean\b"),
		},
	),
	"php": LanguageRules(
		name="php",
		line_comments=("//", "#"),
		block_comment=C_BLOCK,
		functions=_rx(r"\bfunction\s+&?\w+\s*\("),
		classes=_rx(r"^\s*(?:abstract\s+|final\s+)?(?:class|interface|trait|enum)\s+\w+"),
	),
	"ruby": LanguageRules(
		name="ruby",
		line_comments=("#",),
		block_comment=("=begin", "=end"),
		functions=_rx(r"^\s*def\s+[\w.?!]+"),
		classes=_rx(r"^\s*(?:class|module)\s+\w+"),
	),
	"shell": LanguageRules(
		name="shell",
		line_comments=("#",),
		functions=_rx(r"^\s*function\s+\w+", r"^\s*\w+\s*\(\s*\)\s*\{?"),
	),
	"perl": LanguageRules(
		name="perl",
		line_comments=("#",),
		functions=_rx(r"^\s*sub\s+\w+"),
		classes=_rx(r"^\s*package\s+[\w:]+"),
	),
	"r": LanguageRules(
		name="r",
		line_comments=("#",),
		functions=_rx(r"\w+\s*(?:<-|=)\s*function\s*\("),
	),
	"lua": LanguageRules(
		name="lua",
		line_comments=("--",),
		block_comment=("--[[", "]]"),
		functions=_rx(r"\bfunction\s+[\w.:]+\s*\(", r"\w+\s*=\s*function\s*\("),
	),
	"haskell": LanguageRules(
		name="haskell",
		line_comments=("--",),
		block_comment=("{-", "-}"),
		classes=_rx(r"^\s*(?:data|newtype|class)\s+\w+"),
	),
	"sql": LanguageRules(
		name="sql",
		line_comments=("--",),
		block_comment=C_BLOCK,
		functions=_rx(r"(?i)\bcreate\s+(?:or\s+replace\s+)?(?:function|procedure)\b"),
		classes=_rx(r"(?i)\bcreate\s+(?:table|type|view)\b"),
	),
	"lisp": LanguageRules(
		name="lisp",
		line_comments=(";",),
		functions=_rx(r"\((?:defun|defn|define|defmacro)\s"),
		classes=_rx(r"\((?:defclass|defstruct|defrecord|deftype)\s"),
	),
	"assembly": LanguageRules(name="assembly", line_comments=(";", "#")),
	"ini": LanguageRules(name="ini", line_comments=(";", "#")),
	"config": LanguageRules(name="config", line_comments=("#",)),
	"css": LanguageRules(name="css", block_comment=C_BLOCK),
	"markup": LanguageRules(name="markup", block_comment=("<!--", "-->")),
	"text": LanguageRules(name="text"),
}

# Files whose extension maps to no known language still get comment
# detection with every common marker.
GENERIC_RULES = LanguageRules(
	name="unknown",
	line_comments=("//", "#", ";"),
	block_comment=C_BLOCK,
)


def rules_for(language: str) -> LanguageRules:
	return RULES.get(language, GENERIC_RULES)
