"""ssp: directory structure viewer with heuristic code statistics.

Modules:
- fs_scan.py: Directory listing, entry filtering/sorting and language detection.
- walker.py: Depth-first traversal producing render records.
- rules.py: Per-language comment and declaration heuristics.
- line_stats.py: Line classification and structural counts per file.
- symbols.py: Connector symbol sets (display modes).
- summarize.py: Text rendering of trees, code sections and reports.
- config.py: Run configuration and TOML mode files.
- runner.py: End-to-end collect/render/write pipeline.
- model.py: Data structures shared by all of the above.
"""

__all__ = [
	"config",
	"errors",
	"fs_scan",
	"line_stats",
	"model",
	"rules",
	"runner",
	"summarize",
	"symbols",
	"walker",
]
