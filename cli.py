from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

import uvicorn

from ssp.config import available_modes, load_mode_file, make_config
from ssp.errors import SspError
from ssp.runner import collect, run


EXAMPLES = """\
examples:
  ssp                     Display the structure of the current directory
  ssp /path/to/dir        Display the structure of the specified directory
  ssp -i target -of       Only folders, ignore 'target'
  ssp -l -e rs            .rs files with line counts
  ssp -d 2                Show structure up to 2 levels deep
  ssp -a -m ascii src     Analyze 'src', drawn with ASCII connectors
"""


def build_parser() -> argparse.ArgumentParser:
	parser = argparse.ArgumentParser(
		prog="ssp",
		description="Show a directory's structure as a tree, optionally with code statistics.",
		epilog=EXAMPLES,
		formatter_class=argparse.RawDescriptionHelpFormatter,
	)
	parser.add_argument("path", nargs="?", default=None, help="Directory to display (default: current directory)")
	parser.add_argument("-i", "--ignore", action="append", default=[], metavar="NAME", help="Ignore entries with this name or glob (repeatable)")
	parser.add_argument("--no-default-ignores", action="store_true", help="Do not ignore .git, node_modules, __pycache__, ...")
	parser.add_argument("-of", "--only-folders", action="store_true", help="Show only folders")
	parser.add_argument("-l", "--lines", action="store_true", help="Show the number of lines in files")
	parser.add_argument("-e", "--extension", metavar="EXT", help="Show only files with the specified extension")
	parser.add_argument("-d", "--depth", type=int, metavar="DEPTH", help="Limit the display depth")
	parser.add_argument("-c", "--show-code", action="store_true", help="Append the content of every listed file")
	parser.add_argument("-a", "--analyze", action="store_true", help="Print line and code statistics")
	parser.add_argument("-m", "--mode", help="Connector symbol mode")
	parser.add_argument("--modes-file", metavar="PATH", help="TOML file with extra mode definitions")
	parser.add_argument("--list-modes", action="store_true", help="List available modes and exit")
	parser.add_argument("-o", "--output", metavar="FILE", help="Write output to FILE instead of stdout")
	parser.add_argument("-v", "--verbose", action="count", default=0, help="More log output on stderr")
	return parser


def configure_logging(verbosity: int) -> None:
	level = logging.WARNING
	if verbosity == 1:
		level = logging.INFO
	elif verbosity > 1:
		level = logging.DEBUG
	logging.basicConfig(level=level, stream=sys.stderr, format="%(levelname)s %(name)s: %(message)s")


def main(argv: Optional[List[str]] = None) -> int:
	parser = build_parser()
	args = parser.parse_args(argv)
	configure_logging(args.verbose)

	if args.depth is not None and args.depth < 0:
		parser.error("--depth must be a non-negative number")

	try:
		modes = load_mode_file(args.modes_file) if args.modes_file else None
		if args.list_modes:
			print("\n".join(available_modes(modes)))
			return 0
		config = make_config(
			args.path,
			ignore=args.ignore,
			clear_default_ignores=args.no_default_ignores,
			extension=args.extension,
			max_depth=args.depth,
			only_folders=args.only_folders,
			show_lines=args.lines,
			show_code=args.show_code,
			analyze=args.analyze,
			mode=args.mode,
			modes=modes,
		)
		if args.output:
			result = collect(config)
			with open(args.output, "w", encoding="utf-8") as fh:
				fh.write(result.text)
		else:
			run(config)
	except (SspError, OSError) as exc:
		print(f"Error: {exc}", file=sys.stderr)
		return 1
	return 0


def serve_main(argv: Optional[List[str]] = None) -> None:
	parser = argparse.ArgumentParser(prog="ssp-serve", description="Run the ssp HTTP API")
	parser.add_argument("--host", default="127.0.0.1")
	parser.add_argument("--port", type=int, default=8000)
	parser.add_argument("--reload", action="store_true")
	args = parser.parse_args(argv)
	uvicorn.run("api:app", host=args.host, port=args.port, reload=args.reload)


if __name__ == "__main__":
	sys.exit(main())
