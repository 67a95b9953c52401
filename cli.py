from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import List, Optional

import uvicorn

from ezparse.config import get_settings
from ezparse.errors import EzParseError
from ezparse.ez_parse import parse_file
from ezparse.fs_scan import scan_sources
from ezparse.model import FileInfo, ParseResult


def cmd_parse(args: argparse.Namespace) -> int:
	settings = get_settings()
	target = os.path.abspath(args.path)
	try:
		if os.path.isdir(target):
			files: List[FileInfo] = []
			for source in scan_sources(target, settings.source_suffixes):
				files.append(parse_file(source.path, args.encoding))
			output = ParseResult(root=target, files=files).model_dump_json(indent=2)
		else:
			output = parse_file(target, args.encoding).model_dump_json(indent=2)
	except EzParseError as err:
		print(err.format(), file=sys.stderr)
		return 1
	print(output)
	return 0


def cmd_serve(args: argparse.Namespace) -> int:
	uvicorn.run("api:app", host=args.host, port=args.port, reload=args.reload)
	return 0


def main(argv: Optional[List[str]] = None) -> int:
	settings = get_settings()
	parser = argparse.ArgumentParser(prog="ezparse")
	parser.add_argument("--log-level", default=settings.log_level, help="Logging level")
	sub = parser.add_subparsers(dest="cmd", required=True)

	pp = sub.add_parser("parse", help="Parse a notation file or directory and print the model JSON")
	pp.add_argument("path", help="Path to a notation file or a directory of them")
	pp.add_argument("--encoding", default=None, help="Source file encoding")
	pp.set_defaults(func=cmd_parse)

	ps = sub.add_parser("serve", help="Run FastAPI server")
	ps.add_argument("--host", default=settings.host)
	ps.add_argument("--port", type=int, default=settings.port)
	ps.add_argument("--reload", action="store_true")
	ps.set_defaults(func=cmd_serve)

	args = parser.parse_args(argv)
	logging.basicConfig(level=args.log_level.upper(), format="%(levelname)s %(name)s: %(message)s")
	return args.func(args)


if __name__ == "__main__":
	sys.exit(main())
