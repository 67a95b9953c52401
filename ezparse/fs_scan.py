from __future__ import annotations

import logging
import os
from typing import Iterable, List

from pydantic import BaseModel


logger = logging.getLogger(__name__)

IGNORED_DIRS = {".git", "node_modules", "dist", "build", "__pycache__"}


class SourceInfo(BaseModel):
	path: str
	rel_path: str


def is_source_file(filename: str, suffixes: Iterable[str]) -> bool:
	_, ext = os.path.splitext(filename)
	return ext.lower() in {s.lower() for s in suffixes}


def scan_sources(root: str, suffixes: Iterable[str]) -> List[SourceInfo]:
	suffixes = list(suffixes)
	sources: List[SourceInfo] = []
	for dirpath, dirnames, filenames in os.walk(root):
		dirnames[:] = [d for d in dirnames if d not in IGNORED_DIRS]
		for filename in filenames:
			if not is_source_file(filename, suffixes):
				continue
			path = os.path.join(dirpath, filename)
			sources.append(SourceInfo(path=path, rel_path=os.path.relpath(path, root)))
	sources.sort(key=lambda s: s.rel_path)
	logger.debug("Found %d sources under %s", len(sources), root)
	return sources
