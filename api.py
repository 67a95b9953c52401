from __future__ import annotations

import os

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel

from ezparse.errors import EzParseError
from ezparse.ez_parse import parse_file, parse_text
from ezparse.model import FileInfo


app = FastAPI(title="EZ Notation Parser")


class ParseRequest(BaseModel):
	text: str
	source: str = "<input>"


class ParseFileRequest(BaseModel):
	path: str


def _parse_error(err: EzParseError) -> HTTPException:
	return HTTPException(status_code=400, detail=err.to_dict())


@app.post("/parse", response_model=FileInfo)
def parse(req: ParseRequest) -> FileInfo:
	try:
		return parse_text(req.source, req.text)
	except EzParseError as err:
		raise _parse_error(err)


@app.post("/parse-file", response_model=FileInfo)
def parse_path(req: ParseFileRequest) -> FileInfo:
	path = os.path.abspath(req.path)
	if not os.path.isfile(path):
		raise HTTPException(status_code=400, detail=f"Invalid path: {path}")
	try:
		return parse_file(path)
	except EzParseError as err:
		raise _parse_error(err)


def create_app() -> FastAPI:
	return app
