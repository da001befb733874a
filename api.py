from __future__ import annotations

import os
from typing import List, Optional

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field

from ssp.config import available_modes, make_config
from ssp.errors import ModeFileError, NotADirectory, PathNotFound, UnknownMode
from ssp.model import ExtensionAggregate, TraversalWarning
from ssp.runner import collect


app = FastAPI(title="ssp structure viewer")


class TreeRequest(BaseModel):
	root_path: str
	ignore: List[str] = []
	clear_default_ignores: bool = False
	extension: Optional[str] = None
	max_depth: Optional[int] = Field(default=None, ge=0)
	only_folders: bool = False
	show_lines: bool = False
	show_code: bool = False
	analyze: bool = False
	mode: Optional[str] = None


class TreeResponse(BaseModel):
	text: str
	aggregate: Optional[ExtensionAggregate] = None
	warnings: List[TraversalWarning] = []


@app.post("/tree", response_model=TreeResponse)
def tree(req: TreeRequest) -> TreeResponse:
	root = os.path.abspath(req.root_path)
	try:
		config = make_config(
			root,
			ignore=req.ignore,
			clear_default_ignores=req.clear_default_ignores,
			extension=req.extension,
			max_depth=req.max_depth,
			only_folders=req.only_folders,
			show_lines=req.show_lines,
			show_code=req.show_code,
			analyze=req.analyze,
			mode=req.mode,
		)
		result = collect(config)
	except PathNotFound as e:
		raise HTTPException(status_code=404, detail=str(e))
	except (NotADirectory, UnknownMode, ModeFileError) as e:
		raise HTTPException(status_code=400, detail=str(e))

	return TreeResponse(text=result.text, aggregate=result.aggregate, warnings=result.warnings)


@app.get("/modes")
def modes() -> List[str]:
	return list(available_modes())


def create_app() -> FastAPI:
	return app
