from __future__ import annotations

import sys
from typing import List, Optional

from pydantic import BaseModel, Field

from .model import Configuration, ExtensionAggregate, RenderRecord, TraversalWarning
from .summarize import render
from .walker import check_root, walk


class RunResult(BaseModel):
	records: List[RenderRecord] = Field(default_factory=list)
	aggregate: Optional[ExtensionAggregate] = None
	warnings: List[TraversalWarning] = Field(default_factory=list)
	text: str = ""


def collect(config: Configuration) -> RunResult:
	check_root(config.root)
	records: List[RenderRecord] = []
	aggregate = ExtensionAggregate() if config.analyze else None
	warnings = walk(config.root, 0, config, records.append, aggregate)
	result = RunResult(records=records, aggregate=aggregate, warnings=warnings)
	result.text = render(records, config, aggregate)
	return result


def run(config: Configuration) -> RunResult:
	"""Walk, render, and write the result to the configured sink (stdout by default)."""
	result = collect(config)
	sink = config.sink if config.sink is not None else sys.stdout
	sink.write(result.text)
	sink.flush()
	return result
