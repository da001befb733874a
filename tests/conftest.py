from pathlib import Path

import pytest


def build(base: Path, layout: dict) -> None:
	for name, content in layout.items():
		path = base / name
		if isinstance(content, dict):
			path.mkdir()
			build(path, content)
		elif isinstance(content, bytes):
			path.write_bytes(content)
		else:
			path.write_text(content, encoding="utf-8")


@pytest.fixture
def make_tree(tmp_path):
	"""Create `tmp_path/root` from a nested dict (dict = directory, str/bytes = file)."""
	def _make(layout: dict, name: str = "root") -> Path:
		root = tmp_path / name
		root.mkdir()
		build(root, layout)
		return root
	return _make
