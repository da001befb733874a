from __future__ import annotations

from pathlib import Path
from typing import Union


PathLike = Union[str, Path]


class SspError(Exception):
	"""Base class for every error raised by the ssp core."""


class PathNotFound(SspError):
	def __init__(self, path: PathLike):
		self.path = Path(path)
		super().__init__(f"Path '{path}' does not exist")


class NotADirectory(SspError):
	def __init__(self, path: PathLike):
		self.path = Path(path)
		super().__init__(f"'{path}' is not a directory")


class UnknownMode(SspError):
	def __init__(self, mode: str, available=()):
		self.mode = mode
		self.available = sorted(available)
		message = f"Unknown mode '{mode}'"
		if self.available:
			message += f" (available: {', '.join(self.available)})"
		super().__init__(message)


class ModeFileError(SspError):
	def __init__(self, path: PathLike, reason: str):
		self.path = Path(path)
		self.reason = reason
		super().__init__(f"Invalid mode file '{path}': {reason}")


# Recoverable: the walker logs these and keeps going.


class UnreadableDirectory(SspError):
	def __init__(self, path: PathLike, reason: str = ""):
		self.path = Path(path)
		self.reason = reason
		super().__init__(f"Cannot read directory '{path}'" + (f": {reason}" if reason else ""))


class FileUnreadable(SspError):
	def __init__(self, path: PathLike, reason: str = ""):
		self.path = Path(path)
		self.reason = reason
		super().__init__(f"Cannot read file '{path}'" + (f": {reason}" if reason else ""))
