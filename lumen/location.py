"""
I want a simple, light-weight way to say where an operator came from.
A span is a slice of characters within one file; the path may be absent
for text that never lived in a file.
"""
from pathlib import Path
from typing import NamedTuple, Optional

class Span(NamedTuple):
	""" Aimed at whatever prints error messages """
	path: Optional[Path]
	slice: slice

	def width(self) -> int:
		return self.slice.stop - self.slice.start

def span_in(path, start:int, stop:int) -> Span:
	assert isinstance(path, (str, Path)) or path is None, type(path)
	assert 0 <= start <= stop, (start, stop)
	return Span(None if path is None else Path(path), slice(start, stop))
