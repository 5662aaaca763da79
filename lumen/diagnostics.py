import sys, random
from functools import lru_cache
from pathlib import Path
from typing import Any, Optional
from boozetools.support.failureprone import SourceText, illustration

from .location import Span
from .ontology import Operator

class TooManyIssues(Exception):
	pass

def _outburst():
	particle = ["Oh, ", "Well, ", "Aw, ", "", ""]
	minced_oaths = [
		'Ack', 'Blargh', 'Confound it', 'Crud', 'Curses', 'Drat',
		'Fiddlesticks', 'Good Grief', 'Great Scott', 'Nuts', 'Rats',
	]
	resignations = [
		'I cannot continue.',
		'That did not compute.',
		'I have no idea what the right answer is.',
	]
	return "%s%s! %s"%tuple(map(random.choice, (particle, minced_oaths, resignations)))

class Report:
	""" Collects what went wrong so the caller can decide how to complain. """
	issues : list["Pic"]
	
	def __init__(self, *, verbose:int=0, max_issues=3):
		self._verbose = verbose or 0   # Because None is incomparable.
		self.issues = []
		self._max_issues = max_issues
	
	def ok(self): return not self.issues
	def sick(self): return bool(self.issues)
	
	def issue(self, it:Any):
		self.issues.append(it)
		if len(self.issues) == self._max_issues:
			raise TooManyIssues(self)
	
	def reset(self):
		self.issues.clear()
	
	def info(self, *args):
		if self._verbose:
			print(*args, file=sys.stderr)
	
	def complain_to_console(self):
		""" Emit all the issues to the console. """
		_bemoan(self.issues)
	
	def assert_no_issues(self, message=""):
		""" Does what it says on the tin """
		if self.issues:
			self.complain_to_console()
			raise AssertionError(_outburst()+" "+message)
	
	# The evaluator's entry point calls this:
	def runtime_error(self, error):
		""" Record a run-time error: its message, and where its operator sits if known. """
		problem = [Annotation(error.operator, "Here")] if error.operator.span else []
		self.issue(Pic(error.message, problem))

class Annotation:
	path: Optional[Path]
	slice: slice
	caption: str
	def __init__(self, operator:Operator, caption:str=""):
		span = operator.span
		assert isinstance(span, Span), operator
		self.path = span.path
		self.slice = span.slice
		self.caption = caption
	def illustrate(self):
		if self.path is None:
			return "at offset %d: %s" % (self.slice.start, self.caption)
		source = _fetch(self.path)
		row, col = source.find_row_col(self.slice.start)
		single_line = source.line_of_text(row)
		width = self.slice.stop - self.slice.start
		return illustration(single_line, col, width, prefix='% 6d |' % row, caption=self.caption)

class Pic:
	def __init__(self, intro:str, anns:list[Annotation], footer=()):
		self._intro, self._anns, self._footer = intro, anns, footer
	
	@property
	def description(self): return self._intro
	
	def as_text(self):
		lines = [self._intro]
		path = None
		for ann in self._anns:
			if ann.path != path:
				path = ann.path
				lines.append(str(path))
			lines.append(ann.illustrate())
		lines.extend(self._footer)
		return '\n'.join(lines)

@lru_cache(5)
def _fetch(path) -> SourceText:
	with open(path, "r", encoding="utf-8") as fh:
		return SourceText(fh.read(), filename=str(path))

def _bemoan(issues):
	""" Emit all the issues to the console. """
	if issues:
		print("*"*60, file=sys.stderr)
		print(_outburst(), file=sys.stderr)
	for i in issues:
		print("  -"*20, file=sys.stderr)
		print(i.as_text(), file=sys.stderr)
	sys.stderr.flush()
