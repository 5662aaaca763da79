"""
These most-fundamental classes sit apart from the concrete syntax
to avoid circular imports. The operator descriptor lives here because
the syntax, the run-time, and the diagnostics all need to know about it.
"""
from typing import Optional
from .location import Span

UNARY_GLYPHS = frozenset(["-", "!"])
BINARY_GLYPHS = frozenset([">", ">=", "<", "<=", "!=", "==", "-", "/", "*", "+"])

class ValueExpression:
	""" Root of the closed family of expression nodes. """
	pass

class Operator:
	"""
	Says which operator a node applies and where it appeared.
	The span is only for error messages; an operator carries no evaluation logic.
	"""
	span: Optional[Span]
	def __init__(self, glyph:str, span:Optional[Span]=None):
		assert glyph in UNARY_GLYPHS or glyph in BINARY_GLYPHS, glyph
		assert span is None or isinstance(span, Span), type(span)
		self.glyph, self.span = glyph, span
	def __repr__(self): return "<Operator %r>" % self.glyph
	def __str__(self): return self.glyph
