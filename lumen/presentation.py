"""
Truthiness, equality, and the user-facing text of run-time values.
The operators lean on the first two; the entry point leans on stringify.
"""
import math
from .values import Value, Number, Text, Boolean, Nil

def is_truthy(value:Value) -> bool:
	# nil and false are false; everything else, zero and "" included, is true.
	if isinstance(value, Nil): return False
	if isinstance(value, Boolean): return value.value
	return True

def is_equal(a:Value, b:Value) -> bool:
	if isinstance(a, Nil) and isinstance(b, Nil): return True
	if isinstance(a, Nil) or isinstance(b, Nil): return False
	if type(a) is not type(b): return False
	if isinstance(a, Number): return _same_double(a.value, b.value)
	return a.value == b.value

def _same_double(x:float, y:float) -> bool:
	# Bitwise sameness: every NaN matches every NaN, and 0 differs from -0.
	if math.isnan(x) or math.isnan(y): return math.isnan(x) and math.isnan(y)
	return x == y and math.copysign(1.0, x) == math.copysign(1.0, y)

def stringify(value:Value) -> str:
	if isinstance(value, Nil): return "nil"
	if isinstance(value, Number): return _number_text(value.value)
	if isinstance(value, Boolean): return "true" if value.value else "false"
	if isinstance(value, Text): return value.value
	raise TypeError(type(value))

def _number_text(n:float) -> str:
	if math.isnan(n): return "NaN"
	if math.isinf(n): return "Infinity" if n > 0 else "-Infinity"
	text = repr(n)
	if text.endswith(".0"):
		text = text[:-2]
	return text
