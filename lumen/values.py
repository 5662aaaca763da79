"""
This module defines the run-time values the evaluator produces and consumes.
There are exactly four kinds, and every value is exactly one of them.
Values are immutable and compare by content; nothing here has identity.
"""
from dataclasses import dataclass
from typing import Union

@dataclass(frozen=True)
class Number:
	value: float
	def __post_init__(self):
		assert isinstance(self.value, (int, float)) and not isinstance(self.value, bool), type(self.value)
		# Integral literals are welcome, but the language only knows doubles.
		object.__setattr__(self, "value", float(self.value))

@dataclass(frozen=True)
class Text:
	value: str
	def __post_init__(self):
		assert isinstance(self.value, str), type(self.value)

@dataclass(frozen=True)
class Boolean:
	value: bool
	def __post_init__(self):
		assert isinstance(self.value, bool), type(self.value)

@dataclass(frozen=True)
class Nil:
	""" The absence of a value. Use the NIL instance. """
	pass

Value = Union[Number, Text, Boolean, Nil]
VALUE_KINDS = (Number, Text, Boolean, Nil)

NIL = Nil()
TRUE = Boolean(True)
FALSE = Boolean(False)

def boolean(flag:bool) -> Boolean:
	return TRUE if flag else FALSE

def lift(it) -> Value:
	""" Turn a plain Python datum into the run-time value that plays the same part. """
	if isinstance(it, VALUE_KINDS): return it
	if it is None: return NIL
	if isinstance(it, bool): return boolean(it)
	if isinstance(it, (int, float)): return Number(it)
	if isinstance(it, str): return Text(it)
	raise TypeError("No run-time value corresponds to %r" % type(it).__name__)
