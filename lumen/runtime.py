"""
Operator semantics. Each operator is a pure function of already-evaluated
operands. Operators with a type precondition check it first and raise
RuntimeTypeError naming the violated constraint.
"""
import math
import operator
from .ontology import Operator, UNARY_GLYPHS, BINARY_GLYPHS
from .values import Value, Number, Text, boolean
from .presentation import is_truthy, is_equal

class RuntimeTypeError(Exception):
	""" The one error the language itself can raise at run-time. """
	def __init__(self, operator:Operator, message:str):
		super().__init__(message)
		self.operator = operator
		self.message = message

def _number_operand(op:Operator, operand:Value) -> float:
	if isinstance(operand, Number): return operand.value
	raise RuntimeTypeError(op, "Operand must be a number.")

def _number_operands(op:Operator, left:Value, right:Value) -> tuple[float, float]:
	if isinstance(left, Number) and isinstance(right, Number):
		return left.value, right.value
	raise RuntimeTypeError(op, "Operands must be numbers.")

def _divide(a:float, b:float) -> float:
	# Python raises on a zero divisor; the language wants IEEE-754 instead.
	if b == 0:
		if a == 0 or math.isnan(a): return math.nan
		return math.copysign(math.inf, a) * math.copysign(1.0, b)
	return a / b

def _arithmetic(fn):
	def arithmetic(op:Operator, left:Value, right:Value) -> Number:
		return Number(fn(*_number_operands(op, left, right)))
	return arithmetic

def _relational(fn):
	def relational(op:Operator, left:Value, right:Value):
		return boolean(fn(*_number_operands(op, left, right)))
	return relational

def _add(op:Operator, left:Value, right:Value) -> Value:
	if isinstance(left, Number) and isinstance(right, Number):
		return Number(left.value + right.value)
	if isinstance(left, Text) and isinstance(right, Text):
		return Text(left.value + right.value)
	raise RuntimeTypeError(op, "Operands must be two numbers or two strings.")

def _equal(op:Operator, left:Value, right:Value):
	return boolean(is_equal(left, right))

def _not_equal(op:Operator, left:Value, right:Value):
	return boolean(not is_equal(left, right))

def _negate(op:Operator, right:Value) -> Number:
	return Number(-_number_operand(op, right))

def _not(op:Operator, right:Value):
	return boolean(not is_truthy(right))

PRIMITIVE_UNARY = {
	"-" : _negate,
	"!" : _not,
}
PRIMITIVE_BINARY = {
	">"  : _relational(operator.gt),
	">=" : _relational(operator.ge),
	"<"  : _relational(operator.lt),
	"<=" : _relational(operator.le),
	"!=" : _not_equal,
	"==" : _equal,
	"-"  : _arithmetic(operator.sub),
	"/"  : _arithmetic(_divide),
	"*"  : _arithmetic(operator.mul),
	"+"  : _add,
}
assert set(PRIMITIVE_UNARY) == UNARY_GLYPHS
assert set(PRIMITIVE_BINARY) == BINARY_GLYPHS

def apply_unary(op:Operator, right:Value) -> Value:
	return PRIMITIVE_UNARY[op.glyph](op, right)

def apply_binary(op:Operator, left:Value, right:Value) -> Value:
	return PRIMITIVE_BINARY[op.glyph](op, left, right)
