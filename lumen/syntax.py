"""
The set of expression nodes in simple form.
A parser (not part of this package) calls these constructors bottom-up;
the evaluator only ever reads them.
Each node prints itself in fully-parenthesized prefix form, which is how
trees show up in diagnostics and test failures.
"""
from json import dumps
from .ontology import ValueExpression, Operator, UNARY_GLYPHS, BINARY_GLYPHS
from .values import Value, Text, VALUE_KINDS, lift
from .presentation import stringify

class Literal(ValueExpression):
	value: Value
	def __init__(self, value:Value):
		assert isinstance(value, VALUE_KINDS), type(value)
		self.value = value
	@staticmethod
	def of(it) -> "Literal":
		return Literal(lift(it))
	def __str__(self):
		if isinstance(self.value, Text): return dumps(self.value.value)
		return stringify(self.value)
	def __repr__(self): return "<Literal %s>" % self

class Grouping(ValueExpression):
	""" Parentheses in the source. No effect on meaning; kept so the tree says what was written. """
	expression: ValueExpression
	def __init__(self, expression:ValueExpression):
		assert isinstance(expression, ValueExpression), type(expression)
		self.expression = expression
	def __str__(self): return "(group %s)" % self.expression
	def __repr__(self): return "<Grouping %s>" % self

class Unary(ValueExpression):
	operator: Operator
	right: ValueExpression
	def __init__(self, operator:Operator, right:ValueExpression):
		assert isinstance(operator, Operator) and operator.glyph in UNARY_GLYPHS, operator
		assert isinstance(right, ValueExpression), type(right)
		self.operator, self.right = operator, right
	def __str__(self): return "(%s %s)" % (self.operator, self.right)
	def __repr__(self): return "<Unary %s>" % self

class Binary(ValueExpression):
	left: ValueExpression
	operator: Operator
	right: ValueExpression
	def __init__(self, left:ValueExpression, operator:Operator, right:ValueExpression):
		assert isinstance(left, ValueExpression), type(left)
		assert isinstance(operator, Operator) and operator.glyph in BINARY_GLYPHS, operator
		assert isinstance(right, ValueExpression), type(right)
		self.left, self.operator, self.right = left, operator, right
	def __str__(self): return "(%s %s %s)" % (self.operator, self.left, self.right)
	def __repr__(self): return "<Binary %s>" % self

EXPRESSION_KINDS = (Literal, Grouping, Unary, Binary)
