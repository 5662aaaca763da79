"""
The tree-walker proper: evaluate children first, then apply the operator.
Dispatch goes through a table keyed by node class. The table is checked
against syntax.EXPRESSION_KINDS at import, so a node kind without a
handler breaks loudly instead of quietly evaluating to nothing.
"""

from . import syntax
from .runtime import RuntimeTypeError, apply_unary, apply_binary
from .values import Value
from .presentation import stringify

def evaluate(expr:syntax.ValueExpression) -> Value:
	try: fn = EVALUATE[type(expr)]
	except KeyError: raise TypeError("Not an expression node: %r" % (expr,)) from None
	return fn(expr)

def _eval_literal(expr:syntax.Literal) -> Value:
	return expr.value

def _eval_grouping(expr:syntax.Grouping) -> Value:
	return evaluate(expr.expression)

def _eval_unary(expr:syntax.Unary) -> Value:
	right = evaluate(expr.right)
	return apply_unary(expr.operator, right)

def _eval_binary(expr:syntax.Binary) -> Value:
	# Both sides, always, left first. None of these operators short-circuits.
	left = evaluate(expr.left)
	right = evaluate(expr.right)
	return apply_binary(expr.operator, left, right)

EVALUATE = {}

def attach_evaluation_methods(python_scope):
	for _k, _v in list(python_scope.items()):
		if _k.startswith("_eval_"):
			_t = _v.__annotations__["expr"]
			assert isinstance(_t, type), (_k, _t)
			EVALUATE[_t] = _v
	missing = set(syntax.EXPRESSION_KINDS) - set(EVALUATE)
	assert not missing, "No evaluation rule for %s" % sorted(t.__name__ for t in missing)

attach_evaluation_methods(globals())

def interpret(expr:syntax.ValueExpression, report, emit=print) -> bool:
	"""
	Evaluate one tree and either emit the stringified result or hand the
	run-time error to the report. Exactly one of those happens.
	Answers whether evaluation succeeded.
	"""
	report.info("Evaluating", expr)
	try:
		value = evaluate(expr)
	except RuntimeTypeError as ex:
		report.runtime_error(ex)
		return False
	emit(stringify(value))
	return True
