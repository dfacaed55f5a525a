"""
Reduce a tree of values to a single Number or Error.

The evaluator reads its input but never changes it. Every result is a fresh value,
so the caller may destroy the input tree and the result independently.
First error wins: once an operand turns out to be an Error, nothing further is evaluated.
"""
from typing import Sequence
from boozetools.support.foundation import Visitor
from .values import (
	Value, Number, Error, Symbol, SExpression, Fault,
	make_number, make_error, make_fault, make_sexpr, destroy,
)
from .primitive import ops

class Evaluator(Visitor):

	@staticmethod
	def visit_Number(n:Number) -> Value: return make_number(n.value)

	@staticmethod
	def visit_Error(e:Error) -> Value: return make_error(e.message, e.fault)

	@staticmethod
	def visit_Symbol(_:Symbol) -> Value:
		# Symbols only mean something in operator position.
		return make_fault(Fault.UNBOUND_SYMBOL)

	def visit_SExpression(self, sx:SExpression) -> Value:
		if not sx.cells: return make_sexpr()
		head, *rest = sx.cells
		if not isinstance(head, Symbol): return make_fault(Fault.NOT_AN_APPLICATION)
		if head.name not in ops: return make_fault(Fault.INVALID_OPERATOR)
		operands = []
		try:
			for expr in rest:
				it = self.visit(expr)
				if isinstance(it, Error): return it
				operands.append(it)
			return fold(head.name, operands)
		finally:
			# Intermediate results die here, whichever way the fold went.
			for x in operands: destroy(x)

def fold(glyph:str, operands:Sequence[Value]) -> Value:
	"""
	Combine operands strictly left-to-right: ((a op b) op c) op ...

	A lone operand comes back as an equal fresh Number, but only if it is a Number:
	(+ ()) is an error like any other attempt at arithmetic on a list.
	The operands are left alone; the caller still owns them.
	"""
	if not operands: return make_fault(Fault.NO_OPERANDS)
	if not all(isinstance(x, Number) for x in operands): return make_fault(Fault.NOT_A_NUMBER)
	fn = ops[glyph]
	acc = operands[0].value
	for x in operands[1:]:
		try: acc = fn(acc, x.value)
		except ZeroDivisionError: return make_fault(Fault.DIVISION_BY_ZERO)
	return make_number(acc)

_evaluator = Evaluator()

def evaluate(value:Value) -> Value:
	return _evaluator.visit(value)
