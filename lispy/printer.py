"""
Render values as text. Nothing here evaluates or disturbs the value being shown.
"""
from boozetools.support.foundation import Visitor
from .values import Value, Number, Error, Symbol, SExpression

class Printer(Visitor):
	""" Return a string representation of the value. """
	@staticmethod
	def visit_Number(n:Number): return str(n.value)
	@staticmethod
	def visit_Error(e:Error): return "error: " + e.message
	@staticmethod
	def visit_Symbol(s:Symbol): return s.name
	def visit_SExpression(self, sx:SExpression):
		return "(%s)" % " ".join(self.visit(cell) for cell in sx.cells)

_printer = Printer()

def show(value:Value) -> str:
	return _printer.visit(value)
