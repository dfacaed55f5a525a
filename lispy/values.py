"""
The four kinds of thing that reading or evaluating an expression can produce:
Numbers, Errors, Symbols, and S-Expressions (ordered lists of the others).

An S-Expression exclusively owns its cells. Ownership moves into a container
by way of `append`, and a whole tree goes away by way of `destroy` on its root.
Nothing points back up the tree, so there are neither aliases nor cycles.
"""
from enum import Enum
from typing import Iterator, Optional

class Fault(Enum):
	""" Machine-readable kinds of error, each with its canonical message. """
	INVALID_NUMBER = "invalid number"
	UNBOUND_SYMBOL = "unbound symbol"
	NOT_AN_APPLICATION = "S-Expression does not start with symbol"
	INVALID_OPERATOR = "invalid operator"
	DIVISION_BY_ZERO = "Division by zero"
	NO_OPERANDS = "no operands"
	NOT_A_NUMBER = "cannot operate on non-number"

class Value:
	""" Root of the closed family of run-time values. """
	owned: bool = False     # True once some container has adopted this value.
	released: bool = False  # True once `destroy` has taken it apart.

class Number(Value):
	def __init__(self, value:int):
		assert isinstance(value, int) and not isinstance(value, bool), type(value)
		self.value = value
	def __repr__(self): return "<Number %d>" % self.value
	def __eq__(self, other): return type(other) is Number and other.value == self.value

class Error(Value):
	def __init__(self, message:str, fault:Optional[Fault]=None):
		assert isinstance(message, str), type(message)
		self.message = message
		self.fault = fault
	def __repr__(self): return "<Error %r>" % self.message
	def __eq__(self, other):
		return type(other) is Error and (other.message, other.fault) == (self.message, self.fault)

class Symbol(Value):
	def __init__(self, name:str):
		assert isinstance(name, str), type(name)
		self.name = name
	def __repr__(self): return "<Symbol %s>" % self.name
	def __eq__(self, other): return type(other) is Symbol and other.name == self.name

class SExpression(Value):
	cells: list[Value]
	def __init__(self):
		self.cells = []
	def __repr__(self): return "<SExpression %r>" % self.cells
	def __len__(self): return len(self.cells)
	def __eq__(self, other): return type(other) is SExpression and other.cells == self.cells

def make_number(n:int) -> Number: return Number(n)
def make_error(message:str, fault:Optional[Fault]=None) -> Error: return Error(message, fault)
def make_symbol(name:str) -> Symbol: return Symbol(name)
def make_sexpr() -> SExpression: return SExpression()

def make_fault(fault:Fault) -> Error:
	return Error(fault.value, fault)

def append(container:SExpression, child:Value) -> SExpression:
	"""
	Take ownership of the child, placing it after all existing cells.
	A value can be adopted only once, and never by itself.
	"""
	assert isinstance(container, SExpression), type(container)
	assert isinstance(child, Value), type(child)
	assert child is not container
	assert not child.owned, "%r already belongs to another container" % child
	assert not (child.released or container.released)
	child.owned = True
	container.cells.append(child)
	return container

def walk(value:Value) -> Iterator[Value]:
	""" Every node of the tree, children before their parent. """
	if isinstance(value, SExpression):
		for cell in value.cells:
			yield from walk(cell)
	yield value

def destroy(value:Value) -> int:
	"""
	Take apart a whole tree, starting from its root, and return how many nodes went away.
	A value still owned by a live container is not yours to destroy.
	"""
	assert not value.owned, "Destroy the root, not %r" % value
	return _release(value)

def _release(value:Value) -> int:
	assert not value.released, "%r was already destroyed" % value
	count = 1
	if isinstance(value, SExpression):
		for cell in value.cells:
			count += _release(cell)
		value.cells.clear()
	value.released = True
	return count
