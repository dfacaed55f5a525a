"""
Translate a concrete syntax tree into a tree of values, without evaluating anything.
"""
import re
from .syntax import Node, REGEX_TAG
from .values import Value, Fault, make_number, make_fault, make_symbol, make_sexpr, append
from .primitive import in_range

# Like strtol in base ten, except that trailing junk is not forgiven.
NUMERAL = re.compile(r"\s*[-+]?[0-9]+\s*")

_BRACKETS = frozenset(["(", ")"])

def read(node:Node) -> Value:
	if "number" in node.tag: return read_number(node.contents)
	if "symbol" in node.tag: return make_symbol(node.contents)
	# The root and every s-expression become a list, as does anything else structural.
	container = make_sexpr()
	for child in node.children:
		if child.contents in _BRACKETS or child.tag == REGEX_TAG: continue
		append(container, read(child))
	return container

def read_number(text:str) -> Value:
	if NUMERAL.fullmatch(text):
		# Python refuses to convert absurdly long digit-strings, which are out of range anyway.
		try: n = int(text)
		except ValueError: pass
		else:
			if in_range(n): return make_number(n)
	return make_fault(Fault.INVALID_NUMBER)
