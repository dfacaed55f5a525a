"""
The shape of concrete syntax trees as they come out of the parser.

Nodes follow the old mpc convention: a tag made of |-separated classifications,
the matched text for leaves, and an ordered tuple of children for everything else.
The reader only ever asks whether a tag contains "number", "symbol", or "sexpr",
or whether it is exactly the root marker.
"""
from typing import NamedTuple

ROOT_TAG = ">"
NUMBER_TAG = "expr|number|regex"
SYMBOL_TAG = "expr|symbol|regex"
SEXPR_TAG = "expr|sexpr|>"
CHAR_TAG = "char"
REGEX_TAG = "regex"

class Node(NamedTuple):
	tag: str
	contents: str
	children: tuple["Node", ...] = ()

	def __repr__(self):
		if self.children:
			return "<%s %r>" % (self.tag, list(self.children))
		return "<%s %r>" % (self.tag, self.contents)

def number_leaf(text:str) -> Node: return Node(NUMBER_TAG, text)
def symbol_leaf(text:str) -> Node: return Node(SYMBOL_TAG, text)
def bracket(text:str) -> Node: return Node(CHAR_TAG, text)
def anchor() -> Node: return Node(REGEX_TAG, "")

def sexpr(open_bracket:Node, items, close_bracket:Node) -> Node:
	return Node(SEXPR_TAG, "", (open_bracket, *items, close_bracket))

def root(items) -> Node:
	""" The whole line, book-ended by the start- and end-of-input anchors. """
	return Node(ROOT_TAG, "", (anchor(), *items, anchor()))
