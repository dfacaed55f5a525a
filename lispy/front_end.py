"""
The parser for one line of Lispy. It produces a concrete syntax tree (see syntax.py)
and knows nothing about what the tree means.
"""
from pathlib import Path
from typing import Optional

from boozetools.macroparse.runtime import TypicalApplication, make_tables
from boozetools.scanning.engine import IterableScanner
from boozetools.parsing.interface import ParseError
from . import syntax
from .diagnostics import Report
from .reader import NUMERAL

class LispyParseError(ParseError):
	pass

_tables = make_tables(Path(__file__).parent/"Lispy.md")
_parse_table = _tables['parser']

class LispyParser(TypicalApplication):

	def scan_ignore(self, yy: IterableScanner): pass

	@staticmethod
	def scan_open(yy: IterableScanner): yy.token("open", syntax.bracket("("))

	@staticmethod
	def scan_close(yy: IterableScanner): yy.token("close", syntax.bracket(")"))

	@staticmethod
	def scan_atom(yy: IterableScanner):
		text = yy.match()
		leaf = syntax.number_leaf(text) if NUMERAL.fullmatch(text) else syntax.symbol_leaf(text)
		yy.token("atom", leaf)

	@staticmethod
	def parse_root(items): return syntax.root(items)
	@staticmethod
	def parse_first(item): return [item]
	@staticmethod
	def parse_more(some, another):
		some.append(another)
		return some
	@staticmethod
	def parse_leaf(leaf): return leaf
	@staticmethod
	def parse_hollow(open_bracket, close_bracket): return syntax.sexpr(open_bracket, (), close_bracket)
	@staticmethod
	def parse_sexpr(open_bracket, items, close_bracket): return syntax.sexpr(open_bracket, items, close_bracket)

	def unexpected_token(self, kind, semantic, pds):
		raise LispyParseError(self.stack_symbols(pds), kind, self.yy.slice())

	pass

def new_parser() -> LispyParser:
	return LispyParser(_tables)

def parse_text(parser:LispyParser, text:str, report:Report, filename="<stdin>") -> Optional[syntax.Node]:
	""" Submit one line to the parser. On failure, file an issue with the report and return None. """
	if not text.strip():
		return syntax.root(())
	try:
		return parser.parse(text, filename=filename)
	except ParseError as ex:
		stack_symbols, lookahead, span = ex.args
		report.parse_error(text, filename, lookahead, span, _best_hint(stack_symbols, lookahead))

##########################
#
#  Advice for the confused, keyed on what's atop the parse stack
#  and what came next.
#

_vocabulary = set(_parse_table['terminals']).union(_parse_table['nonterminals'])
ETC = "???"
assert ETC not in _vocabulary
_advice_tree = {t:{} for t in _parse_table['terminals']}
_advice_tree[ETC] = {}

def _hint(path, text):
	def dig(where, what):
		if what not in where: where[what] = {}
		return where[what]
	symbols = path.split()
	node = dig(_advice_tree, symbols.pop())
	for symbol in reversed(symbols):
		if symbol == "●":
			continue
		if symbol == ETC:
			node[ETC] = True
		else:
			assert symbol in _vocabulary, symbol
			node = dig(node, symbol)
	node[''] = text

def _best_hint(stack_symbols, lookahead):
	best = None
	nodes = [_advice_tree[ETC]]
	if lookahead in _advice_tree:
		nodes.append(_advice_tree[lookahead])
		best = _advice_tree[lookahead].get('')
	for symbol in reversed(stack_symbols):
		subsequent = []
		for n in nodes:
			if symbol in n: subsequent.append(n[symbol])
			if ETC in n: subsequent.append(n)
		nodes = subsequent
		for n in nodes:
			if '' in n: best = n['']
	if best:
		return "Here's my best guess:\n\t"+best
	else:
		return "Parser state:\n\t"+" ".join(list(stack_symbols) + ["●", str(lookahead)])

_hint("open ??? ● <END>", "There seems to be a missing ')' closing parenthesis.")
_hint("??? ● close", "This ')' has no '(' to match.")
