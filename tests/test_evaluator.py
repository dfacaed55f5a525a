import unittest
from unittest import mock

from lispy import evaluator, values
from lispy.evaluator import evaluate, fold
from lispy.printer import show
from lispy.values import (
	Number, Error, SExpression, Fault,
	make_number, make_error, make_symbol, make_sexpr, append, walk,
)

def sx(*items):
	""" Build an s-expression from a compact Python description. """
	it = make_sexpr()
	for item in items:
		if isinstance(item, tuple): item = sx(*item)
		elif isinstance(item, int): item = make_number(item)
		elif isinstance(item, str): item = make_symbol(item)
		append(it, item)
	return it

class ArithmeticTests(unittest.TestCase):

	def expect(self, cases):
		for tree, expected in cases:
			with self.subTest(show(tree)):
				self.assertEqual(expected, show(evaluate(tree)))

	def test_the_four_operators(self):
		self.expect([
			(sx("+", 1, 2), "3"),
			(sx("-", 1, 2), "-1"),
			(sx("*", 6, 7), "42"),
			(sx("/", 10, 3), "3"),
			(sx("+", 1, 2, 3, 4), "10"),
			(sx("*", 1, 2, 3, 4), "24"),
		])

	def test_fold_is_left_to_right(self):
		self.assertEqual(make_number(5), evaluate(sx("-", 10, 2, 3)))
		self.assertEqual(make_number(5), evaluate(sx("/", 100, 10, 2)))

	def test_single_operand_is_returned_as_is(self):
		self.assertEqual(make_number(5), evaluate(sx("-", 5)))
		self.assertEqual(make_number(-5), evaluate(sx("/", -5)))

	def test_nesting(self):
		self.expect([
			(sx("+", 1, ("*", 2, 3)), "7"),
			(sx("-", ("+", 10, 10), ("/", 8, ("-", 5, 1))), "18"),
		])

	def test_division_truncates_toward_zero(self):
		self.expect([
			(sx("/", 7, 2), "3"),
			(sx("/", -7, 2), "-3"),
			(sx("/", 7, -2), "-3"),
			(sx("/", -7, -2), "3"),
		])

	def test_wraparound_at_64_bits(self):
		big = 9223372036854775807
		self.expect([
			(sx("+", big, 1), "-9223372036854775808"),
			(sx("*", big, 2), "-2"),
			(sx("-", -big, 2), "9223372036854775807"),
			(sx("/", -big - 1, -1), "-9223372036854775808"),
		])

class ErrorTests(unittest.TestCase):

	def test_division_by_zero(self):
		it = evaluate(sx("/", 10, 0))
		self.assertEqual(Error("Division by zero", Fault.DIVISION_BY_ZERO), it)
		self.assertEqual("error: Division by zero", show(evaluate(sx("/", 10, 5, 0, 2))))

	def test_first_error_short_circuits(self):
		tree = sx("+", 1, ("/", 2, 0), 3)
		self.assertEqual("error: Division by zero", show(evaluate(tree)))
		seen = []
		class Spy(evaluator.Evaluator):
			def visit_Number(self, n):
				seen.append(n.value)
				return super().visit_Number(n)
		self.assertEqual("error: Division by zero", show(Spy().visit(tree)))
		self.assertEqual([1, 2, 0], seen)
		# Later operands would have been errors of their own, but never get the chance:
		self.assertEqual("error: Division by zero", show(evaluate(sx("+", 1, ("/", 2, 0), "x", ("%", 1)))))

	def test_operand_errors_win_over_the_fold(self):
		# Operands are all evaluated before the fold begins.
		self.assertEqual("error: unbound symbol", show(evaluate(sx("/", 1, 0, "x"))))

	def test_invalid_operator(self):
		self.assertEqual(make_error("invalid operator", Fault.INVALID_OPERATOR), evaluate(sx("%", 1, 2)))

	def test_not_an_application(self):
		for tree in [sx(1, 2, 3), sx(("+", 1, 2)), sx(())]:
			with self.subTest(show(tree)):
				self.assertEqual("error: S-Expression does not start with symbol", show(evaluate(tree)))

	def test_bare_symbols_are_unbound(self):
		self.assertEqual("error: unbound symbol", show(evaluate(make_symbol("x"))))
		self.assertEqual("error: unbound symbol", show(evaluate(sx("+", 1, "-"))))

	def test_no_operands(self):
		self.assertIs(Fault.NO_OPERANDS, evaluate(sx("+")).fault)
		self.assertIs(Fault.INVALID_OPERATOR, evaluate(sx("?")).fault)

	def test_non_numbers_in_the_fold(self):
		self.assertIs(Fault.NOT_A_NUMBER, evaluate(sx("+", 1, ())).fault)
		self.assertIs(Fault.NOT_A_NUMBER, evaluate(sx("-", ())).fault)

	def test_errors_read_into_the_tree_propagate(self):
		tree = sx("+", 1)
		append(tree, make_error("invalid number", Fault.INVALID_NUMBER))
		self.assertEqual("error: invalid number", show(evaluate(tree)))

class TerminalValueTests(unittest.TestCase):

	def test_leaves_evaluate_to_fresh_equals(self):
		for leaf in [make_number(3), make_error("bad")]:
			with self.subTest(repr(leaf)):
				it = evaluate(leaf)
				self.assertEqual(leaf, it)
				self.assertIsNot(leaf, it)

	def test_empty_list_is_itself(self):
		empty = make_sexpr()
		it = evaluate(empty)
		self.assertIsInstance(it, SExpression)
		self.assertEqual(0, len(it))
		self.assertIsNot(empty, it)

	def test_input_is_left_alone(self):
		tree = sx("-", ("+", 1, 2), ("/", 9, 3))
		before = show(tree)
		nodes = [id(n) for n in walk(tree)]
		evaluate(tree)
		self.assertEqual(before, show(tree))
		self.assertEqual(nodes, [id(n) for n in walk(tree)])

	def test_result_shares_nothing_with_input(self):
		tree = sx("+", 5)
		it = evaluate(tree)
		self.assertNotIn(id(it), [id(n) for n in walk(tree)])

class IntermediateValueTests(unittest.TestCase):
	""" Every value the evaluator makes along the way is destroyed, except the one it returns. """

	def setUp(self) -> None:
		self.made = []
		patches = []
		for name in ["make_number", "make_error", "make_fault", "make_sexpr"]:
			patches.append(mock.patch.object(evaluator, name, self.recorder(getattr(values, name))))
		for p in patches:
			p.start()
			self.addCleanup(p.stop)

	def recorder(self, make):
		def record(*args):
			it = make(*args)
			self.made.append(it)
			return it
		return record

	def leftovers(self, result):
		return [v for v in self.made if v is not result and not v.released]

	def test_operands_are_released_after_the_fold(self):
		result = evaluate(sx("-", ("+", 1, 2), ("/", 9, 3), 4))
		self.assertEqual(make_number(-4), result)
		self.assertEqual([], self.leftovers(result))
		self.assertFalse(result.released)

	def test_operands_are_released_when_an_error_cuts_things_short(self):
		result = evaluate(sx("+", 1, ("*", 2, 3), ("/", 4, 0), 5))
		self.assertIs(Fault.DIVISION_BY_ZERO, result.fault)
		self.assertEqual([], self.leftovers(result))

	def test_non_numbers_are_released_too(self):
		result = evaluate(sx("+", 1, (), 2))
		self.assertIs(Fault.NOT_A_NUMBER, result.fault)
		self.assertEqual([], self.leftovers(result))

class FoldTests(unittest.TestCase):

	def test_fold_directly(self):
		self.assertEqual(Number(2), fold("-", [Number(5), Number(3)]))
		self.assertIs(Fault.NO_OPERANDS, fold("+", []).fault)

if __name__ == '__main__':
	unittest.main()
