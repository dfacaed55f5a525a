"""
The overall control for one interactive session:
For each line, parse it, read the tree, evaluate, render the result, and then release everything.
"""
from typing import Optional
from .diagnostics import Report
from .front_end import LispyParser, new_parser, parse_text
from .reader import read
from .evaluator import evaluate
from .printer import show
from .values import Value, Error, destroy

class Session:
	"""
	Owns the parser for as long as the session lasts.
	Nothing carries over from one line to the next.
	"""
	parser: Optional[LispyParser]

	def __init__(self, report:Report, filename="<stdin>"):
		self.report = report
		self.filename = filename
		self.parser = new_parser()
		self.error_count = 0

	def close(self):
		self.parser = None

	def __enter__(self): return self
	def __exit__(self, *exc_info): self.close()

	def _read(self, text:str) -> Optional[Value]:
		assert self.parser is not None, "This session is closed."
		node = parse_text(self.parser, text, self.report, self.filename)
		if node is None: return None
		try: tree = read(node)
		except RecursionError: return self._too_deep()
		if self.report.verbose:
			try: self.report.info("Read:", show(tree))
			except RecursionError: self.report.info("Read something too deep to show.")
		return tree

	def _too_deep(self) -> None:
		self.report.too_deep(self.filename)
		return None

	def rep(self, text:str) -> Optional[str]:
		""" Read, evaluate, and print one line. None means there was a problem; see the report. """
		tree = self._read(text)
		if tree is None: return None
		result = None
		try:
			result = evaluate(tree)
			if isinstance(result, Error): self.error_count += 1
			return show(result)
		except RecursionError: return self._too_deep()
		finally:
			released = destroy(tree)
			if result is not None: released += destroy(result)
			self.report.info("Released", released, "values.")

	def read_only(self, text:str) -> Optional[str]:
		""" Read and print one line, without evaluating it. """
		tree = self._read(text)
		if tree is None: return None
		try: return show(tree)
		except RecursionError: return self._too_deep()
		finally: destroy(tree)
