import sys, random
from typing import Any

from boozetools.support.failureprone import SourceText, illustration

class TooManyIssues(Exception):
	pass

def _outburst():
	particle = ["Oh, ", "Well, ", "Hmm, ", "", ""]

	exclamations = [
		'Blast', 'Bother', 'Confound it', 'Drat', 'Egad', 'Fiddlesticks',
		'Gadzooks', 'Good Grief', 'Horsefeathers', 'Nuts', 'Phooey', 'Rats',
	]

	resignations = [
		'That does not parse.',
		'The parentheses have gotten the better of me.',
		'I cannot make a tree out of that.',
	]

	return "%s%s! %s"%tuple(map(random.choice, (particle, exclamations, resignations)))

class Report:
	""" Collects whatever keeps a line from producing a value, and chatters on request. """
	_issues : list["Pic"]

	def __init__(self, *, verbose:int=0, max_issues=3):
		self._verbose = verbose or 0   # Because None is incomparable.
		self._issues = []
		self._max_issues = max_issues

	@property
	def verbose(self): return self._verbose

	def ok(self): return not self._issues
	def sick(self): return bool(self._issues)

	@property
	def issues(self): return tuple(self._issues)

	def issue(self, it:Any):
		self._issues.append(it)
		if len(self._issues) == self._max_issues:
			raise TooManyIssues(self)

	def reset(self):
		self._issues.clear()

	def info(self, *args):
		if self._verbose:
			print(*args, file=sys.stderr)

	def complain_to_console(self):
		""" Emit all the issues to the console. """
		_bemoan(self._issues)

	# Methods the front-end and the session are likely to call:
	def parse_error(self, text:str, filename:str, kind, span:slice, hint:str):
		intro = "Lispy got confused by %s." % kind
		problem = [Annotation(text, span, "Lispy got confused here")]
		self.issue(Pic(intro, filename, problem, [hint]))

	def too_deep(self, filename:str):
		intro = "Lispy cannot follow parentheses nested that deeply."
		self.issue(Pic(intro, filename, [], ["Try breaking the expression into smaller pieces."]))

class Annotation:
	text: str
	slice: slice
	caption: str
	def __init__(self, text:str, where:slice, caption:str=""):
		self.text = text
		self.slice = where
		self.caption = caption
	def illustrate(self):
		source = SourceText(self.text)
		row, col = source.find_row_col(self.slice.start)
		single_line = source.line_of_text(row)
		width = max(1, self.slice.stop - self.slice.start)
		return illustration(single_line, col, width, prefix='% 6d |' % row, caption=self.caption)

class Pic:
	def __init__(self, intro:str, filename:str, anns:list[Annotation], footer=()):
		self._intro, self._filename, self._anns, self._footer = intro, filename, anns, footer
	@property
	def description(self): return self._intro
	def as_text(self):
		lines = [self._intro, "", self._filename]
		lines.extend(ann.illustrate() for ann in self._anns)
		lines.extend(self._footer)
		return '\n'.join(lines)

def _bemoan(issues):
	""" Emit all the issues to the console. """
	if issues:
		print("*"*60, file=sys.stderr)
		print(_outburst(), file=sys.stderr)
	for i in issues:
		print("  -"*20, file=sys.stderr)
		print(i.as_text(), file=sys.stderr)
	sys.stderr.flush()
