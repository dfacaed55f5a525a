"""
This is an interpreter for Lispy, which does prefix arithmetic on integers.

For example:

    lispy -e "+ 1 (* 2 3)"

will print 7, and

    lispy

with no arguments starts an interactive session.

    lispy -h

will explain all the arguments.
"""
import sys, argparse
from pathlib import Path

BANNER = "Lispy version 0.0.0.0.1\nPress Ctrl+C to exit\n"
PROMPT = "lispy> "
# The tree-walkers spend a few frames per level of nesting.
RECURSION_LIMIT = 5_000

parser = argparse.ArgumentParser(
	prog="lispy",
	description="Interpreter for Lispy, a tiny prefix-arithmetic language.",
	epilog=__doc__,
	formatter_class=argparse.RawDescriptionHelpFormatter,
)
parser.add_argument("program", nargs="?", help="A file of expressions, evaluated one line at a time.")
parser.add_argument('-e', "--expr", help="Evaluate this one expression and exit.")
parser.add_argument('-r', "--read-only", action="store_true", help="Print what was read, without evaluating it.")
parser.add_argument('-v', "--verbose", action="count", help="Explain the goings-on to stderr.")

def run(args):
	from .diagnostics import Report, TooManyIssues
	from .executive import Session
	report = Report(verbose=args.verbose)
	filename = args.program or "<stdin>"
	with Session(report, filename) as session:
		step = session.read_only if args.read_only else session.rep
		try:
			if args.expr is not None:
				return _one_line(step, report, args.expr) or (1 if session.error_count else 0)
			if args.program:
				return _whole_file(step, report, Path(args.program))
			return _interact(step, report)
		except TooManyIssues:
			report.complain_to_console()
			print(" *"*35, file=sys.stderr)
			print("Giving up after a few issues. One crisis at a time, eh?", file=sys.stderr)
			return 1

def _one_line(step, report, text):
	result = step(text)
	if result is None:
		report.complain_to_console()
		return 1
	print(result)

def _whole_file(step, report, path:Path):
	report.info("Reading", path)
	try:
		with open(path, "r", encoding="utf-8") as fh:
			lines = fh.read().splitlines()
	except OSError as ex:
		print("Could not read %s: %s"%(path, ex), file=sys.stderr)
		return 1
	for line in lines:
		if not line.strip(): continue
		result = step(line)
		if result is not None: print(result)
	if report.sick():
		report.complain_to_console()
		return 1

def _interact(step, report):
	try:
		import readline as _  # For line editing and history at the prompt.
	except ImportError:
		pass
	print(BANNER)
	while True:
		try: line = input(PROMPT)
		except (EOFError, KeyboardInterrupt):
			print()
			return
		result = step(line)
		if result is None:
			report.complain_to_console()
			report.reset()
		else:
			print(result)

def main():
	sys.setrecursionlimit(max(RECURSION_LIMIT, sys.getrecursionlimit()))
	exit(run(parser.parse_args()))
