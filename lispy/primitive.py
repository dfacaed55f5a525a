"""
The primitive arithmetic, with the overflow behavior of a 64-bit C long:
Results wrap around in two's complement, and division truncates toward zero.
"""

WIDTH = 64
LONG_MIN = -(1 << (WIDTH - 1))
LONG_MAX = (1 << (WIDTH - 1)) - 1
_MODULUS = 1 << WIDTH

def in_range(n:int) -> bool:
	return LONG_MIN <= n <= LONG_MAX

def wrap(n:int) -> int:
	return (n - LONG_MIN) % _MODULUS + LONG_MIN

def _add(a, b): return wrap(a + b)
def _sub(a, b): return wrap(a - b)
def _mul(a, b): return wrap(a * b)

def _div(a, b):
	""" Raises ZeroDivisionError for b == 0, as Python's own division would. """
	q = abs(a) // abs(b)
	return wrap(q if (a < 0) == (b < 0) else -q)

ops = {
	"+": _add,
	"-": _sub,
	"*": _mul,
	"/": _div,
}
