"""
Lispy: parenthesized prefix arithmetic on 64-bit integers.
"""
