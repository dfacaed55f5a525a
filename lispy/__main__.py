"""
So that `python -m lispy` does just what the `lispy` command does.
"""
from .cmdline import main

main()
