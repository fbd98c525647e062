# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Printing helpers for command line tools. The table library itself never prints.
'''

from sys import stderr
from typing import Any, NoReturn, TextIO


def writeL(file:TextIO, *items:Any, sep='', flush=False) -> None:
  "Write `items` to file; sep='', end='\\n'."
  print(*items, sep=sep, end='\n', file=file, flush=flush)


def errL(*items:Any, sep='', flush=False) -> None:
  "Write items to std err; sep='', end='\\n'."
  print(*items, sep=sep, end='\n', file=stderr, flush=flush)


def errSL(*items:Any, flush=False) -> None:
  "Write items to std err; sep=' ', end='\\n'."
  print(*items, sep=' ', end='\n', file=stderr, flush=flush)


def exit_error(prog:str, *items:Any, status=1) -> NoReturn:
  'Print an error message labeled with `prog` to std err and exit with `status`.'
  errSL(f'{prog}: error:', *items)
  exit(status)
