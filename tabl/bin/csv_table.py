# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

import csv
from argparse import ArgumentParser
from sys import stdin, stdout
from typing import Iterable, Sequence, TextIO

from tabl.io import errL, exit_error, writeL
from tabl.table import Table


def main(argv:list[str]|None=None) -> None:
  arg_parser = ArgumentParser(prog='csv-table', description='Render CSV or TSV data as an HTML table.')
  arg_parser.add_argument('path', nargs='?', default='-', help='Input file path, or - for stdin. (default: -)')
  arg_parser.add_argument('-tsv', action='store_true', help='Parse tab-separated input.')
  arg_parser.add_argument('-header', action='store_true', help='Put the first record in the table head.')
  arg_parser.add_argument('-footer', action='store_true', help='Put the last record in the table foot.')
  arg_parser.add_argument('-class', dest='classes', action='append', help='Class for the table element; may be repeated.')
  arg_parser.add_argument('-id', help='ID for the table element.')
  arg_parser.add_argument('-o', dest='output', default='-', help='Output file path, or - for stdout. (default: -)')
  arg_parser.add_argument('-dbg', action='store_true', help='Print a summary of the table to stderr.')
  args = arg_parser.parse_args(argv)

  if args.path == '-':
    f_in:TextIO = stdin
  else:
    try: f_in = open(args.path, newline='')
    except OSError as e: exit_error(arg_parser.prog, f'could not open input: {args.path}: {e.strerror}')

  with f_in:
    try: records = read_records(f_in, tsv=args.tsv)
    except csv.Error as e: exit_error(arg_parser.prog, f'{args.path}: {e}')

  table = table_from_records(records, header=args.header, footer=args.footer, classes=(args.classes or ()), id=args.id)
  if args.dbg:
    errL(f'{args.path}: {len(records)} records; {table!r}')

  if args.output == '-':
    f_out:TextIO = stdout
  else:
    try: f_out = open(args.output, 'w')
    except OSError as e: exit_error(arg_parser.prog, f'could not open output: {args.output}: {e.strerror}')
  with f_out:
    writeL(f_out, table.render())


def read_records(f:TextIO, tsv=False) -> list[list[str]]:
  'Read all CSV (or TSV) records from `f`.'
  reader = csv.reader(f, dialect=('excel-tab' if tsv else 'excel'))
  return list(reader)


def table_from_records(records:Sequence[Sequence[str]], header=False, footer=False, classes:Iterable[str]=(),
 id:str|None=None) -> Table:
  '''
  Build a table from records.
  If `header` is true, the first record goes into the head; if `footer` is true, the last remaining record goes into the foot.
  All other records become body rows.
  '''
  table = Table()
  for cl in classes:
    table.add('class', cl)
  if id is not None: table.set('id', id)

  records = list(records)
  if header and records:
    table.head.add_row(records.pop(0))
  foot_record = records.pop() if (footer and records) else None
  for record in records:
    table.add_row(record)
  if foot_record is not None:
    table.foot.add_row(foot_record)
  return table


if __name__ == '__main__': main()
