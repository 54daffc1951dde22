"""cli -- run a where-clause over rows of JSON.
  python -m sqlwhere.cli "Salary > 60000 OR Salary IS NULL" employees.json
  echo '[{"Category":"Furniture"}]' | python -m sqlwhere.cli "@Cat IS NULL OR Category = @Cat" --param Cat=null --explain
"""

import argparse, logging, sys
import ujson
from . import misc, sqex, sqparse, weval

def parse_param(text):
  "NAME=VALUE -> ('@NAME', value). value is JSON if it parses, else a string."
  name, sep, raw = text.partition('=')
  if not sep or not name.lstrip('@'):
    raise argparse.ArgumentTypeError('want NAME=VALUE, got %r' % text)
  try: value = ujson.loads(raw)
  except ValueError: value = raw
  return '@' + name.lstrip('@'), value

def load_rows(p, fname):
  "returns list of dicts. p is the ArgumentParser, for error reporting."
  if fname is None: text = sys.stdin.read()
  else:
    try:
      with open(fname) as f: text = f.read()
    except OSError as e: p.error('cannot read rows: %s' % e)
  try: rows = ujson.loads(text)
  except ValueError as e: p.error('rows are not valid JSON: %s' % e)
  if not isinstance(rows, list) or not all(isinstance(row, dict) for row in rows):
    p.error('rows must be a JSON array of objects')
  return rows

def main(argv=None):
  p=argparse.ArgumentParser(description='filter JSON rows with a T-SQL style predicate (3-valued logic)')
  p.add_argument('predicate')
  p.add_argument('rows', nargs='?', help='JSON file with an array of objects. default stdin.')
  p.add_argument('--param', action='append', type=parse_param, default=[], help='NAME=VALUE, bound as @NAME')
  p.add_argument('--explain', action='store_true', help='print every row with its TRUE/FALSE/UNKNOWN result')
  p.add_argument('-v', '--verbose', action='store_true')
  args=p.parse_args(argv)
  logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)
  rows = load_rows(p, args.rows)
  params = dict(args.param)
  try:
    exp = sqparse.parse(args.predicate)
    logging.debug('predicate %r references %s', exp, weval.names_from_exp(exp))
    if args.explain:
      for row in rows:
        print('%s %s' % (sqex.evaluate(exp, weval.row_env(row, params)), ujson.dumps(row)))
    else:
      print(ujson.dumps(weval.filter_rows(exp, rows, params)))
  except misc.SqlWhereError as e:
    logging.error('in sqlwhere.cli: %s %s %s', misc.trace()[-8:], e.__class__.__name__, e)
    return 1
  return 0

if __name__=='__main__': sys.exit(main())
