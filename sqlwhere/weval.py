"weval -- where-clause evaluation. a row is kept iff its predicate is TRUE; FALSE and UNKNOWN both drop it."

import collections, logging
from . import predx, sqex, sqparse, treepath
from .threevl import ThreeVL

def names_from_exp(exp):
  "Return the distinct variable names referenced by the expression, in order of first use."
  def match(exp):
    return isinstance(exp, (predx.NameX, predx.AttrX))
  paths = treepath.sub_slots(exp, match, match=True, recurse_into_matches=False)
  return list(collections.OrderedDict.fromkeys(exp[path].name for path in paths))

def row_env(row, params):
  "row values shadow params. params is for @variables."
  return collections.ChainMap(row, params) if params else row

def select_row(exp, row, params=None):
  return ThreeVL.test(sqex.evaluate(exp, row_env(row, params)))

def filter_rows(exp, rows, params=None):
  "exp is a predx tree or predicate text. returns the selected rows in their original order."
  if isinstance(exp, str):
    exp = sqparse.parse(exp)
  rows = list(rows)
  ret = [row for row in rows if select_row(exp, row, params)]
  logging.debug('filter_rows kept %d of %d', len(ret), len(rows))
  return ret
