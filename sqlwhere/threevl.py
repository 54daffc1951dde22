"3-value logic (i.e. the way that boolean ops on nulls propagate up in the expression tree in SQL). doesn't rhyme with 'evil' but should."

import re, datetime, decimal, functools, operator
from . import misc

class TypeMismatch(misc.SqlWhereError):
  "comparison between values of incompatible families (e.g. text vs number). no implicit conversion is attempted."

OPERATORS = {
  '=': operator.eq,
  '<>': operator.ne,
  '!=': operator.ne,
  '<': operator.lt,
  '>': operator.gt,
  '<=': operator.le,
  '>=': operator.ge,
}

def type_family(val):
  "which comparable family a non-null scalar belongs to"
  # note: bool is BIT, i.e. numeric. datetime before date because it's a subclass.
  if isinstance(val, (bool, int, float, decimal.Decimal)): return 'number'
  elif isinstance(val, str): return 'text'
  elif isinstance(val, datetime.datetime): return 'datetime'
  elif isinstance(val, datetime.date): return 'date'
  elif isinstance(val, datetime.time): return 'time'
  else: raise TypeMismatch('unsupported_type', type(val), val)

def like_class(body):
  "helper for like_regex. body is the text between [ and ]. returns regex or None if it's not a usable class."
  negate = body.startswith('^')
  if negate: body = body[1:]
  if not body: return None
  items = []
  i = 0
  while i < len(body):
    if i + 2 < len(body) and body[i+1] == '-':
      lo, hi = body[i], body[i+2]
      # a reversed range like z-a is legal in T-SQL and matches nothing
      if lo <= hi: items.append('%s-%s' % (re.escape(lo), re.escape(hi)))
      i += 3
    else:
      items.append(re.escape(body[i]))
      i += 1
  if not items: return '.' if negate else '(?!)'
  return '[%s%s]' % ('^' if negate else '', ''.join(items))

@functools.lru_cache(maxsize=256)
def like_regex(pattern):
  "translate a T-SQL LIKE pattern (% _ [abc] [^abc]) into a compiled regex"
  parts = []
  i = 0
  while i < len(pattern):
    c = pattern[i]
    close = pattern.find(']', i + 1) if c == '[' else -1
    cls = like_class(pattern[i+1:close]) if close != -1 else None
    if c == '%': parts.append('.*')
    elif c == '_': parts.append('.')
    elif cls is not None:
      parts.append(cls)
      i = close
    else: parts.append(re.escape(c)) # includes an unclosed '['
    i += 1
  return re.compile(''.join(parts), re.DOTALL)

class ThreeVL:
  """Implementation of sql's 3VL. == compares 3VL values with each other, never with python bools.
  There's deliberately no truth value; ThreeVL.test() is the where-clause collapse.
  """
  NAMES = {'t': 'TRUE', 'f': 'FALSE', 'u': 'UNKNOWN'}

  def __init__(self, value):
    if value not in ('t', 'f', 'u'):
      raise ValueError(value)
    self.value = value

  def __repr__(self):
    return "<3vl %s>" % self.value

  def __str__(self):
    return self.NAMES[self.value]

  def __eq__(self, other):
    if not isinstance(other, ThreeVL):
      return NotImplemented
    return self.value == other.value

  def __hash__(self):
    return hash(self.value)

  def __bool__(self):
    raise TypeError("3vl has no python truth value, use ThreeVL.test()", self)

  @staticmethod
  def from_bool(item):
    return TRUE if item else FALSE

  @staticmethod
  def check(item):
    if not isinstance(item, ThreeVL):
      raise TypeError(type(item))
    return item

  @staticmethod
  def test(item):
    "this is the top-level output to SQL 'where' tests. At this level, 'u' *is* false"
    return ThreeVL.check(item).value == 't'

  @staticmethod
  def nein(item):
    "this is 'not' but not is a keyword so it's 'nein'"
    return dict(t=FALSE, f=TRUE, u=UNKNOWN)[ThreeVL.check(item).value]

  @staticmethod
  def andor(operator, left, right):
    "kleene and/or. https://en.wikipedia.org/wiki/Three-valued_logic#Kleene_logic"
    if operator not in ('and', 'or'):
      raise ValueError('unk_operator', operator)
    vals = ThreeVL.check(left), ThreeVL.check(right)
    if operator == 'and':
      if FALSE in vals: return FALSE
      if UNKNOWN in vals: return UNKNOWN
      return TRUE
    else:
      if TRUE in vals: return TRUE
      if UNKNOWN in vals: return UNKNOWN
      return FALSE

  @staticmethod
  def compare(operator, left, right):
    "null on either side is unknown. mismatched families raise TypeMismatch rather than guessing a cast."
    if operator not in OPERATORS:
      raise ValueError('unk operator in compare', operator)
    if left is None or right is None:
      return UNKNOWN
    if type_family(left) != type_family(right):
      raise TypeMismatch('families', operator, left, right)
    return ThreeVL.from_bool(OPERATORS[operator](left, right))

  @staticmethod
  def like(value, pattern):
    if value is None or pattern is None:
      return UNKNOWN
    if not isinstance(value, str) or not isinstance(pattern, str):
      raise TypeMismatch('like_needs_text', value, pattern)
    return ThreeVL.from_bool(like_regex(pattern).fullmatch(value) is not None)

TRUE = ThreeVL('t')
FALSE = ThreeVL('f')
UNKNOWN = ThreeVL('u')
