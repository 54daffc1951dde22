"""predx -- expression tree for where-clause predicates.
Operands (of Comparison, IsNull, In etc) are either NameX (looked up in the environment at evaluation time)
or a raw scalar, with None standing in for sql NULL.
"""

from . import treepath, threevl

class BaseX(treepath.PathTree):
  "base class for expressions. instances are immutable."
  ATTRS = ()
  VARLEN = ()
  def __init__(self, *args):
    if len(args) != len(self.ATTRS): raise TypeError('wrong_n_args', len(args), len(self.ATTRS), args)
    for attr, arg in zip(self.ATTRS, args):
      object.__setattr__(self, attr, tuple(arg) if attr in self.VARLEN else arg)
  def __setattr__(self, attr, value):
    raise AttributeError('immutable', self.__class__.__name__, attr)
  def __eq__(self, other):
    return type(self) is type(other) and all(getattr(self, attr) == getattr(other, attr) for attr in self.ATTRS)
  def __hash__(self):
    return hash((self.__class__.__name__,) + tuple(getattr(self, attr) for attr in self.ATTRS))
  def __repr__(self):
    return '%s(%s)' % (self.__class__.__name__, ','.join(map(repr, (getattr(self, attr) for attr in self.ATTRS))))

class NameX(BaseX): ATTRS = ('name',)
class AttrX(BaseX):
  "qualified column like o.StatusID. parent and attr are strings."
  ATTRS = ('parent', 'attr')
  @property
  def name(self): return '%s.%s' % (self.parent, self.attr)

class Literal(BaseX):
  "a truth value in the tree (not a scalar; scalars are raw operands)"
  ATTRS = ('val',)
  def __init__(self, val):
    if not isinstance(val, threevl.ThreeVL): raise TypeError('literal needs ThreeVL', type(val))
    super().__init__(val)

class Comparison(BaseX):
  ATTRS = ('left', 'op', 'right')
  def __init__(self, left, op, right):
    if op not in threevl.OPERATORS: raise ValueError('unk_op', op)
    super().__init__(left, op, right)

class IsNull(BaseX): ATTRS = ('operand',)
class IsNotNull(BaseX): ATTRS = ('operand',)

class And(BaseX): ATTRS = ('left', 'right')
class Or(BaseX): ATTRS = ('left', 'right')
class Not(BaseX): ATTRS = ('operand',)

class In(BaseX):
  ATTRS = ('operand', 'vals', 'negated')
  VARLEN = ('vals',)
  def __init__(self, operand, vals, negated=False):
    super().__init__(operand, vals, negated)

class Between(BaseX):
  ATTRS = ('operand', 'low', 'high', 'negated')
  def __init__(self, operand, low, high, negated=False):
    super().__init__(operand, low, high, negated)

class Like(BaseX):
  ATTRS = ('operand', 'pattern', 'negated')
  def __init__(self, operand, pattern, negated=False):
    super().__init__(operand, pattern, negated)
