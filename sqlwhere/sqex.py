"expression evaluation. evaluate() walks a predx tree against an environment (name -> nullable scalar) and returns a ThreeVL."

from . import predx, misc
from .threevl import ThreeVL, TRUE, FALSE

class UnboundVariable(misc.SqlWhereError):
  "name referenced by the expression isn't in the environment"

class Evaluator:
  def __init__(self, env):
    "env is a mapping of name -> value, None for null"
    self.env = env

  def resolve(self, operand):
    "NameX/AttrX get looked up; anything else is already a value. AttrX tries 'o.col' then falls back to 'col'."
    if isinstance(operand, predx.NameX):
      keys = (operand.name,)
    elif isinstance(operand, predx.AttrX):
      keys = (operand.name, operand.attr)
    else:
      return operand
    for key in keys:
      if key in self.env: return self.env[key]
    raise UnboundVariable(operand.name)

  def eval_andor(self, exp):
    "short-circuits on the dominant value; otherwise combines with the kleene table"
    op = 'and' if isinstance(exp, predx.And) else 'or'
    left = self.eval(exp.left)
    if op == 'and' and left == FALSE: return FALSE
    if op == 'or' and left == TRUE: return TRUE
    return ThreeVL.andor(op, left, self.eval(exp.right))

  def eval_in(self, exp):
    "x in (a,b,c) is x=a or x=b or x=c"
    val = self.resolve(exp.operand)
    ret = FALSE
    for item in exp.vals:
      ret = ThreeVL.andor('or', ret, ThreeVL.compare('=', val, self.resolve(item)))
      if ret == TRUE: break
    return ret

  def eval_between(self, exp):
    val = self.resolve(exp.operand)
    return ThreeVL.andor(
      'and',
      ThreeVL.compare('>=', val, self.resolve(exp.low)),
      ThreeVL.compare('<=', val, self.resolve(exp.high)),
    )

  def eval_negatable(self, exp):
    "dispatch for the ops that take an optional NOT"
    if isinstance(exp, predx.In): ret = self.eval_in(exp)
    elif isinstance(exp, predx.Between): ret = self.eval_between(exp)
    else: ret = ThreeVL.like(self.resolve(exp.operand), self.resolve(exp.pattern))
    return ThreeVL.nein(ret) if exp.negated else ret

  def eval(self, exp):
    "main dispatch for expression evaluation"
    if isinstance(exp, predx.Literal): return exp.val
    elif isinstance(exp, predx.Comparison):
      return ThreeVL.compare(exp.op, self.resolve(exp.left), self.resolve(exp.right))
    elif isinstance(exp, predx.IsNull): return ThreeVL.from_bool(self.resolve(exp.operand) is None)
    elif isinstance(exp, predx.IsNotNull): return ThreeVL.from_bool(self.resolve(exp.operand) is not None)
    elif isinstance(exp, (predx.And, predx.Or)): return self.eval_andor(exp)
    elif isinstance(exp, predx.Not): return ThreeVL.nein(self.eval(exp.operand))
    elif isinstance(exp, (predx.In, predx.Between, predx.Like)): return self.eval_negatable(exp)
    else: raise TypeError('not a predicate', type(exp), exp)

def evaluate(exp, env):
  "returns TRUE, FALSE or UNKNOWN. raises UnboundVariable or threevl.TypeMismatch."
  return Evaluator(env).eval(exp)
