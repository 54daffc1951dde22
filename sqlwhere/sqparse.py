"""parsing for where-clause predicates, in PLY.
this is the boolean part of T-SQL's WHERE grammar: and/or/not, comparisons, is [not] null, [not] in, [not] between, [not] like.
Arithmetic, function calls and subqueries aren't supported.
"""

import logging
import ply.lex, ply.yacc
from . import predx, misc, threevl

class SQLSyntaxError(misc.SqlWhereError):
  "bad character, unexpected token or early end of input"

KEYWORDS = {w:'kw_'+w for w in 'and or not is null in between like true false unknown'.split()}
TRUTH = {'true': threevl.TRUE, 'false': threevl.FALSE, 'unknown': threevl.UNKNOWN}

class SqlGrammar:
  start = 'expression'
  t_CMP = r'<>|!=|<=|>=|<|>|='
  literals = ('(', ')', ',', '.')
  t_ignore = ' \r\n\t'

  # note: function tokens are tried in definition order, so STRLIT (N'...') has to come before NAME
  def t_STRLIT(self,t):
    r"N?'(?:[^']|'')*'"
    t.value = t.value[t.value.index("'")+1:-1].replace("''", "'")
    return t
  def t_FLOATLIT(self,t):
    r'-?\d+\.\d+'
    t.value = float(t.value)
    return t
  def t_INTLIT(self,t):
    r'-?\d+'
    t.value = int(t.value)
    return t
  def t_VAR(self,t):
    r'@\w+'
    return t
  def t_NAME(self,t):
    r'[A-Za-z_]\w*'
    t.type = KEYWORDS.get(t.value.lower(), 'NAME')
    return t
  def t_error(self,t): raise SQLSyntaxError('bad_char', t.value[0], t.lexpos)

  tokens = (
    'STRLIT','FLOATLIT','INTLIT','VAR','NAME',
    'CMP',
  ) + tuple(KEYWORDS.values())
  precedence = (
    ('left','kw_or'),
    ('left','kw_and'),
    ('right','kw_not'),
  )

  def p_or(self,t): "expression : expression kw_or expression"; t[0] = predx.Or(t[1],t[3])
  def p_and(self,t): "expression : expression kw_and expression"; t[0] = predx.And(t[1],t[3])
  def p_not(self,t): "expression : kw_not expression"; t[0] = predx.Not(t[2])
  def p_paren(self,t): "expression : '(' expression ')'"; t[0] = t[2]
  def p_predicate(self,t): "expression : predicate \n | truthlit"; t[0] = t[1]
  def p_truthlit(self,t): "truthlit : kw_true \n | kw_false \n | kw_unknown"; t[0] = predx.Literal(TRUTH[t[1].lower()])
  def p_comparison(self,t):
    "predicate : operand CMP operand"
    t[0] = predx.Comparison(t[1], t[2], t[3])
  def p_isnull(self,t):
    """predicate : operand kw_is kw_null
                 | operand kw_is kw_not kw_null
    """
    t[0] = predx.IsNull(t[1]) if len(t) == 4 else predx.IsNotNull(t[1])
  def p_in(self,t):
    """predicate : operand kw_in '(' operandlist ')'
                 | operand kw_not kw_in '(' operandlist ')'
    """
    if len(t) == 6: t[0] = predx.In(t[1], t[4], False)
    else: t[0] = predx.In(t[1], t[5], True)
  def p_between(self,t):
    """predicate : operand kw_between operand kw_and operand
                 | operand kw_not kw_between operand kw_and operand
    """
    if len(t) == 6: t[0] = predx.Between(t[1], t[3], t[5], False)
    else: t[0] = predx.Between(t[1], t[4], t[6], True)
  def p_like(self,t):
    """predicate : operand kw_like operand
                 | operand kw_not kw_like operand
    """
    if len(t) == 4: t[0] = predx.Like(t[1], t[3], False)
    else: t[0] = predx.Like(t[1], t[4], True)
  def p_operand_name(self,t): "operand : NAME \n | VAR"; t[0] = predx.NameX(t[1])
  def p_operand_attr(self,t): "operand : NAME '.' NAME"; t[0] = predx.AttrX(t[1], t[3])
  def p_operand_lit(self,t): "operand : STRLIT \n | FLOATLIT \n | INTLIT"; t[0] = t[1]
  def p_operand_null(self,t): "operand : kw_null"; t[0] = None
  def p_operandlist(self,t):
    """operandlist : operandlist ',' operand
                   | operand
    """
    t[0] = [t[1]] if len(t) == 2 else t[1] + [t[3]]

  def p_error(self,t):
    if t is None: raise SQLSyntaxError('unexpected_end')
    raise SQLSyntaxError('unexpected', t.type, t.value, t.lexpos)

LEXER = ply.lex.lex(module=SqlGrammar())
def lex(string):
  "this is only used by tests"
  safe_lexer = LEXER.clone()
  safe_lexer.input(string)
  a = []
  while 1:
    t = safe_lexer.token()
    if t: a.append(t)
    else: break
  return a

YACC = ply.yacc.yacc(module=SqlGrammar(),debug=0,write_tables=0)
def parse(string):
  "return a predx tree for the string"
  logging.debug('sqparse.parse %r', string)
  return YACC.parse(string, lexer=LEXER.clone())
