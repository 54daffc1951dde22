import datetime, decimal
import pytest
from sqlwhere.threevl import ThreeVL, TypeMismatch, TRUE, FALSE, UNKNOWN

def test_3vl_basics():
  with pytest.raises(ValueError): ThreeVL('bad value')
  assert ThreeVL('f')!=ThreeVL('t')
  assert ThreeVL('t')==TRUE
  assert [True,False,False]==[ThreeVL.test(ThreeVL(c)) for c in 'tfu']
  assert list(map(ThreeVL,'ftu'))==[ThreeVL.nein(ThreeVL(c)) for c in 'tfu']
  assert [ThreeVL.from_bool(b) for b in (True,False)]==[TRUE,FALSE]
  assert str(UNKNOWN)=='UNKNOWN'

def test_3vl_no_bool():
  "unknown must never quietly become false"
  for val in (TRUE,FALSE,UNKNOWN):
    with pytest.raises(TypeError): bool(val)
  assert TRUE!=True and FALSE!=False
  with pytest.raises(TypeError): ThreeVL.test(True)
  with pytest.raises(TypeError): ThreeVL.nein(None)
  with pytest.raises(TypeError): ThreeVL.andor('and',True,TRUE)

def test_3vl_andor():
  # https://en.wikipedia.org/wiki/Three-valued_logic#Kleene_logic
  TABLE=[
    ('and','tt','t'),
    ('and','tu','u'),
    ('and','tf','f'),
    ('and','ut','u'),
    ('and','uu','u'),
    ('and','uf','f'),
    ('and','fu','f'),
    ('and','ff','f'),
    ('or','tt','t'),
    ('or','tu','t'),
    ('or','tf','t'),
    ('or','ut','t'),
    ('or','uu','u'),
    ('or','uf','u'),
    ('or','fu','u'),
    ('or','ff','f'),
  ]
  for op,(a,b),res in TABLE:
    assert ThreeVL(res)==ThreeVL.andor(op,ThreeVL(a),ThreeVL(b)), (op,(a,b),res)
  with pytest.raises(ValueError): ThreeVL.andor('xor',TRUE,TRUE)

def test_3vl_compare():
  COMPS=[
    [FALSE,('>',1,2)],
    [TRUE,('>',1,0)],
    [TRUE,('<',1,2)],
    [FALSE,('<',1,1)],
    [TRUE,('<=',1,1)],
    [TRUE,('>=',2,1)],
    [FALSE,('<>',1,1)],
    [TRUE,('!=',1,0)],
    [TRUE,('=',1,1.0)],
    [TRUE,('=',decimal.Decimal('2.5'),2.5)],
    [TRUE,('=',True,1)],
    [TRUE,('<','abc','abd')],
    [FALSE,('=','Electronics','electronics')],
    [TRUE,('>=',datetime.date(2020,1,1),datetime.date(2019,1,1))],
    [UNKNOWN,('>',1,None)],
    [UNKNOWN,('<>',1,None)],
    [UNKNOWN,('=',None,None)],
  ]
  for result,args in COMPS:
    assert result==ThreeVL.compare(*args),(result,args)
  with pytest.raises(ValueError): ThreeVL.compare('=>',1,2)

def test_3vl_compare_mismatch():
  for left,right in [(1,'a'),('2019-01-01',datetime.date(2019,1,1)),(datetime.datetime(2019,1,1),datetime.date(2019,1,1)),([1],[1])]:
    with pytest.raises(TypeMismatch): ThreeVL.compare('=',left,right)
  # null wins over the type check
  assert ThreeVL.compare('=','a',None)==UNKNOWN

def test_3vl_like():
  LIKES=[
    [TRUE,('john@company.com','%@company.com')],
    [FALSE,('john@gmail.com','%@company.com')],
    [TRUE,('Smith','Sm_th')],
    [FALSE,('Smiith','Sm_th')],
    [TRUE,('Bob','[BR]ob')],
    [FALSE,('Rob','[^R]ob')],
    [TRUE,('c3','[a-f][0-9]')],
    [TRUE,('100%','100[%]')],
    [TRUE,('a.b','a.b')],
    [FALSE,('axb','a.b')],
    [TRUE,('[x','[x')],
    [FALSE,('smith','Smith')],
    [UNKNOWN,(None,'%')],
    [UNKNOWN,('abc',None)],
  ]
  for result,args in LIKES:
    assert result==ThreeVL.like(*args),(result,args)
  with pytest.raises(TypeMismatch): ThreeVL.like(5,'5%')

def test_3vl_like_reversed_range():
  "t-sql accepts [z-a]; it just never matches"
  assert ThreeVL.like('b','[z-a]')==FALSE
  assert ThreeVL.like('b','[^z-a]')==TRUE
  assert ThreeVL.like('b','[z-ab]')==TRUE
  assert ThreeVL.like('-','[a-]')==TRUE

def test_like_regex_cached():
  from sqlwhere.threevl import like_regex
  assert like_regex('Sm%') is like_regex('Sm%')
