'''
Keypad lexer tests
'''

import regex

from qcalc.util import CalcError
from qcalc.lexer import Lexer

from pytest import raises


def lexemes(line):
    l = Lexer()
    return [m.group(0) for m in l.lex(line) if l.isfeedable(m)]


def test_split():
    assert lexemes('12.5 + 3 =') == ['12.5', '+', '3', '=']
    assert lexemes('2^10') == ['2', '^', '10']
    assert lexemes('1<<4') == ['1', '<<', '4']


def test_radix_numbers():
    l = Lexer()
    matches = list(l.lex('FF.8'))
    assert len(matches) == 1
    assert l.matchedgroups(matches[0]) == {'number': 'FF.8'}
    assert lexemes('1_000 .5 12.') == ['1_000', '.5', '12.']


def test_memory_keys():
    l = Lexer()
    matches = [m for m in l.lex('M+ MR') if l.isfeedable(m)]
    assert [l.matchedgroups(m) for m in matches] == [{'memory': 'M+'},
                                                     {'memory': 'MR'}]


def test_words():
    assert lexemes('9 sqrt') == ['9', 'sqrt']
    assert lexemes('2 exp10') == ['2', 'exp10']
    assert lexemes('pi2 pi') == ['pi2', 'pi']


def test_whole_words_only():
    l = Lexer()
    with raises(CalcError, match=regex.escape("Couldn't lex sqrtx")):
        list(l.lex('sqrtx'))


def test_unknown():
    l = Lexer()
    with raises(CalcError, match=regex.escape("Couldn't lex foo")):
        list(l.lex('1 + foo'))


def test_immediate():
    l = Lexer()
    number, space, operator = l.lex('5 +')
    assert not l.isimmediate(number)
    assert l.isimmediate(space)
    assert l.isimmediate(operator)
    assert not l.isfeedable(space)
    assert l.isfeedable(operator)
