from functools import reduce
import operator

import regex

from .util import CalcError
from .keypad import Keypad


def _alternatives(keys):
    '''
    Regex alternation of literal keys, longest first.
    '''
    return r'(?:' + r'|'.join(map(regex.escape,
                                  sorted(keys, key=len, reverse=True))) + r')'


class Lexer:
    '''
    Lexer for the keypad *regular* grammar.

    For consistency, for now, needs to be instantiated, despite holding no
    internal state.
    '''
    # Digits of a number, in any radix up to hexadecimal
    DIGITS = r'''
              # DO NOT REPEAT ME! I REPEAT MYSELF INTERNALLY!
              (?:
                  [0-9A-F]
                  (?:
                      # Underscores may separate digits, as in 1_000 or FF_FF
                      _?
                      [0-9A-F]
                  )*
              )
              '''
    # Number, of any kind supported by grammar.
    # String formatting and regex is a tricky business, because of the braces.
    # It works here. Be careful in general!
    NUMBER = r'''
              (?:
                  # 1, 1_200, 12. (notice trailing dot), 1.3, FF.8
                  {DIGITS}
                  (?:
                      \.
                      {DIGITS}?
                  )?
              )|(?:
                  # .2
                  \.
                  {DIGITS}
              )
              '''.format(DIGITS=DIGITS)

    assert all(key.startswith('M') for key in Keypad.MEMORY)
    MEMORY = _alternatives(Keypad.MEMORY)
    assert all(key.isalnum() and key.islower() for key in Keypad.WORDS)
    # Whole words only: sqrtx is not sqrt followed by x.
    WORD = _alternatives(Keypad.WORDS) + r'(?![a-z0-9])'
    OPERATOR = _alternatives(Keypad.OPERATORS)
    SPACE = r'\s+'

    # Immediate, as in immediately complete lexeme
    IMMEDIATE = r'(?<memory>' + MEMORY + r')|' \
                r'(?<word>' + WORD + r')|' \
                r'(?<operator>' + OPERATOR + r')|' \
                r'(?<space>' + SPACE + r')'
    # All possible lexemes.
    LEXEME = r'(?<number>' + NUMBER + r')|' \
             r'(?<immediate>' + IMMEDIATE + r')'
    # Default regex flags for matching lexemes
    FLAGS = reduce(operator.__or__,
                   {regex.POSIX,
                    regex.DOTALL,
                    regex.VERSION1,
                    regex.VERBOSE},
                   0)

    def lex(self, line):
        '''
        Take a line and return all lexemes.

        Doesn't yield incomplete or incorrect lexemes, stopping on first bad.
        '''
        while line:
            match = regex.match(type(self).LEXEME, line,
                                flags=type(self).FLAGS)
            if match is None:
                break
            yield match
            line = line[len(match.group(0)):]
        if line:
            raise CalcError("Couldn't lex {0}".format(line.strip()))

    def isfeedable(self, match):
        '''
        Return True if lexeme can be fed to a keypad.
        '''
        return 'space' not in self.matchedgroups(match).keys()

    def isimmediate(self, match):
        '''
        Return true if lexeme is unambiguously complete.
        '''
        return match.group('immediate') is not None

    def matchedgroups(self, match):
        '''
        Yield lexeme matches.
        '''
        return {key: value
                for key, value
                in match.groupdict().items()
                if value and key != 'immediate'}
