from os import isatty, path
from sys import stdin, stdout, exit
import sys
from argparse import ArgumentParser, REMAINDER, OPTIONAL
import logging

from prompt_toolkit import PromptSession
from prompt_toolkit.history import FileHistory

from .util import CalcError
from .calculator import Calculator
from .formatting import Display
from .keypad import Keypad
from .lexer import Lexer
from .mathops import CalculatorMath
from .radix import Radix
from .record import Operator, symbol
from .units import UnitConverter


log = logging.getLogger(__name__)


class InteractiveInput:
    def __init__(self, prompt, history=None, toolbar=None):
        self.prompt = prompt
        self.history = history
        self.toolbar = toolbar

    def __iter__(self):
        try:
            session = PromptSession(message=self.prompt,
                                    vi_mode=True,
                                    enable_suspend=True,
                                    enable_open_in_editor=True,
                                    # Persistent
                                    history=(FileHistory(self.history)
                                             if self.history else None),
                                    # Radix, pending operator, memory
                                    bottom_toolbar=self.toolbar,
                                    prompt_continuation=' ' * len(self.prompt),
                                    # Debatable. Interferes with X11 selection.
                                    mouse_support=True,
                                    # Certainly not! But be explicit.
                                    erase_when_done=False)
            while True:
                yield session.prompt()
        except EOFError:
            return


class CLI:
    '''
    Command line interface to the calculator.
    '''

    DEFAULT_PROMPT = '> '
    HISTORY_FILE = '~/.qcalc_history'

    def _calculator(self):
        return Calculator(math=CalculatorMath(precision=self.args.precision),
                          word_size=self.args.word_size,
                          radix=self.args.radix)

    def _display(self, calculator):
        return Display(radix=calculator.radix,
                       decimal_places=self.args.places,
                       grouping_size=self.args.grouping,
                       converter=calculator.converter)

    def status(self):
        '''
        One-line summary of the calculator, for the interactive toolbar.
        '''
        calculator = self.calculator
        memory = ('M ' + calculator.memory.value
                  if not calculator.memory.is_empty else '')
        pending = (calculator.previous_operand + ' ' +
                   symbol(calculator.pending_operator)
                   if calculator.pending_operator is not Operator.NONE
                   else '')
        return ' | '.join(filter(None, [calculator.radix.value,
                                        'w' + str(calculator.word_size),
                                        pending,
                                        memory]))

    def dumper(self):
        '''
        Dump all lexeme matches and whether they are immediate.
        '''
        lexer = Lexer()
        print('[groups]\t<repr(lexeme)>\t<immediate>')
        for line in self.args.expressions:
            for match in lexer.lex(line):
                matched = match.group(0)  # the lexeme text itself
                groups = lexer.matchedgroups(match)
                print(*groups.keys(),
                      repr(matched),
                      lexer.isimmediate(match),
                      sep='\t')

    def executor(self):
        '''
        Run keypad lines through the calculator, printing the result of each.
        '''
        keypad = Keypad(self.calculator)
        lexer = Lexer()
        for line in self.args.expressions:
            try:
                for match in lexer.lex(line):
                    if lexer.isfeedable(match):
                        keypad.feed(lexer.matchedgroups(match))
            # Abort entire rest of line, makes sense anyway
            except CalcError as e:
                log.debug('Line aborted', exc_info=True)
                print(e.args[0], file=sys.stderr)
            print(self._display(self.calculator)(
                self.calculator.current_operand))

    def history(self):
        '''
        Run the expressions, then print every record, oldest first.
        '''
        self.executor()
        for record in reversed(list(self.calculator.records)):
            print(record.id, record, sep='\t')

    def unit_lister(self):
        '''
        Print every unit of every category.
        '''
        converter = UnitConverter(self.calculator.math)
        for category in converter.categories():
            for unit in converter.units(category):
                print(category, unit, converter.describe(category, unit),
                      sep='\t')

    def unit_converter(self):
        '''
        Convert every number read, per --convert.
        '''
        converter = UnitConverter(self.calculator.math)
        category, from_unit, to_unit = self.args.convert
        for line in self.args.expressions:
            value = line.strip()
            if not value:
                continue
            try:
                print(converter.convert(category, value, from_unit, to_unit))
            except CalcError as e:
                print(e.args[0], file=sys.stderr)

    def raw_grammar(self):
        '''
        Print current internally defined grammar.
        '''
        lexer = Lexer()
        print(lexer.LEXEME)

    def _prompting_input(self):
        '''
        Return prompting stdin.__iter__ decorator...

        If either:
        - prompt explicitly specified.
        - both stdin/out are a tty
        '''
        if self.args.prompt or \
           isatty(stdin.fileno()) and isatty(stdout.fileno()):
            return InteractiveInput(prompt=self.args.prompt or
                                    self.DEFAULT_PROMPT,
                                    history=path.expanduser(
                                        self.HISTORY_FILE),
                                    toolbar=self.status)
        else:
            return stdin

    def __init__(self):
        '''
        Create ready to run CLI.

        Does not run or parse command line arguments.
        '''
        self.argument_parser = ArgumentParser(description='Calculator')
        self.argument_parser.add_argument('-v', '--verbose',
                                          action='store_true')
        self.argument_parser.add_argument('-r', '--radix',
                                          choices=[radix.value
                                                   for radix in Radix],
                                          default=Radix.DECIMAL.value)
        self.argument_parser.add_argument('-w', '--word-size',
                                          type=int,
                                          choices=CalculatorMath.WORD_SIZES,
                                          default=Calculator.DEFAULT_WORD_SIZE)
        self.argument_parser.add_argument('-k', '--places',
                                          type=int,
                                          default=-1,
                                          help='Fixed decimal places shown')
        self.argument_parser.add_argument('-g', '--grouping',
                                          type=int,
                                          default=0,
                                          help='Digits per group shown')
        self.argument_parser.add_argument(
            '--precision',
            type=int,
            default=CalculatorMath.DEFAULT_PRECISION)
        int_nonint_groups = self.argument_parser.add_mutually_exclusive_group()
        int_nonint_groups.add_argument('-e', '--expression',
                                       nargs=REMAINDER,
                                       dest='expressions')
        int_nonint_groups.add_argument('-p', '--prompt',
                                       nargs=OPTIONAL,
                                       const=self.DEFAULT_PROMPT)
        main_groups = self.argument_parser.add_mutually_exclusive_group()
        for short_, long_, action in [('-G', '--raw-grammar',
                                       self.raw_grammar),
                                      ('-D', '--dump', self.dumper),
                                      ('-H', '--history', self.history),
                                      ('-U', '--units', self.unit_lister)]:
            main_groups.add_argument(short_, long_,
                                     action='store_const',
                                     const=action,
                                     dest='action')
        main_groups.add_argument('-c', '--convert',
                                 nargs=3,
                                 metavar=('CATEGORY', 'FROM', 'TO'))
        self.argument_parser.set_defaults(action=self.executor,
                                          expressions=stdin)

    def run(self, *, args=None):
        '''
        Run CLI, given these args, or previously passed CLI args.
        '''
        self.args = self.argument_parser.parse_args(args)
        logging.basicConfig(level=(logging.DEBUG
                                   if self.args.verbose
                                   else logging.WARNING),
                            format='%(levelname)s: %(message)s')
        if self.args.convert:
            self.args.action = self.unit_converter
        try:
            self.calculator = self._calculator()
        except CalcError as e:
            print(e.args[0], file=sys.stderr)
            exit(2)
        if self.args.expressions is stdin:
            self.args.expressions = self._prompting_input()
        try:
            self.args.action()
        except KeyboardInterrupt:
            exit(1)
