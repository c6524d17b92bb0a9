from os import isatty
from sys import stdin, stdout, exit
from argparse import ArgumentParser, REMAINDER, OPTIONAL
import traceback

from prompt_toolkit import PromptSession
from prompt_toolkit.history import InMemoryHistory

from .util import RPNError, Quit
from .machine import Machine
from .lexer import Lexer


class InteractiveInput:
    '''
    Prompting line source for a terminal.

    History lives only as long as the session.
    '''

    def __init__(self, prompt, machine=None):
        self.prompt = prompt
        self.machine = machine

    def _depth(self):
        if self.machine is None:
            return ''
        return '[{}]'.format(len(self.machine.stack))

    def __iter__(self):
        try:
            session = PromptSession(message=self.prompt,
                                    enable_suspend=True,
                                    history=InMemoryHistory(),
                                    # Stack depth
                                    rprompt=self._depth,
                                    prompt_continuation=' ' * len(self.prompt),
                                    erase_when_done=False)
            while True:
                yield session.prompt()
        except EOFError:
            return


class CLI:
    '''
    Command line interface to RPN system.
    '''

    DEFAULT_PROMPT = 'rpn> '

    def dumper(self):
        '''
        Dump every token's classification and arity.
        '''
        machine = Machine()
        lexer = Lexer()
        print('<kind>\t<repr(token)>\t<arity>')
        for line in self.args.expressions:
            for token in lexer.lex(line):
                kind = machine.classify(token)
                print(kind,
                      repr(token),
                      Machine.ARITY[kind],
                      sep='\t')

    def executor(self):
        '''
        Run machine (RPN calculator).

        Each token runs to completion before the next; a failed token is
        reported and the rest of the line still runs.
        '''
        self.machine = Machine(verbose=self.args.verbose,
                               precision=self.args.precision)
        lexer = Lexer()
        if self._interactive():
            self.args.expressions.machine = self.machine
            self.machine.printhelp()
        for line in self.args.expressions:
            for token in lexer.lex(line):
                try:
                    self.machine.feed(token)
                except Quit:
                    return
                except RPNError as e:
                    print(e.args[0])
                    if self.machine.verbose:
                        traceback.print_exc()

    def raw_grammar(self):
        '''
        Print current internally defined number grammar.
        '''
        lexer = Lexer()
        print(lexer.NUMBER)

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
                                    self.DEFAULT_PROMPT)
        else:
            return stdin

    def __init__(self):
        '''
        Create ready to run CLI.

        Does not run or parse command line arguments.
        '''
        self.machine = None
        self.argument_parser = ArgumentParser(description='RPN calculator')
        self.argument_parser.add_argument('-v', '--verbose',
                                          action='store_true')
        self.argument_parser.add_argument('-k', '--precision',
                                          type=int,
                                          help='round results to this many '
                                               'decimals')
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
                                      ('-D', '--dump', self.dumper)]:
            main_groups.add_argument(short_, long_,
                                     action='store_const',
                                     const=action,
                                     dest='action')
        self.argument_parser.set_defaults(action=self.executor,
                                          expressions=stdin)

    def _interactive(self):
        return isinstance(self.args.expressions, InteractiveInput)

    def run(self, *, args=None):
        '''
        Run CLI, given these args, or previously passed CLI args.
        '''
        self.args = self.argument_parser.parse_args(args)
        if self.args.expressions is stdin:
            self.args.expressions = self._prompting_input()
        try:
            self.args.action()
        except KeyboardInterrupt:
            exit(1)
