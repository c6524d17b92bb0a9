from functools import reduce
import operator

import regex

from .util import InvalidToken, wrap_user_errors


class Lexer:
    '''
    Tokenizer and number grammar for the calculator.

    For consistency, for now, needs to be instantiated, despite holding no
    internal state.
    '''
    # A number is a whole token, no more, no less. Roughly what C's strtod
    # takes, minus leading whitespace. Not Python's float(): no underscores,
    # no non-ASCII digits.
    NUMBER = r'''
              (?<sign>[+-])?
              (?:
                  # 0xff, 0x1p3, 0x.8, 0x1.8p-1
                  (?<hex>
                      0[xX]
                      (?:
                          [0-9a-fA-F]+
                          (?:
                              \.
                              [0-9a-fA-F]*
                          )?
                          |
                          \.
                          [0-9a-fA-F]+
                      )
                      (?:
                          [pP][+-]?[0-9]+
                      )?
                  )
                  |
                  # 1, 1., 1.5, .5, 1e3, 1.5E-3
                  (?<decimal>
                      (?:
                          [0-9]+
                          (?:
                              \.
                              [0-9]*
                          )?
                          |
                          \.
                          [0-9]+
                      )
                      (?:
                          [eE][+-]?[0-9]+
                      )?
                  )
                  |
                  # inf, Infinity, NAN
                  (?<special>
                      (?i:
                          inf(?:inity)?
                          |
                          nan
                      )
                  )
              )
              '''
    # Tokens are separated by spaces and tabs only
    TOKEN = r'[^ \t]+'
    # Everything up to the line terminator
    LINE = r'[^\r\n]*'
    # Default regex flags for matching numbers
    FLAGS = reduce(operator.__or__,
                   {regex.POSIX,
                    regex.DOTALL,
                    regex.VERSION1,
                    regex.VERBOSE},
                   0)

    def lex(self, line):
        '''
        Take a line and yield its tokens, as strings.

        Blank lines yield nothing.
        '''
        line = regex.match(type(self).LINE, line).group(0)
        for match in regex.finditer(type(self).TOKEN, line):
            yield match.group(0)

    def isnumber(self, token):
        '''
        Return True if token is, in its entirety, a number.
        '''
        return self._match(token) is not None

    @wrap_user_errors(InvalidToken, "Invalid token: '{1}' (out of range)")
    def number(self, token):
        '''
        Convert a numeric token to float.

        Raises InvalidToken on anything else, trailing garbage included.
        '''
        match = self._match(token)
        if match is None:
            raise InvalidToken("Invalid token: '{}'".format(token))
        if match.group('hex'):
            return float.fromhex(token)
        return float(token)

    def _match(self, token):
        return regex.fullmatch(type(self).NUMBER, token,
                               flags=type(self).FLAGS)
