from functools import wraps


class RPNError(Exception):
    '''
    Reportable user error. The message is the line shown to the user.
    '''
    pass


class StackEmpty(RPNError):
    pass


class StackFull(RPNError):
    pass


class InsufficientOperands(RPNError):
    pass


class DivisionByZero(RPNError):
    pass


class DomainError(RPNError):
    pass


class InvalidOperator(RPNError):
    pass


class InvalidToken(RPNError):
    pass


class Quit(Exception):
    '''
    Raised by the machine on the quit command. Not an error.
    '''
    pass


def wrap_user_errors(error, fmt):
    '''
    Decorator that converts unexpected exceptions to the given RPNError.

    Passes through RPNErrors.
    '''
    def decorator(f):
        @wraps(f)
        def wrapper(*args, **kwargs):
            try:
                return f(*args, **kwargs)
            except RPNError:
                raise
            except Exception as e:
                raise error(fmt.format(*args, **kwargs)) from e
        return wrapper
    return decorator


def format_number(number, precision=None):
    '''
    Shortest round-trip text for a float, without a trailing ".0".
    '''
    if precision is not None:
        number = round(number, precision)
    text = repr(float(number))
    if text.endswith('.0'):
        text = text[:-2]
    return text
