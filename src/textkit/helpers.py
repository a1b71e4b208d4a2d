"""Small function-level utilities shared by the textkit modules.
"""

__docformat__ = 'google'

__all__ = [
    'text_input',
    'chain_operations'
]

from functools import reduce, wraps
from typing import Any, Callable, Iterable


def text_input(f: Callable) -> Callable:
    """
    Decorate a function whose first argument is text so that `None` is read as `''`.

    Example:
        >>> @text_input
        ... def shout(s):
        ...     return s.upper() + '!'
        >>> shout(None)
        '!'
        >>> shout('hi')
        'HI!'
    """
    @wraps(f)
    def wrapper(s, *args, **kwargs):
        return f('' if s is None else s, *args, **kwargs)
    return wrapper

def chain_operations(value: Any, operations: Iterable[Callable]) -> Any:
    """
    Pass a value through a sequence of single-argument functions, left to right.

    Args:
        value: Initial input
        operations: Functions applied in order, each receiving the previous result

    Returns:
        Result of the last function, or `value` if `operations` is empty

    Example:
        >>> chain_operations('  Hello  ', [str.strip, str.lower])
        'hello'
        >>> chain_operations('unchanged', [])
        'unchanged'
    """
    return reduce(lambda result, operation: operation(result), operations, value)
