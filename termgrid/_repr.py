"""Tools to generate __repr__ strings.
"""

import typing

if typing.TYPE_CHECKING:
    from typing import Text, Tuple


def make_repr(class_name, *args, **kwargs):
    # type: (Text, *object, **Tuple[object, object]) -> Text
    """Generate a repr string.

    Positional arguments should be the positional arguments used to
    construct the class. Keyword arguments should consist of tuples of
    the attribute value and default. If the value is the default, then
    it won't be rendered in the output.

    Example:
        >>> class Spaces(object):
        ...     def __init__(self, count=1):
        ...         self.count = count
        ...     def __repr__(self):
        ...         return make_repr('Spaces', count=(self.count, 1))
        ...
        >>> Spaces()
        Spaces()
        >>> Spaces(2)
        Spaces(count=2)

    """
    arguments = [repr(arg) for arg in args]
    arguments.extend(
        [
            "{}={!r}".format(name, value)
            for name, (value, default) in sorted(kwargs.items())
            if value != default
        ]
    )
    return "{}({})".format(class_name, ", ".join(arguments))
