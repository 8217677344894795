"""
Splits free-form chat text into structured command arguments.
"""
from typing import NamedTuple

from featurebot.errors import EmptyFirstArgument, EmptySecondArgument, MalformedArguments


class ArgumentPair(NamedTuple):
    first: str
    second: str


def parse_argument_pair(text: str, first_label: str = "First argument",
                        second_label: str = "Second argument") -> ArgumentPair:
    """
    Split `text` on its first space into (first token, remainder).

    The remainder is kept verbatim, so only the second argument may contain
    spaces. Labels are used to build the error messages.

    Raises:
        MalformedArguments: no space in the text
        EmptyFirstArgument: the text starts with a space
        EmptySecondArgument: nothing follows the first space
    """
    space = text.find(" ")
    if space == -1:
        raise MalformedArguments(first_label, second_label)

    first = text[:space]
    if not first:
        raise EmptyFirstArgument(first_label)

    second = text[space + 1:]
    if not second:
        raise EmptySecondArgument(second_label)

    return ArgumentPair(first, second)
