"""
Defines utility functions for manipulating member names.
"""
import re

import inflection

NON_IDENTIFIER = re.compile(r'\W+')
WHITESPACE = re.compile(r'\s+')


def identifier(*parts):
    """
    Joins the given parts into a valid python identifier.  Empty parts are
    skipped and any run of non-word characters collapses to an underscore.

    :param parts: <str>, ..

    :return: <str>
    """
    text = '_'.join(str(part) for part in parts if part)
    text = NON_IDENTIFIER.sub('_', text).strip('_')
    if text[:1].isdigit():
        text = '_' + text
    return text


def is_string(text):
    """
    Returns whether or not the given value is a text or bytes string.

    :param text: <variant>

    :return: <bool>
    """
    return isinstance(text, (str, bytes))


def symbolize(text):
    """
    Converts a display name into a member symbol, for instance `In Progress`
    becomes `in_progress` and `PENDING` becomes `pending`.

    :param text: <str>

    :return: <str>
    """
    text = WHITESPACE.sub('_', str(text).strip())
    return inflection.underscore(text).lower()
