"""Errors that abort a whole hunt.

Problems local to one document (unreadable input, failed report writes) are
logged and never raised.
"""


class HuntError(Exception):
    """Fatal error: the run cannot continue."""


class DictionaryError(HuntError):
    """The chunk dictionary could not be read."""


class InputError(HuntError):
    """The input source is missing, unwalkable or holds no documents."""
