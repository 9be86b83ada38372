"""Exception hierarchy for comparator construction and reduction."""


class ComparatorError(Exception):
    """Base error for comparator failures."""


class InvalidArgumentError(ComparatorError, ValueError):
    """Precondition violation at the call site."""
