"""Exceptions raised while extracting comparison units and matching methods."""


class UnitExtractionError(Exception):
    """A method does not provide the requested comparison-unit representation."""


class TraversalError(Exception):
    """Internal inconsistency while walking a method's syntax tree."""


class MatchingFailure(Exception):
    """A pair of methods could not be matched.

    The underlying UnitExtractionError or TraversalError is available as
    ``__cause__``. A failed pair is unclassifiable and must not be given a
    default verdict.
    """


class DatasetError(ValueError):
    """A clone-pair dataset file is malformed."""
