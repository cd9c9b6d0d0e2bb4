"""Errors raised while loading and estimating horse race data."""


class HorseDataError(Exception):
    """Base error for horse race data."""
    pass


class ParseError(HorseDataError):
    """Input row or file could not be parsed."""
    pass


class NotFoundError(HorseDataError):
    """Requested rank or entity has no record."""
    pass


class EmptyInputError(HorseDataError):
    """Distribution requested over no positive weight."""
    pass


class DivisionError(HorseDataError):
    """Finish time of exactly zero found in stored data."""
    pass


class InvariantViolation(HorseDataError):
    """Sampling lookup fell outside the cumulative table."""
    pass


class StoreFinalizedError(HorseDataError):
    """Mutation attempted on a finalized record store."""
    pass
