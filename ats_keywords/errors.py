"""Exceptions raised at the engine's input boundary."""


class ATSKeywordsError(Exception):
    """Base class for errors raised by this package."""


class InvalidInputError(ATSKeywordsError, ValueError):
    """A job description or resume was not usable text."""
