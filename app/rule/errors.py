"""Errors raised by the rule engine."""


class InvalidInputError(ValueError):
    """Malformed date, month, weekday or season value."""
