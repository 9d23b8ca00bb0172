"""Custom exceptions for md2slack."""


class Md2slackError(Exception):
    """Base exception for md2slack operations."""


class OptionsError(Md2slackError, ValueError):
    """Invalid conversion option name or value."""
