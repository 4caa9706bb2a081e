class NumberRangeException(Exception):
    """Base class for exceptions in the number_range library."""

class InvalidArgumentsException(NumberRangeException):
    """Indicates an invalid argument was passed to one of our functions."""

class AmbiguousSeparators(InvalidArgumentsException, ValueError):
    """
    Indicates that two of the configured separators are the same character,
    which would make the notation impossible to split unambiguously.
    """

class ParseError(NumberRangeException, ValueError):
    """
    Base class for errors raised while parsing a notation string.

    A single bad item fails the parse of the whole string; nothing is
    recovered internally.
    """

class MalformedRange(ParseError):
    """
    Indicates an item with too many range separators, a missing bound with no
    default configured, or a step that points away from the end of the range.
    """

class InvalidSign(ParseError):
    """Indicates a negative number (or step) for an unsigned number type."""

class ZeroStep(ParseError):
    """Indicates a range with a step of zero, which would never terminate."""

class DescendingUnsigned(ParseError):
    """
    Indicates a range whose end is smaller than its start for an unsigned
    number type. Unsigned steps can't be negative, so these can't be walked.
    """

class NumberFormatError(ParseError):
    """
    Indicates text that isn't a number of the requested type, once group
    separators and (optionally) whitespace have been removed.
    """

class EmptyListItem(ParseError):
    """Indicates an empty item between two list separators."""
