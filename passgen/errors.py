"""
passgen.errors

Error taxonomy. Each category carries a stable process exit code so calling
scripts can branch on it.
"""


class PassgenError(Exception):
    """Base class for every error passgen reports."""

    exit_code = 1
    category = "PassgenError"


class InvalidArgument(PassgenError, ValueError):
    """Malformed argument to a low-level primitive (e.g. an entropy bound)."""

    exit_code = 3
    category = "InvalidArgument"


class EntropyUnavailable(InvalidArgument):
    """The OS random source failed; never replaced by a weaker generator."""


class PolicyError(PassgenError, ValueError):
    """A generation policy that cannot be satisfied."""

    category = "PolicyError"


class LengthOutOfRange(PolicyError):
    exit_code = 4
    category = "LengthOutOfRange"


class OverconstrainedPolicy(PolicyError):
    exit_code = 5
    category = "OverconstrainedPolicy"


class EmptyClassAfterExclusion(PolicyError):
    exit_code = 6
    category = "EmptyClassAfterExclusion"


class NoAvailableCharacters(PolicyError):
    exit_code = 7
    category = "NoAvailableCharacters"


class InsufficientKeyspace(PassgenError):
    exit_code = 8
    category = "InsufficientKeyspace"


class UnsupportedFormat(PassgenError, ValueError):
    exit_code = 9
    category = "UnsupportedFormat"
