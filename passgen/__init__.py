"""passgen: a secure password generator."""

__version__ = "0.1.0"

from .batch import generate_batch
from .charsets import CharClass
from .entropy import EntropySource, SeededEntropySource, default_source
from .errors import (
    EmptyClassAfterExclusion,
    EntropyUnavailable,
    InsufficientKeyspace,
    InvalidArgument,
    LengthOutOfRange,
    NoAvailableCharacters,
    OverconstrainedPolicy,
    PassgenError,
    PolicyError,
    UnsupportedFormat,
)
from .generator import GenerationResult, generate, synthesize
from .policy import Policy, ValidatedPolicy, validate
from .strength import estimate, keyspace

__all__ = [
    "CharClass",
    "EmptyClassAfterExclusion",
    "EntropySource",
    "EntropyUnavailable",
    "GenerationResult",
    "InsufficientKeyspace",
    "InvalidArgument",
    "LengthOutOfRange",
    "NoAvailableCharacters",
    "OverconstrainedPolicy",
    "PassgenError",
    "Policy",
    "PolicyError",
    "SeededEntropySource",
    "UnsupportedFormat",
    "ValidatedPolicy",
    "default_source",
    "estimate",
    "generate",
    "generate_batch",
    "keyspace",
    "synthesize",
    "validate",
]
