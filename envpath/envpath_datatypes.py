"""
Defines the core data types for envpath resolution.

This module holds the namespace enumeration, the project identity tuple,
the two control values used by the short-circuiting folds, the separator
characters, and the small exception hierarchy used outside of resolution.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Optional

# Halfwidth and fullwidth variants of the two separators. Both are accepted
# because a fullwidth character is easy to type with a CJK input method on.
HALF_COLON = ":"
FULL_COLON = "："
HALF_QUESTION_MARK = "?"
FULL_QUESTION_MARK = "？"

COLONS = (HALF_COLON, FULL_COLON)
QUESTION_MARKS = (HALF_QUESTION_MARK, FULL_QUESTION_MARK)

REMIX_MARK = "*"


# =================================================================
# Exceptions
# =================================================================

class EnvPathError(Exception):
    """Base class for user-facing envpath errors.

    Resolution itself never raises; these cover loading raw sequences and
    configuration from the outside world.
    """
    pass


class RawFormatError(EnvPathError):
    """Raised when deserialized data is not a sequence of strings."""
    def __init__(self, value: Any):
        super().__init__(f"Expected a list of strings, got {type(value).__name__}: {value!r}")
        self.value = value


class ConfigError(EnvPathError):
    def __init__(self, key: str, message: str):
        super().__init__(f"{key}: {message}")
        self.key = key


# =================================================================
# Namespaces
# =================================================================

class Namespace(Enum):
    """The closed set of resolution domains.

    The member order is the order in which remix tags are probed.
    """
    ENV = "env"
    DIR = "dir"
    CONST = "const"
    PROJ = "proj"
    VAL = "val"

    @property
    def tag(self) -> str:
        """The `$`-prefixed form used as the first chunk of an expression."""
        return "$" + self.value

    @property
    def remix_tag(self) -> str:
        return self.value

    @classmethod
    def from_tag(cls, tag: str) -> Optional['Namespace']:
        """Classifies the first chunk of an expression.

        Tags are compared in a fixed order: `$env`, `$const`, `$dir`, `$val`,
        then anything starting with `$proj` (which carries its group).
        """
        for ns in (cls.ENV, cls.CONST, cls.DIR, cls.VAL):
            if tag == ns.tag:
                return ns
        if tag.startswith(cls.PROJ.tag):
            return cls.PROJ
        return None

    @classmethod
    def from_remix(cls, segment: str) -> Optional['Namespace']:
        """Returns the namespace whose remix tag `segment` starts with."""
        for ns in cls:
            if segment.startswith(ns.remix_tag):
                return ns
        return None


class ProjectGroup:
    """A `(qualifier.organization.application)` project identity."""
    __slots__ = ("qualifier", "organization", "application")

    def __init__(self, qualifier: str, organization: str, application: str):
        self.qualifier = qualifier
        self.organization = organization
        self.application = application

    @property
    def name(self) -> str:
        """Dotted name built from the non-empty parts, e.g. `com.x.y`."""
        return ".".join(p for p in (self.qualifier, self.organization, self.application) if p)

    def __repr__(self) -> str:
        return f"ProjectGroup({self.qualifier!r}, {self.organization!r}, {self.application!r})"

    def __eq__(self, other):
        if not isinstance(other, ProjectGroup):
            return NotImplemented
        return (self.qualifier, self.organization, self.application) == (
            other.qualifier, other.organization, other.application)

    def __hash__(self):
        return hash((self.qualifier, self.organization, self.application))


# =================================================================
# Fold control values
# =================================================================

class Continue:
    """Keep folding with `value` as the new accumulator."""
    __slots__ = ("value",)

    def __init__(self, value: Optional[str]):
        self.value = value

    def __repr__(self) -> str:
        return f"Continue({self.value!r})"

    def __eq__(self, other):
        return isinstance(other, Continue) and self.value == other.value


class Break:
    """Stop folding; `value` is the final result."""
    __slots__ = ("value",)

    def __init__(self, value: Optional[str]):
        self.value = value

    def __repr__(self) -> str:
        return f"Break({self.value!r})"

    def __eq__(self, other):
        return isinstance(other, Break) and self.value == other.value


__all__ = [
    "HALF_COLON", "FULL_COLON", "HALF_QUESTION_MARK", "FULL_QUESTION_MARK",
    "COLONS", "QUESTION_MARKS", "REMIX_MARK",
    "EnvPathError", "RawFormatError", "ConfigError",
    "Namespace", "ProjectGroup", "Continue", "Break",
]
