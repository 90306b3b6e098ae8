"""Error hierarchy for package data extraction."""

from __future__ import annotations


class ConanInfoError(Exception):
    """Base class for all extraction and listing failures."""


class PackageNotFoundError(ConanInfoError):
    """The package directory does not exist."""


class NoVersionFoundError(ConanInfoError):
    """The package directory holds no version subdirectory."""


class EmptyResultError(NoVersionFoundError):
    """The package directory has no entries at all."""


class EmptyFileError(ConanInfoError):
    """A pointer file has no lines."""


class DataReadError(ConanInfoError):
    """A file or directory could not be read."""


class YamlParseError(ConanInfoError):
    """The referenced YAML document is malformed."""


class KeyNotFoundError(ConanInfoError):
    """A required key is absent, or its parent is not a mapping."""


class TypeMismatchError(ConanInfoError):
    """A node has the wrong kind for its position in the document."""


class UnsupportedFormatError(ConanInfoError):
    """The ``url`` node is neither a scalar nor a sequence."""


class InvalidRangeError(ConanInfoError):
    """A listing start position lies outside the package directory."""


class InvalidArgumentError(ConanInfoError):
    """A command-line value could not be interpreted."""
