# Copyright 2026 GqlModel Contributors
# SPDX-License-Identifier: Apache-2.0

"""Errors raised while deserializing SDL syntax trees into models."""

# ###############
# Public Interface
# ###############


class DeserializationError(Exception):
    """Base class for all deserialization failures.

    A deserialization error is never recovered: it aborts the transformation
    of the whole document.
    """


class UnsupportedDefinitionKindError(DeserializationError):
    """Raised when a top-level definition is not an object type definition."""

    def __init__(self, kind: str) -> None:
        super().__init__(f"Unsupported definition type: {kind}")
        self.kind = kind


class InvalidDefinitionKindError(DeserializationError):
    """Raised when a node handed to a deserializer has the wrong kind."""

    def __init__(self, expected: str, kind: str) -> None:
        super().__init__(f"Invalid definition node. Expected {expected} and received {kind}")
        self.expected = expected
        self.kind = kind


class UnexpectedTypeShapeError(DeserializationError):
    """Raised when a field type is not a named type after unwrapping non-null and list."""

    def __init__(self, kind: str) -> None:
        super().__init__(f"Expected NamedType after unwrapping non-null and list wrappers, received {kind}")
        self.kind = kind


class InvalidDirectiveNameError(DeserializationError):
    """Raised when a directive name does not follow the ``<provider>_<name>`` shape."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown directive @{name}, correct format is @<provider>_<name>")
        self.name = name


class MissingSourceError(DeserializationError):
    """Raised when a model declares no source and no default source is configured."""

    def __init__(self, model: str) -> None:
        super().__init__(f"Source not declared in model {model}")
        self.model = model


class UnsupportedValueKindError(DeserializationError):
    """Raised when a literal value node is not a scalar, list or object literal."""

    def __init__(self, kind: str) -> None:
        super().__init__(f"Value type {kind} not implemented")
        self.kind = kind
