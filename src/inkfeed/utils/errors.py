"""Custom exceptions for Inkfeed."""


class InkfeedError(Exception):
    """Base exception for all Inkfeed errors."""

    pass


class SerializationError(InkfeedError):
    """Errors raised while writing Atom XML."""

    pass


class UnknownFieldError(SerializationError):
    """Field name is not readable from the given entity."""

    def __init__(self, name: str, entity: object) -> None:
        self.name = name
        self.entity_type = type(entity).__name__
        super().__init__(f"{self.entity_type} has no field '{name}'")


class ModelError(InkfeedError):
    """Feed model errors."""

    pass


class InvalidFeedError(ModelError):
    """Exported data could not be validated as a feed."""

    pass
