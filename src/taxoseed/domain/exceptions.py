"""Domain exceptions."""


class TaxoseedError(Exception):
    """Base exception for taxoseed."""

    pass


class NotFound(TaxoseedError):
    """Requested resource was not found."""

    pass


class ValidationError(TaxoseedError):
    """Validation failed for input data."""

    pass


class DefinitionError(TaxoseedError):
    """A raw definition could not be turned into a domain object."""

    def __init__(self, message: str, identifier: object = None, field: str | None = None) -> None:
        self.identifier = identifier
        self.field = field
        if identifier is not None:
            message = f"{message} (definition id={identifier!r})"
        super().__init__(message)


class MissingIdentifier(DefinitionError):
    """Raw definition has no `id` key."""

    def __init__(self, kind: str) -> None:
        super().__init__(f"{kind} definition is missing 'id'", field="id")


class MissingField(DefinitionError):
    """Required field is absent from a raw definition."""

    def __init__(self, name: str, identifier: object = None) -> None:
        super().__init__(f"Missing required field '{name}'", identifier, name)


class UnknownField(DefinitionError):
    """Raw definition carries a key outside its schema."""

    def __init__(self, name: str, identifier: object = None) -> None:
        super().__init__(f"Unknown field '{name}'", identifier, name)


class TypeMismatch(DefinitionError):
    """Field is present but has the wrong shape."""

    def __init__(
        self,
        name: str,
        expected: str,
        actual: object = None,
        identifier: object = None,
    ) -> None:
        self.expected = expected
        super().__init__(
            f"Field '{name}' must be {expected}, got {type(actual).__name__}",
            identifier,
            name,
        )


class UnresolvedParent(DefinitionError):
    """Category references a parent not yet persisted in this import pass."""

    def __init__(self, identifier: str, parent_id: str) -> None:
        self.parent_id = parent_id
        super().__init__(
            f"Parent category '{parent_id}' has not been imported yet",
            identifier,
            "parent_id",
        )


class UnresolvedProperty(DefinitionError):
    """Category references a property that does not exist in the catalog."""

    def __init__(self, identifier: str, property_id: int) -> None:
        self.property_id = property_id
        super().__init__(
            f"Attribute property {property_id} does not exist",
            identifier,
            "attributes",
        )


class DuplicateIdentifier(TaxoseedError):
    """Record with the same identifier already exists for this kind."""

    def __init__(self, kind: str, identifier: object) -> None:
        self.kind = kind
        self.identifier = identifier
        super().__init__(f"{kind} with id {identifier!r} already exists")
