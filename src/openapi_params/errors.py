"""Errors raised while normalizing an API document."""


class DocumentError(Exception):
    """The document is malformed or uses something we cannot handle."""


class ReferenceResolutionError(DocumentError):
    """A $ref points at nothing."""

    def __init__(self, ref: str, reason: str = "target not found"):
        self.ref = ref
        super().__init__(f"Could not resolve reference {ref!r}: {reason}")


class OperationParseError(DocumentError):
    """An operation could not be assembled."""

    def __init__(self, method: str, path: str, cause: DocumentError):
        self.method = method.upper()
        self.path = path
        self.cause = cause
        super().__init__(f"{self.method} {path}: {cause}")
