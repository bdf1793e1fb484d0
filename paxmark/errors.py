class PaxmarkError(Exception):
    """Base class for paxmark-specific errors."""


# Attribute store
class AttributeWriteError(PaxmarkError):
    """Raised when the flags attribute cannot be persisted on the target."""

    def __init__(self, path: str, attr: str, reason: str):
        super().__init__(f"setting xattr {attr} on {path}: {reason}")
        self.path = path
        self.attr = attr
        self.reason = reason


class AttributeUnsupportedError(PaxmarkError):
    pass
