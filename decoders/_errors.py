from __future__ import annotations


class DefinitionError(ValueError):
    """A decoder or policy was constructed with invalid arguments."""

    what: str

    def __init__(self, what: str, reason: str) -> None:
        self.what = what
        super().__init__(f"{what}: {reason}")


__all__ = ("DefinitionError",)
