"""Error types raised while parsing and laying out a specification."""

from __future__ import annotations


class SpecError(ValueError):
    """The specification document is malformed."""


class LayoutError(ValueError):
    """The specification is well-formed but cannot be laid out."""


class UnknownReferenceError(LayoutError):
    def __init__(self, missing_id: str) -> None:
        self.missing_id = missing_id
        super().__init__(f'Reference shape "{missing_id}" not found')


class CyclicReferenceError(LayoutError):
    def __init__(self, cycle_ids: tuple[str, ...]) -> None:
        self.cycle_ids = tuple(cycle_ids)
        chain = " -> ".join([*self.cycle_ids, self.cycle_ids[0]]) if self.cycle_ids else ""
        super().__init__(f"Cyclic relative-position reference: {chain}")
