from typing import Optional


class ExtractionError(Exception):
    """Base class for errors raised by the extraction pipeline."""


class InvalidRootError(ExtractionError):
    """The node passed to the single-node entry point was filtered out."""

    def __init__(self, node_id: Optional[str], reason: str = "filtered out"):
        self.node_id = node_id
        self.reason = reason
        super().__init__(f"Cannot extract root node {node_id!r}: {reason}")


class StyleIdExhaustedError(ExtractionError):
    def __init__(self, prefix: str, attempts: int):
        self.prefix = prefix
        self.attempts = attempts
        super().__init__(
            f"No free style id for prefix {prefix!r} after {attempts} attempts"
        )
