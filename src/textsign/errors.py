from __future__ import annotations


class TextSignError(Exception):
    pass


class IoError(TextSignError):
    """Key or input could not be read."""


class InvalidKeyLength(TextSignError, ValueError):
    """Key material does not have the shape the algorithm requires."""

    def __init__(self, algorithm: str, expected: int, actual: int, exact: bool = True):
        self.algorithm = algorithm
        self.expected = expected
        self.actual = actual
        qualifier = "exactly" if exact else "at least"
        super().__init__(
            f"{algorithm} key must be {qualifier} {expected} bytes, got {actual}"
        )


class MalformedSignature(TextSignError, ValueError):
    """Tag length does not match the algorithm's fixed tag size."""

    def __init__(self, algorithm: str, expected: int, actual: int):
        self.algorithm = algorithm
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"{algorithm} signature must be {expected} bytes, got {actual}"
        )
