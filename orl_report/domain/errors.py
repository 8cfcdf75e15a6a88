"""Domain errors."""


class UnsupportedReferenceTypeError(ValueError):
    """Raised when a transaction is neither a Guest nor an External one."""

    def __init__(self, reference_type: str) -> None:
        self.reference_type = reference_type
        super().__init__(
            f"Transactions with reference type {reference_type} "
            "are not supported"
        )


__all__ = ["UnsupportedReferenceTypeError"]
