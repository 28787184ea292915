"""Base exceptions for fmtcheck domain."""


class FmtCheckError(Exception):
    """Root exception for all fmtcheck errors.

    All domain exceptions inherit from this.
    Allows catching all fmtcheck-specific errors.
    """
