# src/sankey_labels/core/exceptions.py


class InvalidArgument(ValueError):
    """
    Raised when a caller passes data that violates a formatting precondition
    (empty name, non-finite value, wrong container shape, ...).
    Signals bad data at the call site, not a recoverable runtime condition.
    """

    pass
