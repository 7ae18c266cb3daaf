__all__ = [
    "InvariantViolation",
    "LocusEvaluationError",
    "LOCUS_EVALUATION_ERROR",
]


LOCUS_EVALUATION_ERROR = (
    "Exception encountered when evaluating configurations at locus: '{name}'."
)


class InvariantViolation(Exception):
    """Raised when a programming invariant is broken by the caller,
    such as an allele list without a reference allele.

    This is not a data error and should not be recovered from.
    """

    pass


class LocusEvaluationError(Exception):
    pass
