from gpindel.alleles import Allele, reference_allele, event_length
from gpindel.alignment import (
    PerReadAlleleLikelihoods,
    ReadHaplotypeAligner,
    PrecomputedAligner,
)
from gpindel.configuration import (
    AlleleCountConfiguration,
    ExhaustiveOrchestrator,
    iter_configurations,
)
from gpindel.errormodel import ErrorModel
from gpindel.errors import InvariantViolation, LocusEvaluationError
from gpindel.likelihoods import GenotypeLikelihoods
from gpindel.model import HaplotypeLikelihoodModel, ErrorModelCountingModel
from gpindel.pileup import Pileup, PileupElement, pileup_element_matches
from gpindel import combinatorics
from gpindel.version import __version__

__all__ = [
    "Allele",
    "reference_allele",
    "event_length",
    "PerReadAlleleLikelihoods",
    "ReadHaplotypeAligner",
    "PrecomputedAligner",
    "AlleleCountConfiguration",
    "ExhaustiveOrchestrator",
    "iter_configurations",
    "ErrorModel",
    "InvariantViolation",
    "LocusEvaluationError",
    "GenotypeLikelihoods",
    "HaplotypeLikelihoodModel",
    "ErrorModelCountingModel",
    "Pileup",
    "PileupElement",
    "pileup_element_matches",
    "combinatorics",
    "__version__",
]
