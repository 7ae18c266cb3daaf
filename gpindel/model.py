#!/usr/bin/env python3

import logging
import numpy as np
from dataclasses import dataclass, field

from gpindel.alignment import PerReadAlleleLikelihoods
from gpindel.alleles import reference_allele
from gpindel.constant import MAX_QUALITY
from gpindel.jitutils import (
    LOG10_CACHE,
    log10_mismatch_table,
    log10_likelihood_read_matrix,
    log10_likelihood_allele_counts,
)
from gpindel.pileup import pileup_element_matches

__all__ = [
    "ReadLikelihoodEvidence",
    "AlleleCountEvidence",
    "HaplotypeLikelihoodModel",
    "ErrorModelCountingModel",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class ReadLikelihoodEvidence:
    """Read-allele log10 likelihoods of the elements of a pileup.

    Attributes
    ----------
    model : HaplotypeLikelihoodModel
        Model that produced (and evaluates) the evidence.
    matrix : ndarray, float, shape (n_reads, n_alleles)
        Log10 likelihood of each read given each allele.
    """

    model: object
    matrix: np.ndarray

    @property
    def n_observations(self):
        return len(self.matrix)


@dataclass(frozen=True, eq=False)
class AlleleCountEvidence:
    """Number of pileup elements matching each allele.

    Attributes
    ----------
    model : ErrorModelCountingModel
        Model that produced (and evaluates) the evidence.
    observations : ndarray, int, shape (n_alleles, )
        Number of pileup elements matching each allele.
    error_model : ErrorModel
        Site error model of the lane the pileup came from.
    n_elements : int
        Number of pileup elements counted.
    """

    model: object
    observations: np.ndarray
    error_model: object
    n_elements: int

    @property
    def n_observations(self):
        return self.n_elements


@dataclass
class HaplotypeLikelihoodModel(object):
    """Evidence from probabilistic alignment of reads to the haplotype
    of each allele, used when no reference sample error model exists.

    Attributes
    ----------
    aligner : ReadHaplotypeAligner
        Alignment model used to score reads against haplotypes.
    haplotypes : dict
        Mapping of each Allele to its haplotype sequence.
    reference : object
        Reference context passed through to the aligner.
    per_read_likelihoods : PerReadAlleleLikelihoods
        Accumulator updated by the aligner.
    """

    aligner: object
    haplotypes: dict
    reference: object = None
    per_read_likelihoods: PerReadAlleleLikelihoods = field(
        default_factory=PerReadAlleleLikelihoods
    )

    def collect(self, pileup, alleles, event_length=0):
        """Score each element of a pileup against each allele.

        Returns
        -------
        evidence : ReadLikelihoodEvidence
        """
        missing = [a for a in alleles if a not in self.haplotypes]
        if missing:
            raise ValueError(
                "No haplotype for alleles: {}".format(
                    ", ".join(a.bases for a in missing)
                )
            )
        # columns follow allele list order
        haplotypes = {a: self.haplotypes[a] for a in alleles}
        matrix = self.aligner.read_haplotype_likelihoods(
            pileup,
            haplotypes,
            self.reference,
            event_length,
            self.per_read_likelihoods,
        )
        matrix = np.asarray(matrix, dtype=np.float64)
        if matrix.ndim == 1 and matrix.size == 0:
            # no reads were scored
            matrix = matrix.reshape(0, len(alleles))
        if matrix.ndim != 2 or matrix.shape[1] != len(alleles):
            raise ValueError(
                "Read likelihood matrix of shape {} does not match {} alleles".format(
                    matrix.shape, len(alleles)
                )
            )
        logger.debug("Scored %d of %d pileup elements", len(matrix), len(pileup))
        return ReadLikelihoodEvidence(model=self, matrix=matrix)

    def evaluate(self, configuration, evidence, copy_number):
        """Log10 likelihood of a configuration given read-allele likelihoods.

        Alleles with a count of 0 do not contribute to the likelihood
        of any read.
        """
        return log10_likelihood_read_matrix(
            evidence.matrix,
            configuration.counts,
            copy_number,
            LOG10_CACHE,
        )


@dataclass
class ErrorModelCountingModel(object):
    """Evidence from counting pileup elements that match each allele,
    evaluated with a reference sample error model.

    Attributes
    ----------
    reference_base : str
        Reference base at the locus position.
    matches : callable
        Predicate with signature (element, allele, reference, reference_base)
        indicating if a pileup element supports an allele.
    max_quality : int
        Smallest maximum quality score of log-mismatch tables.
    """

    reference_base: str
    matches: object = pileup_element_matches
    max_quality: int = MAX_QUALITY
    _tables: dict = field(default_factory=dict, init=False, repr=False)

    def collect(self, pileup, alleles, error_model):
        """Count the pileup elements matching each allele.

        Returns
        -------
        evidence : AlleleCountEvidence
        """
        reference = reference_allele(alleles)
        observations = np.zeros(len(alleles), dtype=np.int64)
        n = 0
        for element in pileup:
            logger.debug(
                "base:%s isNextToDel:%s isNextToIns:%s eventBases:%s eventLength:%d",
                element.base,
                element.is_before_deletion_start,
                element.is_before_insertion,
                element.inserted_bases,
                element.indel_length,
            )
            for i, allele in enumerate(alleles):
                if self.matches(element, allele, reference, self.reference_base):
                    observations[i] += 1
            n += 1
        return AlleleCountEvidence(
            model=self,
            observations=observations,
            error_model=error_model,
            n_elements=n,
        )

    def mismatch_table(self, copy_number, max_quality):
        """Log-mismatch table covering qualities up to `max_quality`."""
        max_quality = max(max_quality, self.max_quality)
        key = (copy_number, max_quality)
        table = self._tables.get(key)
        if table is None:
            table = log10_mismatch_table(copy_number, max_quality)
            self._tables[key] = table
        return table

    def evaluate(self, configuration, evidence, copy_number):
        """Log10 likelihood of a configuration given allele observations,
        integrated over the quality score distribution of the error model.
        """
        error_model = evidence.error_model
        min_q = error_model.min_quality
        max_q = error_model.max_quality
        table = self.mismatch_table(copy_number, max_q)
        return log10_likelihood_allele_counts(
            evidence.observations,
            configuration.counts,
            table,
            error_model.log10_probabilities(min_q, max_q),
            min_q,
        )
