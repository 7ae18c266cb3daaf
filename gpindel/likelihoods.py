#!/usr/bin/env python3

import logging
import numpy as np
from collections.abc import Mapping
from dataclasses import dataclass

from gpindel.alleles import check_alleles, event_length, reference_allele
from gpindel.errors import (
    InvariantViolation,
    LocusEvaluationError,
    LOCUS_EVALUATION_ERROR,
)

__all__ = ["GenotypeLikelihoods"]

logger = logging.getLogger(__name__)


@dataclass
class GenotypeLikelihoods(object):
    """Aggregates pileup evidence for a single sample at a single indel
    locus and evaluates the log10 likelihood of allele-count configurations.

    Attributes
    ----------
    alleles : tuple, Allele
        Ordered alleles of the locus with exactly one reference allele.
    copy_number : int
        Total number of chromosome copies (ploidy times number of
        pooled samples).
    haplotype_model : HaplotypeLikelihoodModel, optional
        Evidence model used when there are no lane error models.
    counting_model : ErrorModelCountingModel, optional
        Evidence model used with lane error models.
    orchestrator : callable, optional
        Called with this object and each piece of evidence collected
        during aggregation, e.g. an ExhaustiveOrchestrator.
    name : str, optional
        Name of the locus used in error messages.

    Notes
    -----
    Instances are intended to be used for a single (sample, locus) pair
    by a single thread.
    """

    alleles: tuple
    copy_number: int
    haplotype_model: object = None
    counting_model: object = None
    orchestrator: object = None
    name: str = None

    def __post_init__(self):
        self.alleles = check_alleles(self.alleles)
        if self.copy_number < 1:
            raise ValueError("Copy number must be a positive integer")
        self.event_length = event_length(self.alleles)

    def add(self, pileup, lane_error_models=(), ignore_lane_information=False):
        """Aggregate the evidence in a pileup.

        Parameters
        ----------
        pileup : Pileup
            Observations at the locus.
        lane_error_models : list, tuple
            Ordered (lane_id, ErrorModel) pairs. If empty then evidence is
            collected with the haplotype model.
        ignore_lane_information : bool
            If true the whole pileup is treated as a single lane and only
            the first lane with observations is used.

        Returns
        -------
        n : int
            Number of reads or pileup elements processed.
        """
        if isinstance(lane_error_models, Mapping):
            raise TypeError(
                "Lane error models must be an ordered sequence of (lane, model) pairs"
            )
        lane_error_models = list(lane_error_models)
        if len(lane_error_models) == 0:
            evidence = self.add_lane(pileup, None)
            return evidence.n_observations

        n = 0
        for lane_id, error_model in lane_error_models:
            if ignore_lane_information:
                lane_pileup = pileup
            else:
                lane_pileup = pileup.lane(lane_id)
            if lane_pileup.is_empty():
                logger.debug("Skipping lane '%s' without observations", lane_id)
                continue
            evidence = self.add_lane(lane_pileup, error_model)
            logger.debug(
                "Lane '%s' contributed %d observations", lane_id, evidence.n_observations
            )
            n += evidence.n_observations
            if ignore_lane_information:
                break
        return n

    def collect(self, pileup, error_model=None):
        """Collect evidence from a single lane without handing it over
        to the orchestrator.

        Parameters
        ----------
        pileup : Pileup
            Observations from a single lane.
        error_model : ErrorModel, optional
            Error model of the lane. If None then evidence is collected
            with the haplotype model.

        Returns
        -------
        evidence : ReadLikelihoodEvidence or AlleleCountEvidence
        """
        if error_model is None:
            if self.haplotype_model is None:
                raise ValueError("A haplotype model is required without error models")
            return self.haplotype_model.collect(
                pileup, self.alleles, event_length=self.event_length
            )
        if self.counting_model is None:
            raise ValueError("A counting model is required with error models")
        return self.counting_model.collect(pileup, self.alleles, error_model)

    def add_lane(self, pileup, error_model=None):
        """Collect evidence from a single lane and hand it over to the
        orchestrator.

        Returns
        -------
        evidence : ReadLikelihoodEvidence or AlleleCountEvidence
        """
        evidence = self.collect(pileup, error_model)
        if self.orchestrator is not None:
            try:
                self.orchestrator(self, evidence)
            except InvariantViolation:
                raise
            except Exception as e:
                message = LOCUS_EVALUATION_ERROR.format(name=self.name)
                raise LocusEvaluationError(message) from e
        return evidence

    def evaluate(self, configuration, evidence):
        """Log10 likelihood of an allele-count configuration.

        Parameters
        ----------
        configuration : AlleleCountConfiguration
            Configuration to evaluate. Its log10_likelihood is set
            to the result.
        evidence : ReadLikelihoodEvidence or AlleleCountEvidence
            Evidence collected from a pileup.

        Returns
        -------
        llk : float
            Log10 likelihood of the evidence given the configuration.
        """
        reference_allele(self.alleles)
        counts = configuration.counts
        if len(counts) != len(self.alleles):
            raise ValueError(
                "Configuration has {} counts for {} alleles".format(
                    len(counts), len(self.alleles)
                )
            )
        if np.sum(counts) != self.copy_number:
            raise ValueError(
                "Configuration counts sum to {} not {}".format(
                    np.sum(counts), self.copy_number
                )
            )
        llk = evidence.model.evaluate(configuration, evidence, self.copy_number)
        configuration.log10_likelihood = llk
        return llk
