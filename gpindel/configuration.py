#!/usr/bin/env python3

import numpy as np
from dataclasses import dataclass, field
from itertools import combinations_with_replacement

from gpindel.combinatorics import count_configurations

__all__ = [
    "AlleleCountConfiguration",
    "iter_configurations",
    "ExhaustiveOrchestrator",
]


@dataclass(eq=False)
class AlleleCountConfiguration:
    """Hypothesised number of chromosome copies carrying each allele.

    Attributes
    ----------
    counts : ndarray, int, shape (n_alleles, )
        Count of each allele in allele list order.
    log10_likelihood : float
        Log10 likelihood of the observed evidence given this
        configuration (nan until evaluated).
    """

    counts: np.ndarray
    log10_likelihood: float = np.nan

    def __post_init__(self):
        counts = np.asarray(self.counts, dtype=np.int64)
        if counts.ndim != 1:
            raise ValueError("Allele counts must be a one-dimensional vector")
        if np.any(counts < 0):
            raise ValueError("Allele counts must be non-negative")
        self.counts = counts

    @property
    def copy_number(self):
        return int(self.counts.sum())

    def __repr__(self):
        return "AlleleCountConfiguration({}, log10_likelihood={})".format(
            tuple(int(c) for c in self.counts), self.log10_likelihood
        )


def iter_configurations(n_alleles, copy_number):
    """Iterate over all allele-count configurations in a fixed order.

    Parameters
    ----------
    n_alleles : int
        Number of candidate alleles.
    copy_number : int
        Total number of chromosome copies (2N).

    Yields
    ------
    configuration : AlleleCountConfiguration
        Unevaluated configuration.

    Notes
    -----
    Configurations are generated from multi-sets of allele indices
    which follows the VCF sort order of genotypes.
    """
    for alleles in combinations_with_replacement(range(n_alleles), copy_number):
        counts = np.bincount(np.array(alleles, dtype=np.int64), minlength=n_alleles)
        yield AlleleCountConfiguration(counts)


@dataclass
class ExhaustiveOrchestrator(object):
    """Evaluates every allele-count configuration for each piece of
    evidence handed over during aggregation.

    Evidence from successive lanes is treated as independent
    observations of the same chromosome copies hence the
    log10 likelihoods of a configuration are summed across lanes.
    This matches treating all lanes as one only for error models with a
    single quality score, as each lane integrates over its own qualities.

    Attributes
    ----------
    configurations : list, AlleleCountConfiguration
        Configurations in evaluation order.
    log10_likelihoods : ndarray, float
        Combined log10 likelihood of each configuration.
    n_evidence : int
        Number of pieces of evidence evaluated.
    """

    configurations: list = field(default_factory=list)
    log10_likelihoods: np.ndarray = None
    n_evidence: int = 0

    def __call__(self, likelihoods, evidence):
        if len(self.configurations) == 0:
            n_alleles = len(likelihoods.alleles)
            self.configurations = list(
                iter_configurations(n_alleles, likelihoods.copy_number)
            )
            assert len(self.configurations) == count_configurations(
                n_alleles, likelihoods.copy_number
            )
            self.log10_likelihoods = np.zeros(len(self.configurations))
        for i, configuration in enumerate(self.configurations):
            self.log10_likelihoods[i] += likelihoods.evaluate(configuration, evidence)
        # configurations hold the combined value across lanes
        for configuration, llk in zip(self.configurations, self.log10_likelihoods):
            configuration.log10_likelihood = llk
        self.n_evidence += 1

    def result(self):
        """Pairs of allele counts and combined log10 likelihoods."""
        return [
            (tuple(int(c) for c in config.counts), llk)
            for config, llk in zip(self.configurations, self.log10_likelihoods)
        ]
