#!/usr/bin/env python3

import numpy as np

__all__ = [
    "PerReadAlleleLikelihoods",
    "ReadHaplotypeAligner",
    "PrecomputedAligner",
]


class PerReadAlleleLikelihoods(object):
    """Accumulator of log10 likelihoods of individual pileup elements
    given each allele.

    Elements are kept in the order in which they are first added.
    """

    def __init__(self):
        self._data = {}

    def __len__(self):
        return len(self._data)

    def __contains__(self, element):
        return element in self._data

    def add(self, element, allele, llk):
        self._data.setdefault(element, {})[allele] = llk

    def get(self, element, allele):
        return self._data[element][allele]

    def elements(self):
        return list(self._data)

    def as_matrix(self, alleles):
        """Log10 likelihoods as an array of shape (n_elements, n_alleles)."""
        matrix = np.empty((len(self._data), len(alleles)))
        for i, likelihoods in enumerate(self._data.values()):
            for j, allele in enumerate(alleles):
                matrix[i, j] = likelihoods[allele]
        return matrix


class ReadHaplotypeAligner(object):
    """Interface of an alignment model that scores pileup elements
    against candidate haplotypes (e.g. a pair-HMM).
    """

    def read_haplotype_likelihoods(
        self,
        pileup,
        haplotypes,
        reference,
        event_length,
        per_read_likelihoods,
    ):
        """Log10 likelihood of each pileup element given each haplotype.

        Parameters
        ----------
        pileup : Pileup
            Observations at the locus.
        haplotypes : dict
            Ordered mapping of each Allele to its haplotype sequence.
        reference : object
            Reference context of the locus.
        event_length : int
            Signed length of the indel event.
        per_read_likelihoods : PerReadAlleleLikelihoods
            Accumulator to be updated with the likelihood of each
            element that is scored.

        Returns
        -------
        matrix : ndarray, float, shape (n_reads, n_alleles)
            Log10 likelihoods of scored elements (rows) given each
            allele (columns in the order of `haplotypes`).
        """
        raise NotImplementedError()


class PrecomputedAligner(ReadHaplotypeAligner):
    """Serves read-haplotype likelihoods computed ahead of time.

    Parameters
    ----------
    likelihoods : dict
        Mapping of read name to a sequence of log10 likelihoods
        in allele order or to a mapping of Allele to log10 likelihood.

    Notes
    -----
    Pileup elements of reads without likelihoods are not scored.
    """

    def __init__(self, likelihoods):
        self.likelihoods = likelihoods

    def _row(self, read_name, alleles):
        values = self.likelihoods[read_name]
        if isinstance(values, dict):
            return [values[a] for a in alleles]
        values = list(values)
        if len(values) != len(alleles):
            raise ValueError(
                "Expected {} likelihoods for read '{}' but found {}".format(
                    len(alleles), read_name, len(values)
                )
            )
        return values

    def read_haplotype_likelihoods(
        self,
        pileup,
        haplotypes,
        reference,
        event_length,
        per_read_likelihoods,
    ):
        alleles = list(haplotypes)
        rows = []
        for element in pileup:
            if element.read_name not in self.likelihoods:
                continue
            row = self._row(element.read_name, alleles)
            for allele, llk in zip(alleles, row):
                per_read_likelihoods.add(element, allele, llk)
            rows.append(row)
        matrix = np.array(rows, dtype=np.float64).reshape(len(rows), len(alleles))
        return matrix
