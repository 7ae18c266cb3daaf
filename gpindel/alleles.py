#!/usr/bin/env python3

from dataclasses import dataclass

from gpindel.errors import InvariantViolation

__all__ = [
    "Allele",
    "reference_allele",
    "check_alleles",
    "event_length",
]


@dataclass(frozen=True)
class Allele:
    """An allele at an indel locus.

    Attributes
    ----------
    bases : str
        Allele bases including the leading (padding) reference base
        used in VCF representation of indels.
    is_reference : bool
        True if this is the reference allele.
    """

    bases: str
    is_reference: bool = False

    def __len__(self):
        return len(self.bases)

    @classmethod
    def reference(cls, bases):
        return cls(bases=bases, is_reference=True)


def reference_allele(alleles):
    """Return the unique reference allele of an allele list.

    Parameters
    ----------
    alleles : list, Allele
        Ordered list of alleles.

    Returns
    -------
    allele : Allele
        The reference allele.

    Raises
    ------
    InvariantViolation
        If the list does not contain exactly one reference allele.
    """
    references = [a for a in alleles if a.is_reference]
    if len(references) == 0:
        raise InvariantViolation("BUG: no reference allele in allele list")
    if len(references) > 1:
        raise InvariantViolation("BUG: multiple reference alleles in allele list")
    return references[0]


def check_alleles(alleles):
    """Check that an allele list is non-empty, distinct and has a
    single reference allele.

    Returns the alleles as a tuple.
    """
    alleles = tuple(alleles)
    if len(alleles) == 0:
        raise ValueError("Allele list is empty")
    if len(set(alleles)) != len(alleles):
        raise ValueError("Allele list contains duplicate alleles")
    reference_allele(alleles)
    return alleles


def event_length(alleles):
    """Signed length of the indel event described by an allele list.

    The event length is the difference in length between an alternate
    allele and the reference allele, taking the alternate allele with the
    largest absolute difference. Deletions are negative and insertions
    are positive.
    """
    ref = reference_allele(alleles)
    length = 0
    for allele in alleles:
        if allele.is_reference:
            continue
        diff = len(allele) - len(ref)
        if abs(diff) > abs(length):
            length = diff
    return length
