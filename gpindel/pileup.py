#!/usr/bin/env python3

from dataclasses import dataclass

__all__ = [
    "PileupElement",
    "Pileup",
    "pileup_element_matches",
]


@dataclass(frozen=True, eq=False)
class PileupElement:
    """Observation of a single read at the locus position.

    Attributes
    ----------
    base : str
        Base observed at the locus position.
    lane : str
        Identifier of the sequencing lane (read group) of the read.
    quality : int
        Phred-scaled base quality.
    is_before_deletion_start : bool
        True if the base is immediately followed by a deletion.
    is_before_insertion : bool
        True if the base is immediately followed by an insertion.
    inserted_bases : str
        Bases of the immediately following insertion (if any).
    indel_length : int
        Length of the immediately following insertion or deletion.
    read_name : str
        Name of the read.
    """

    base: str
    lane: str = None
    quality: int = None
    is_before_deletion_start: bool = False
    is_before_insertion: bool = False
    inserted_bases: str = ""
    indel_length: int = 0
    read_name: str = None


@dataclass(frozen=True)
class Pileup:
    """Ordered collection of pileup elements at a single locus."""

    elements: tuple = ()

    def __post_init__(self):
        # elements are held as an ordered tuple
        object.__setattr__(self, "elements", tuple(self.elements))

    def __len__(self):
        return len(self.elements)

    def __iter__(self):
        return iter(self.elements)

    def __getitem__(self, index):
        return self.elements[index]

    def is_empty(self):
        return len(self.elements) == 0

    def lanes(self):
        """Lane identifiers in order of first appearance."""
        lanes = {}
        for element in self.elements:
            lanes.setdefault(element.lane, None)
        return list(lanes)

    def lane(self, lane_id):
        """Sub-pileup of elements from a single lane in their original order."""
        return type(self)(tuple(e for e in self.elements if e.lane == lane_id))

    def __add__(self, other):
        return type(self)(self.elements + tuple(other.elements))


def pileup_element_matches(element, allele, reference, reference_base):
    """Determine if the evidence of a pileup element supports an allele.

    Parameters
    ----------
    element : PileupElement
        Observation of a read.
    allele : Allele
        Candidate allele.
    reference : Allele
        Reference allele of the locus.
    reference_base : str
        Reference base at the locus position.

    Returns
    -------
    matches : bool
        True if the element supports the allele.

    Notes
    -----
    Any indel following the element is a mismatch for the reference
    allele. Alternate alleles of the same length as the reference
    are compared by their first base. Deletions must match the length
    of the following deletion and insertions must match the inserted
    bases (excluding the leading reference base of the allele).
    """
    no_indel = not (element.is_before_insertion or element.is_before_deletion_start)
    if allele.is_reference:
        if len(allele.bases) > 0:
            return element.base == reference_base and no_indel
        else:
            return no_indel

    if len(reference.bases) == len(allele.bases):
        # snp or mnp
        return element.base == allele.bases[0]

    event = len(allele.bases) - len(reference.bases)
    if (
        event < 0
        and element.is_before_deletion_start
        and element.indel_length == -event
    ):
        return True
    if (
        event > 0
        and element.is_before_insertion
        and element.inserted_bases == allele.bases[1:]
    ):
        return True
    return False
