import numpy as np
import pytest

from gpindel.alleles import Allele
from gpindel.alignment import (
    PerReadAlleleLikelihoods,
    PrecomputedAligner,
    ReadHaplotypeAligner,
)
from gpindel.pileup import Pileup, PileupElement


REF = Allele.reference("AT")
DEL1 = Allele("A")


def test_per_read_allele_likelihoods():
    acc = PerReadAlleleLikelihoods()
    e0 = PileupElement("A", read_name="r0")
    e1 = PileupElement("A", read_name="r1")
    acc.add(e1, REF, -0.1)
    acc.add(e1, DEL1, -3.0)
    acc.add(e0, DEL1, -0.2)
    acc.add(e0, REF, -2.0)
    assert len(acc) == 2
    assert e0 in acc
    assert acc.elements() == [e1, e0]
    assert acc.get(e0, REF) == -2.0
    np.testing.assert_array_equal(
        acc.as_matrix([REF, DEL1]), [[-0.1, -3.0], [-2.0, -0.2]]
    )


def test_read_haplotype_aligner_interface():
    with pytest.raises(NotImplementedError):
        ReadHaplotypeAligner().read_haplotype_likelihoods(
            Pileup(), {}, None, 0, PerReadAlleleLikelihoods()
        )


def test_precomputed_aligner():
    aligner = PrecomputedAligner(
        {
            "r0": [0.0, -2.0],
            "r2": {DEL1: -0.5, REF: -1.5},
        }
    )
    pileup = Pileup(
        [
            PileupElement("A", read_name="r0"),
            PileupElement("A", read_name="r1"),
            PileupElement("A", read_name="r2"),
        ]
    )
    acc = PerReadAlleleLikelihoods()
    haplotypes = {REF: "GGATCC", DEL1: "GGACC"}
    matrix = aligner.read_haplotype_likelihoods(pileup, haplotypes, None, -1, acc)
    np.testing.assert_array_equal(matrix, [[0.0, -2.0], [-1.5, -0.5]])
    assert len(acc) == 2


def test_precomputed_aligner__empty():
    aligner = PrecomputedAligner({})
    matrix = aligner.read_haplotype_likelihoods(
        Pileup(), {REF: "GGATCC", DEL1: "GGACC"}, None, -1, PerReadAlleleLikelihoods()
    )
    assert matrix.shape == (0, 2)


def test_precomputed_aligner__wrong_length():
    aligner = PrecomputedAligner({"r0": [0.0]})
    with pytest.raises(ValueError):
        aligner.read_haplotype_likelihoods(
            Pileup([PileupElement("A", read_name="r0")]),
            {REF: "GGATCC", DEL1: "GGACC"},
            None,
            -1,
            PerReadAlleleLikelihoods(),
        )


def test_per_read_allele_likelihoods__equal_elements():
    # separate observations with identical fields are kept apart
    e0 = PileupElement("A", read_name="r0")
    e1 = PileupElement("A", read_name="r0")
    acc = PerReadAlleleLikelihoods()
    acc.add(e0, REF, -0.1)
    acc.add(e1, REF, -0.2)
    assert len(acc) == 2
    assert acc.get(e0, REF) == -0.1
    assert acc.get(e1, REF) == -0.2


def test_precomputed_aligner__equal_elements():
    aligner = PrecomputedAligner({"r0": [0.0, -2.0]})
    pileup = Pileup(
        [PileupElement("A", read_name="r0"), PileupElement("A", read_name="r0")]
    )
    acc = PerReadAlleleLikelihoods()
    matrix = aligner.read_haplotype_likelihoods(
        pileup, {REF: "GGATCC", DEL1: "GGACC"}, None, -1, acc
    )
    assert len(matrix) == 2
    assert len(acc) == len(matrix)
    np.testing.assert_array_equal(acc.as_matrix([REF, DEL1]), matrix)
