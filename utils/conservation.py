# utils/conservation.py
import math
from typing import Iterable, List, Sequence, Tuple

import numpy as np

from utils.constants import ALPHABET_SIZE, GAPS, NUCLEIC_ACID_RESIDUES, SequenceType
from utils.counts import ColumnCounts, ResidueCount


def determine_sequence_type(
    counts: ColumnCounts,
    gaps: Sequence[str] = GAPS,
    nucleic_acid_residues: Sequence[str] = NUCLEIC_ACID_RESIDUES,
) -> SequenceType:
    """
    Infer the alignment type from total residue mass over all columns.
    Gaps are ignored; ties resolve to protein.
    """
    acgt = 0
    other = 0
    for residue_counts in counts:
        for residue, count in residue_counts:
            if residue in gaps:
                continue
            if residue in nucleic_acid_residues:
                acgt += count
            else:
                other += count

    return SequenceType.NUCLEIC_ACID if acgt > other else SequenceType.PROTEIN


def get_sequence_count(counts: ColumnCounts) -> int:
    """Number of aligned sequences, taken as the best covered column (gaps included)."""
    sequence_count = 0
    for residue_counts in counts:
        sequence_count = max(sequence_count, sum(c for _, c in residue_counts))
    return sequence_count


def small_sample_correction(sequence_type: SequenceType, sequence_count: int) -> float:
    s = ALPHABET_SIZE[sequence_type]
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.float64(s - 1) / (2 * np.float64(sequence_count)) / math.log(2))


def column_entropy(residue_counts: List[ResidueCount], sequence_count: int) -> float:
    """
    Shannon entropy (bits) of one column, frequencies relative to sequence_count.
    Every stored pair contributes, gaps included; zero counts contribute 0.
    """
    if not residue_counts:
        return 0.0
    c = np.array([count for _, count in residue_counts], dtype=float)
    with np.errstate(divide="ignore", invalid="ignore"):
        f = c / np.float64(sequence_count)
        terms = np.where(c == 0, 0.0, f * np.log2(np.where(c == 0, 1.0, f)))
    return float(-np.sum(terms))


def get_column_information_content(
    counts: ColumnCounts, sequence_type: SequenceType, sequence_count: int
) -> np.ndarray:
    """
    Information content (bits) per column, as in
    https://en.wikipedia.org/wiki/Sequence_logo#Logo_creation

      IC = log2(s) - (H + e_n)

    s is 20 for protein and 4 for nucleic acid, e_n the small-sample correction.
    Values are not clamped. A sequence_count of 0 yields NaN/inf, it does not raise.
    """
    s = ALPHABET_SIZE[sequence_type]
    e_n = small_sample_correction(sequence_type, sequence_count)

    ic = np.empty(len(counts), dtype=float)
    for i, residue_counts in enumerate(counts):
        H = column_entropy(residue_counts, sequence_count)
        ic[i] = math.log2(s) - (H + e_n)
    return ic


def sort_residue_counts(residue_counts: Iterable[ResidueCount]) -> List[ResidueCount]:
    """Ascending by count; equal counts keep their input order."""
    return sorted(residue_counts, key=lambda rc: rc[1])


def residue_stack(
    residue_counts: List[ResidueCount],
    information_content: float,
    sequence_count: int,
    gaps: Sequence[str] = GAPS,
) -> List[Tuple[str, float]]:
    """
    Letter heights (bits) for one column, bottom to top.
    Gap symbols are left out of the stack.
    """
    stack = []
    for residue, count in sort_residue_counts(residue_counts):
        if residue in gaps:
            continue
        with np.errstate(divide="ignore", invalid="ignore"):
            height = float(
                np.float64(count) * information_content / np.float64(sequence_count)
            )
        stack.append((residue, height))
    return stack


def max_information_content(information_content: Iterable[float]) -> float:
    """Tallest column, never below 0. NaN columns are skipped."""
    best = 0.0
    for h in information_content:
        if not math.isnan(h):
            best = max(best, float(h))
    return best
