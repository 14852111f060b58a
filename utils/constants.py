# utils/constants.py
from enum import Enum
from typing import Dict

# Supported gap symbols
GAPS = ("-", ".")

# One letter codes for common nucleic acid residues
NUCLEIC_ACID_RESIDUES = ("A", "C", "G", "T")


class SequenceType(str, Enum):
    NUCLEIC_ACID = "n"
    PROTEIN = "a"


# Alphabet size used by the small-sample correction
ALPHABET_SIZE = {
    SequenceType.NUCLEIC_ACID: 4,
    SequenceType.PROTEIN: 20,
}

FALLBACK_GLYPH = "?"
FALLBACK_COLOR = "#cccccc"

# Residue colours per sequence type (nucleotide / chemistry based protein scheme)
COLORS: Dict[SequenceType, Dict[str, str]] = {
    SequenceType.NUCLEIC_ACID: {
        "A": "#109648",
        "C": "#255c99",
        "G": "#f7b32b",
        "T": "#d62839",
        "U": "#d62839",
    },
    SequenceType.PROTEIN: {
        # hydrophobic
        "A": "#000000",
        "V": "#000000",
        "L": "#000000",
        "I": "#000000",
        "P": "#000000",
        "W": "#000000",
        "F": "#000000",
        "M": "#000000",
        # polar
        "G": "#109648",
        "S": "#109648",
        "T": "#109648",
        "Y": "#109648",
        "C": "#109648",
        "Q": "#7a2e8e",
        "N": "#7a2e8e",
        # basic
        "K": "#255c99",
        "R": "#255c99",
        "H": "#255c99",
        # acidic
        "D": "#d62839",
        "E": "#d62839",
    },
}


def residue_color(sequence_type: SequenceType, residue: str) -> str:
    """Colour for a residue, grey for anything outside the scheme."""
    return COLORS[sequence_type].get(residue, FALLBACK_COLOR)
