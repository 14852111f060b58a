import matplotlib
import pytest

matplotlib.use("Agg")

from utils.counts import RawRow  # noqa: E402


@pytest.fixture
def dna_rows():
    # 10 sequences, 3 columns; column 3 has two gaps
    return [
        RawRow(1, "A", 8),
        RawRow(1, "C", 2),
        RawRow(2, "g", 10),
        RawRow(3, "T", 5),
        RawRow(3, "a", 3),
        RawRow(3, "-", 2),
    ]


@pytest.fixture
def payload_rows():
    # host payload shape: dimensions = [position, residue], metrics = [count]
    return [
        {"dimensions": [1, "m"], "metrics": [4]},
        {"dimensions": [2, "K"], "metrics": [3]},
        {"dimensions": [2, "."], "metrics": [1]},
        {"dimensions": [3, "W"], "metrics": [2]},
        {"dimensions": [3, "L"], "metrics": [2]},
    ]
