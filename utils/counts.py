# utils/counts.py
from __future__ import annotations

import numbers
from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, Iterable, Iterator, List, Mapping, Tuple, Union

ResidueCount = Tuple[str, int]


@dataclass(frozen=True)
class RawRow:
    position: int  # 1-based alignment column
    symbol: str  # residue or gap, any case
    count: int  # sequences showing `symbol` at `position`


@dataclass
class ColumnCounts:
    """
    Residue counts per alignment column, keyed by zero-based column index.
    Columns that never appeared in the input read as an empty list.
    """

    columns: Dict[int, List[ResidueCount]] = field(default_factory=dict)

    def __len__(self) -> int:
        # non-integer or negative positions are stored but are not columns
        indices = [
            k for k in self.columns if isinstance(k, numbers.Integral) and k >= 0
        ]
        return max(indices, default=-1) + 1

    def __getitem__(self, index: int) -> List[ResidueCount]:
        return self.columns.get(index, [])

    def __iter__(self) -> Iterator[List[ResidueCount]]:
        for i in range(len(self)):
            yield self[i]

    def present(self) -> List[int]:
        """Zero-based indices that received at least one row."""
        return sorted(self.columns)

    def append(self, index: int, residue: str, count: int) -> None:
        self.columns.setdefault(index, []).append((residue, count))


Row = Union[RawRow, Mapping]


def _payload_position(position):
    """Host payloads may carry the position as text."""
    if isinstance(position, str):
        value = float(position)
        return int(value) if value.is_integer() else value
    return position


def _unpack_row(row: Row) -> Tuple[int, str, int]:
    if isinstance(row, RawRow):
        return row.position, row.symbol, row.count
    if "dimensions" in row:
        # host payload: dimensions = [position, residue], metrics = [count]
        return _payload_position(row["dimensions"][0]), row["dimensions"][1], row["metrics"][0]
    return row["position"], row["symbol"], row["count"]


def parse_rows(rows: Iterable[Row]) -> ColumnCounts:
    """
    Group rows into per-column (residue, count) pairs in encounter order.
    Residues are uppercased; positions and counts are taken as given.
    A residue repeated within one column is appended again, not summed.
    """
    counts = ColumnCounts()
    for row in rows:
        position, symbol, count = _unpack_row(row)
        counts.append(position - 1, symbol.upper(), count)
    return counts


def alignment_to_rows(msa: List[str]) -> List[RawRow]:
    """Count every symbol (gaps included) per column of an aligned sequence set."""
    if not msa:
        return []
    aln_len = len(msa[0])
    for s in msa:
        if len(s) != aln_len:
            raise ValueError("All MSA sequences must have equal length")

    rows: List[RawRow] = []
    for i in range(aln_len):
        column = Counter(seq[i].upper() for seq in msa)
        for residue, c in sorted(column.items()):
            rows.append(RawRow(position=i + 1, symbol=residue, count=c))
    return rows
