from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterable, List, Sequence

import numpy as np

from utils.constants import GAPS, NUCLEIC_ACID_RESIDUES, SequenceType
from utils.conservation import (
    determine_sequence_type,
    get_column_information_content,
    get_sequence_count,
    max_information_content,
    residue_stack,
)
from utils.counts import ColumnCounts, alignment_to_rows, parse_rows
from utils.io import json_safe, read_alignment, read_count_table, write_json

ERROR_MESSAGE = (
    "The sequence logo encountered an error. Make sure that you provide "
    "the position and residue dimensions and the count metric."
)


class LogoError(Exception):
    """Raised when a payload cannot be turned into a sequence logo."""

    def __init__(self, message: str = ERROR_MESSAGE):
        super().__init__(message)


@dataclass
class SequenceLogo:
    column_counts: ColumnCounts
    sequence_type: SequenceType
    sequence_count: int
    information_content: np.ndarray
    gaps: Sequence[str] = GAPS

    @property
    def max_information_content(self) -> float:
        return max_information_content(self.information_content)

    def stacks(self) -> List[List[tuple]]:
        """Non-gap residue heights per column, bottom to top."""
        return [
            residue_stack(
                residue_counts,
                float(self.information_content[i]),
                self.sequence_count,
                gaps=self.gaps,
            )
            for i, residue_counts in enumerate(self.column_counts)
        ]

    def to_dict(self) -> Dict:
        """JSON-ready summary; NaN/inf values become None."""
        return json_safe({
            "sequence_type": self.sequence_type.value,
            "sequence_count": int(self.sequence_count),
            "max_information_content": self.max_information_content,
            "columns": [
                {
                    "position": i + 1,
                    "information_content": float(self.information_content[i]),
                    "residues": [[r, h] for r, h in stack],
                }
                for i, stack in enumerate(self.stacks())
            ],
        })


class LogoAgent:
    def __init__(
        self,
        gaps: Sequence[str] = GAPS,
        nucleic_acid_residues: Sequence[str] = NUCLEIC_ACID_RESIDUES,
    ):
        self.gaps = tuple(gaps)
        self.nucleic_acid_residues = tuple(nucleic_acid_residues)

    def _build(self, rows: Iterable) -> SequenceLogo:
        column_counts = parse_rows(rows)
        sequence_type = determine_sequence_type(
            column_counts,
            gaps=self.gaps,
            nucleic_acid_residues=self.nucleic_acid_residues,
        )
        sequence_count = get_sequence_count(column_counts)
        information_content = get_column_information_content(
            column_counts, sequence_type, sequence_count
        )
        return SequenceLogo(
            column_counts=column_counts,
            sequence_type=sequence_type,
            sequence_count=sequence_count,
            information_content=information_content,
            gaps=self.gaps,
        )

    def build(self, rows: Iterable) -> SequenceLogo:
        """
        Parse count rows and compute the logo statistics.
        Any failure surfaces as a single LogoError; nothing partial is returned.
        """
        try:
            return self._build(rows)
        except Exception as err:
            raise LogoError() from err

    def build_from_table(self, table_path: str | Path) -> SequenceLogo:
        return self.build(read_count_table(table_path))

    def build_from_alignment(self, msa_path: str | Path, fmt: str = "fasta") -> SequenceLogo:
        """Count residues column by column in an existing alignment, then build."""
        msa = read_alignment(msa_path, fmt=fmt)
        return self.build(alignment_to_rows(msa))


# ---------- CLI ----------
def _cli(argv=None):
    parser = argparse.ArgumentParser("LogoAgent CLI")
    sub = parser.add_subparsers(dest="cmd", required=True)

    c = sub.add_parser("compute", help="Information content from a residue count table")
    c.add_argument("--table", required=True, help="CSV/TSV/JSON count table")
    c.add_argument("--out", default="data/cache/logo.json", help="Output JSON file")

    a = sub.add_parser("analyze", help="Information content from an aligned file")
    a.add_argument("--msa", required=True, help="Input alignment")
    a.add_argument("--format", default="fasta", help="Alignment format (Bio.AlignIO)")
    a.add_argument("--out", default="data/cache/logo.json", help="Output JSON file")

    v = sub.add_parser("visualize", help="Draw a sequence logo from a count table")
    v.add_argument("--table", required=True, help="CSV/TSV/JSON count table")
    v.add_argument("--out", default="data/cache/logo.png", help="Output PNG")

    args = parser.parse_args(argv)
    agent = LogoAgent()

    try:
        if args.cmd == "compute":
            logo = agent.build_from_table(args.table)
        elif args.cmd == "analyze":
            logo = agent.build_from_alignment(args.msa, fmt=args.format)
        elif args.cmd == "visualize":
            logo = agent.build_from_table(args.table)
        else:
            raise ValueError(f"Unknown command: {args.cmd}")
    except (LogoError, FileNotFoundError, ValueError) as err:
        print(f"[Logo] {err}", file=sys.stderr)
        return 1

    if args.cmd == "visualize":
        from utils.visualize import plot_sequence_logo  # lazy import

        plot_sequence_logo(logo, out_png=args.out)
        return 0

    outp = write_json(logo.to_dict(), args.out)
    kind = "nucleic acid" if logo.sequence_type is SequenceType.NUCLEIC_ACID else "protein"
    print(
        f"[Logo] {len(logo.column_counts)} columns, {logo.sequence_count} sequences ({kind})"
    )
    print(f"[Logo] Information content saved to {outp}")
    return 0


if __name__ == "__main__":
    sys.exit(_cli())
