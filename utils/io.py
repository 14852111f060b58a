# utils/io.py
import csv
import json
import math
from pathlib import Path
from typing import Any, List

from Bio import AlignIO

from utils.counts import RawRow


def read_count_table(path: str | Path) -> List[Any]:
    """
    Load count rows from CSV/TSV (header: position, symbol, count) or JSON.
    JSON may be a plain list of rows or a {"tables": {"DEFAULT": [...]}} payload.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Count table not found: {path}")

    suffix = path.suffix.lower()
    if suffix == ".json":
        with path.open("r") as f:
            data = json.load(f)
        if isinstance(data, dict) and "tables" in data:
            return data["tables"]["DEFAULT"]
        return data

    if suffix in (".csv", ".tsv", ".txt"):
        delimiter = "," if suffix == ".csv" else "\t"
        rows: List[RawRow] = []
        with path.open("r", newline="") as f:
            for rec in csv.DictReader(f, delimiter=delimiter):
                rows.append(
                    RawRow(
                        position=int(rec["position"]),
                        symbol=rec["symbol"],
                        count=int(rec["count"]),
                    )
                )
        return rows

    raise ValueError(f"Unsupported count table format: {path.suffix}")


def read_alignment(path: str | Path, fmt: str = "fasta") -> List[str]:
    """Return aligned sequences (as strings) from an existing alignment file."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Alignment not found: {path}")
    alignment = AlignIO.read(str(path), fmt)
    return [str(rec.seq) for rec in alignment]


def json_safe(obj):
    if isinstance(obj, float) and not math.isfinite(obj):
        return None
    if isinstance(obj, dict):
        return {k: json_safe(v) for k, v in obj.items()}
    if isinstance(obj, (list, tuple)):
        return [json_safe(v) for v in obj]
    return obj


def write_json(obj, path: str | Path) -> Path:
    """Write indented JSON; NaN/inf become null."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w") as f:
        json.dump(json_safe(obj), f, indent=2)
    return path


def load_json(path: str | Path):
    with Path(path).open() as f:
        return json.load(f)
