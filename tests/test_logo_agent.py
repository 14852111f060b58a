import json
import math

import pytest

from agents.logo import ERROR_MESSAGE, LogoAgent, LogoError, SequenceLogo, _cli
from utils.constants import SequenceType
from utils.counts import RawRow


class TestLogoAgentBuild:
    def test_pipeline(self, dna_rows):
        logo = LogoAgent().build(dna_rows)
        assert isinstance(logo, SequenceLogo)
        assert logo.sequence_type is SequenceType.NUCLEIC_ACID
        assert logo.sequence_count == 10
        assert len(logo.information_content) == 3
        # column 2 is fully conserved: highest information content
        assert logo.max_information_content == pytest.approx(logo.information_content[1])

    def test_payload(self, payload_rows):
        logo = LogoAgent().build(payload_rows)
        assert logo.sequence_type is SequenceType.PROTEIN
        assert logo.sequence_count == 4

    def test_malformed_rows_raise_single_error(self):
        with pytest.raises(LogoError) as exc:
            LogoAgent().build([{"position": 1, "symbol": "A"}])
        assert str(exc.value) == ERROR_MESSAGE
        assert isinstance(exc.value.__cause__, KeyError)

    def test_non_list_input_raises_single_error(self):
        with pytest.raises(LogoError):
            LogoAgent().build(42)

    def test_empty_alignment_is_not_an_error(self):
        logo = LogoAgent().build([])
        assert logo.sequence_count == 0
        assert len(logo.information_content) == 0

    def test_non_integer_position_does_not_break_payload(self):
        logo = LogoAgent().build([RawRow(1, "A", 4), RawRow(2.5, "C", 4)])
        assert len(logo.information_content) == 1
        assert logo.sequence_count == 4
        assert logo.sequence_type is SequenceType.NUCLEIC_ACID

    def test_zero_counts_give_nan_not_error(self):
        logo = LogoAgent().build([RawRow(1, "A", 0)])
        assert logo.sequence_count == 0
        assert not math.isfinite(logo.information_content[0])

    def test_custom_gap_symbols(self):
        rows = [RawRow(1, "A", 2), RawRow(1, "*", 5)]
        assert LogoAgent().build(rows).sequence_type is SequenceType.PROTEIN
        agent = LogoAgent(gaps=("-", ".", "*"))
        logo = agent.build(rows)
        assert logo.sequence_type is SequenceType.NUCLEIC_ACID
        assert [r for r, _ in logo.stacks()[0]] == ["A"]


class TestSequenceLogoToDict:
    def test_stacks_sorted_without_gaps(self, dna_rows):
        data = LogoAgent().build(dna_rows).to_dict()
        assert data["sequence_type"] == "n"
        assert data["sequence_count"] == 10
        col3 = data["columns"][2]
        assert col3["position"] == 3
        assert [r for r, _ in col3["residues"]] == ["A", "T"]

    def test_json_serialisable(self, dna_rows):
        json.dumps(LogoAgent().build(dna_rows).to_dict(), allow_nan=False)

    def test_non_finite_values_become_null(self):
        data = LogoAgent().build([RawRow(1, "A", 0)]).to_dict()
        json.dumps(data, allow_nan=False)
        assert data["columns"][0]["information_content"] is None
        assert data["columns"][0]["residues"] == [["A", None]]


class TestCli:
    def test_compute(self, tmp_path, capsys):
        table = tmp_path / "counts.csv"
        table.write_text("position,symbol,count\n1,A,8\n1,c,2\n2,G,10\n")
        out = tmp_path / "out" / "logo.json"

        assert _cli(["compute", "--table", str(table), "--out", str(out)]) == 0
        data = json.loads(out.read_text())
        assert data["sequence_count"] == 10
        assert data["columns"][0]["information_content"] == pytest.approx(1.0617, abs=1e-4)
        assert "[Logo]" in capsys.readouterr().out

    def test_analyze(self, tmp_path):
        msa = tmp_path / "aln.fasta"
        msa.write_text(">s1\nAC-\n>s2\nAC-\n>s3\nAGT\n")
        out = tmp_path / "logo.json"

        assert _cli(["analyze", "--msa", str(msa), "--out", str(out)]) == 0
        data = json.loads(out.read_text())
        assert data["sequence_type"] == "n"
        assert data["sequence_count"] == 3

    def test_malformed_table_reports_error(self, tmp_path, capsys):
        table = tmp_path / "counts.json"
        table.write_text(json.dumps([{"position": 1, "count": 3}]))

        assert _cli(["compute", "--table", str(table), "--out", str(tmp_path / "o.json")]) == 1
        assert ERROR_MESSAGE in capsys.readouterr().err
        assert not (tmp_path / "o.json").exists()

    def test_missing_table(self, tmp_path, capsys):
        assert _cli(["compute", "--table", str(tmp_path / "nope.csv")]) == 1
        assert "not found" in capsys.readouterr().err

    def test_visualize(self, tmp_path):
        table = tmp_path / "counts.tsv"
        table.write_text("position\tsymbol\tcount\n1\tA\t8\n1\tC\t2\n2\tG\t10\n")
        out = tmp_path / "logo.png"

        assert _cli(["visualize", "--table", str(table), "--out", str(out)]) == 0
        assert out.exists()
