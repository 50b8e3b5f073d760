"""End-to-end tests for the decompounding pipeline and CLI."""

import json
from pathlib import Path

import pandas as pd
import pytest

from decompounder.cli import main
from decompounder.config import Config, DictionaryConfig, OutputConfig
from decompounder.pipeline import COLUMNS, DecompoundPipeline, sanitize_text

from conftest import README_SENTENCE


def create_test_data(tmp_path: Path) -> Path:
    """Create a small JSONL corpus."""
    records = [
        {"file_id": "readme", "text": README_SENTENCE},
        {"file_id": "keywords", "content": "Ein Schlüsselwort"},
        {"file_id": "empty", "text": "   "},
        {"file_id": "number", "text": 42},
        {"file_id": "nested", "content": ["Donaudampfschiff"]},
        [1, 2],
        "Donaudampfschiff",
    ]
    lines = [json.dumps(r, ensure_ascii=False) for r in records]
    lines.insert(2, "{not json")
    lines.insert(1, "")
    input_path = tmp_path / "input.jsonl"
    input_path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return input_path


class TestPipeline:
    """Tests for the batch pipeline."""

    def test_run_writes_token_csv(self, tmp_path, dictionary_file):
        """Every emitted token becomes one CSV row."""
        input_path = create_test_data(tmp_path)
        output_path = tmp_path / "out" / "tokens.csv"
        config = Config(
            input_file=input_path,
            dictionary=DictionaryConfig(path=dictionary_file),
            output=OutputConfig(output_path=output_path),
        )

        line_count = DecompoundPipeline(config).run()

        assert line_count == 2
        assert output_path.exists()
        results = pd.read_csv(output_path, keep_default_na=False)
        assert list(results.columns) == COLUMNS

        readme = results[results["File_ID"] == "readme"]
        assert list(readme["Token"][:4]) == ["Die", "Jahresfeier", "Jahr", "feier"]
        assert list(readme["Token_Order"]) == list(range(1, len(readme) + 1))
        assert set(readme["Source_Line_Number"]) == {1}

        keywords = results[results["File_ID"] == "keywords"]
        assert list(keywords["Token"]) == ["Ein", "Schlüsselwort", "Schlüssel", "wort"]
        assert list(keywords["Is_Original"]) == [True, True, False, False]
        assert list(keywords["Same_Position"]) == [False, False, True, True]

    def test_missing_input(self, tmp_path, dictionary_file):
        """A missing input file is reported."""
        config = Config(
            input_file=tmp_path / "missing.jsonl",
            dictionary=DictionaryConfig(path=dictionary_file),
        )
        with pytest.raises(FileNotFoundError):
            DecompoundPipeline(config).run()

    def test_no_input_configured(self, dictionary_file):
        """Running without an input file is a configuration error."""
        config = Config(dictionary=DictionaryConfig(path=dictionary_file))
        with pytest.raises(ValueError):
            DecompoundPipeline(config).run()

    def test_sanitize_text(self):
        """Control characters are stripped from CSV values."""
        assert sanitize_text("Donau\x00dampf\x1fschiff") == "Donaudampfschiff"
        assert sanitize_text("") == ""

    def test_record_without_string_text(self, dictionary_file):
        """Records whose text is not a string produce no rows."""
        config = Config(dictionary=DictionaryConfig(path=dictionary_file))
        pipeline = DecompoundPipeline(config)
        assert pipeline.process_record(1, {"text": 42}) == []
        assert pipeline.process_record(2, {"content": ["Jahresfeier"]}) == []
        assert pipeline.process_record(3, {"text": None}) == []
        rows = pipeline.process_record(4, {"text": None, "content": "Jahresfeier"})
        assert [row["Token"] for row in rows] == ["Jahresfeier", "Jahr", "feier"]
        assert rows[0]["File_ID"] == "Unknown_Source"


class TestCli:
    """Tests for the command line."""

    def test_analyze(self, dictionary_file, capsys):
        """Tokens are printed one per line."""
        exit_code = main(["analyze", "--dictionary", str(dictionary_file), "Jahresfeier", "der"])
        assert exit_code == 0
        assert capsys.readouterr().out.splitlines() == ["Jahresfeier", "Jahr", "feier", "der"]

    def test_analyze_with_positions(self, dictionary_file, capsys):
        """Position increments and offsets can be shown."""
        exit_code = main(
            ["analyze", "--dictionary", str(dictionary_file), "--show-positions", "Jahresfeier"]
        )
        assert exit_code == 0
        assert capsys.readouterr().out.splitlines() == [
            "Jahresfeier\t1\t0\t11",
            "Jahr\t0\t0\t11",
            "feier\t0\t0\t11",
        ]

    def test_analyze_with_keywords(self, tmp_path, dictionary_file, capsys):
        """Protected keywords stay whole with --respect-keywords."""
        keywords = tmp_path / "keywords.txt"
        keywords.write_text("Schlüsselwort\n", encoding="utf-8")
        args = ["analyze", "--dictionary", str(dictionary_file), "--keywords", str(keywords)]

        assert main(args + ["--respect-keywords", "Schlüsselwort"]) == 0
        assert capsys.readouterr().out.splitlines() == ["Schlüsselwort"]

        assert main(args + ["Schlüsselwort"]) == 0
        assert capsys.readouterr().out.splitlines() == ["Schlüsselwort", "Schlüssel", "wort"]

    def test_analyze_without_dictionary(self, capsys):
        """A missing vocabulary is an error, not a crash."""
        assert main(["analyze", "Jahresfeier"]) == 1
        assert "Error:" in capsys.readouterr().err

    def test_invalid_min_length(self, dictionary_file, capsys):
        """Invalid overrides are reported as errors."""
        args = ["analyze", "--dictionary", str(dictionary_file), "--min-length", "0", "Jahr"]
        assert main(args) == 1
        assert "Error:" in capsys.readouterr().err

    def test_run(self, tmp_path, dictionary_file, capsys):
        """The run command writes the token CSV."""
        input_path = create_test_data(tmp_path)
        output_path = tmp_path / "tokens.csv"
        exit_code = main([
            "run",
            "--dictionary", str(dictionary_file),
            "--input", str(input_path),
            "--output", str(output_path),
            "--subwords-only",
        ])
        assert exit_code == 0
        assert "Processed 2 lines" in capsys.readouterr().out
        results = pd.read_csv(output_path, keep_default_na=False)
        assert "Jahresfeier" not in set(results["Token"])
        assert "Jahr" in set(results["Token"])

    def test_run_without_input(self, dictionary_file, capsys):
        """The run command needs an input file."""
        assert main(["run", "--dictionary", str(dictionary_file)]) == 1
        assert "Input file is required" in capsys.readouterr().err

    def test_run_with_missing_config(self, tmp_path, capsys):
        """A missing config file is an error, not a crash."""
        args = ["run", "--config", str(tmp_path / "missing.yaml"), "--input", "x.jsonl"]
        assert main(args) == 1
        assert "Error:" in capsys.readouterr().err

    def test_analyze_with_malformed_config(self, tmp_path, capsys):
        """Malformed YAML is an error, not a crash."""
        config_path = tmp_path / "config.yaml"
        config_path.write_text("dictionary: [unclosed\n", encoding="utf-8")
        assert main(["analyze", "--config", str(config_path), "Jahr"]) == 1
        assert "Invalid YAML" in capsys.readouterr().err

    def test_run_with_malformed_config(self, tmp_path, capsys):
        """The run command reports malformed YAML the same way."""
        config_path = tmp_path / "config.yaml"
        config_path.write_text("dictionary: [unclosed\n", encoding="utf-8")
        assert main(["run", "--config", str(config_path), "--input", "x.jsonl"]) == 1
        assert "Invalid YAML" in capsys.readouterr().err
