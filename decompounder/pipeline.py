"""Batch decompounding pipeline: JSONL records in, token CSV out."""

import json
import logging
import re
from pathlib import Path

import pandas as pd
from tqdm import tqdm

from .analysis import Analyzer
from .config import Config

logger = logging.getLogger(__name__)

# Regex pattern for illegal control characters (except tab, newline, carriage return)
ILLEGAL_CHARS = re.compile(r'[\x00-\x08\x0b\x0c\x0e-\x1f]')

COLUMNS = [
    "File_ID",
    "Source_Line_Number",
    "Token_Order",
    "Token",
    "Is_Original",
    "Same_Position",
    "Start_Index",
    "End_Index",
]


def sanitize_text(text: str) -> str:
    """Remove control characters that may interfere with CSV/Excel.

    Args:
        text: Input text

    Returns:
        Sanitized text
    """
    if not text:
        return text
    return ILLEGAL_CHARS.sub('', text)


class DecompoundPipeline:
    """Pipeline for decompounding the text of JSONL records."""

    def __init__(self, config: Config, analyzer_name: str | None = None):
        """Initialize decompounding pipeline.

        Args:
            config: Pipeline configuration
            analyzer_name: Optional named analyzer profile to apply
        """
        self.config = config
        self.analyzer = Analyzer.from_config(config, name=analyzer_name)

    def process_record(self, line_num: int, record: dict) -> list[dict]:
        """Decompound one record and return its CSV rows.

        Args:
            line_num: Line number of the record in the input file
            record: Parsed JSON record with ``text`` or ``content``

        Returns:
            One row per emitted token (empty if the record has no string text)
        """
        text_content = record.get("text") or record.get("content") or ""
        if not isinstance(text_content, str):
            logger.warning(f"Skipping non-string text at line {line_num}")
            return []
        if not text_content.strip():
            return []

        file_id = record.get("file_id", "Unknown_Source")
        rows = []
        for order, token in enumerate(self.analyzer.analyze(text_content), 1):
            row = {
                "File_ID": file_id,
                "Source_Line_Number": line_num,
                "Token_Order": order,
            }
            row.update(token.to_row())
            rows.append(row)
        return rows

    def process_file(self, input_path: Path, output_path: Path) -> int:
        """Process a JSONL file and write the emitted tokens as CSV.

        Args:
            input_path: Path to input JSONL file
            output_path: Path of the CSV file to write

        Returns:
            Number of lines processed
        """
        logger.info(f"Reading from: {input_path}")
        with open(input_path, "r", encoding="utf-8") as f:
            total_lines = sum(1 for _ in f)

        rows = []
        lines_processed = 0
        with open(input_path, "r", encoding="utf-8") as infile:
            for line_num, line in tqdm(
                enumerate(infile, 1), total=total_lines, desc="Decompounding"
            ):
                line = line.strip()
                if not line:
                    continue
                try:
                    record = json.loads(line)
                except json.JSONDecodeError:
                    logger.warning(f"Skipping malformed JSON at line {line_num}")
                    continue
                if not isinstance(record, dict):
                    logger.warning(f"Skipping non-object record at line {line_num}")
                    continue
                record_rows = self.process_record(line_num, record)
                if record_rows:
                    rows.extend(record_rows)
                    lines_processed += 1

        self._save(rows, output_path)
        logger.info(f"Processed {lines_processed} lines, {len(rows)} tokens")
        return lines_processed

    def _save(self, rows: list[dict], output_path: Path) -> None:
        """Write rows to CSV."""
        output_path.parent.mkdir(parents=True, exist_ok=True)
        df = pd.DataFrame(rows, columns=COLUMNS)
        for col in df.select_dtypes(include=["object"]).columns:
            df[col] = df[col].apply(
                lambda x: sanitize_text(x) if isinstance(x, str) else x
            )
        df.to_csv(output_path, index=False, encoding=self.config.output.encoding)
        logger.info(f"Tokens saved in: {output_path}")

    def run(self) -> int:
        """Run the decompounding pipeline.

        Returns:
            Number of lines processed
        """
        if not self.config.input_file:
            raise ValueError("Input file not specified in configuration")

        if not self.config.input_file.exists():
            raise FileNotFoundError(f"Input file not found: {self.config.input_file}")

        return self.process_file(self.config.input_file, self.config.output.output_path)
