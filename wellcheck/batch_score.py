"""
batch_score.py

Score a file of lifestyle records in one go.

USAGE:
    python -m wellcheck.batch_score records.csv -o assessments.json
    python -m wellcheck.batch_score records.json

Input is CSV or a records-oriented JSON list, with the same field names the
API accepts (camelCase or snake_case). Output is a JSON list, one entry per row.
"""

import argparse
import json
import os
import sys

import pandas as pd
from pydantic import ValidationError
from tqdm import tqdm

from wellcheck.assessment.config import RISK_LABELS
from wellcheck.assessment.engine import assess_payload
from wellcheck.assessment.features import InvalidRecordError

TEXT_FIELDS = ("existingConditions", "currentSymptoms", "existing_conditions", "current_symptoms")


def load_records(path: str) -> list:
    ext = os.path.splitext(path)[1].lower()
    if ext == ".csv":
        # Free text stays verbatim ("NA", "5"); only empty cells count as missing
        columns = pd.read_csv(path, nrows=0).columns
        df = pd.read_csv(
            path,
            dtype={c: str for c in columns if c in TEXT_FIELDS},
            keep_default_na=False,
            na_values=[""],
        )
    elif ext == ".json":
        df = pd.read_json(path, orient="records", dtype=False, convert_dates=False)
    else:
        raise ValueError(f"Unsupported input type '{ext}' (expected .csv or .json)")

    # NaN -> None so optional fields read as "not provided"
    df = df.astype(object).where(pd.notna(df), None)
    rows = df.to_dict(orient="records")
    for row in rows:
        for key in TEXT_FIELDS:
            if key in row and row[key] is None:
                row[key] = ""
    return rows

def score_rows(rows) -> tuple:
    results, failed = [], 0
    for i, row in enumerate(tqdm(rows, desc="Scoring records")):
        try:
            assessment = assess_payload(row)
        except (ValidationError, InvalidRecordError) as e:
            print(f"⚠️ Row {i} skipped: {e}", file=sys.stderr)
            results.append({"row": i, "error": str(e)})
            failed += 1
            continue
        results.append({
            "row": i,
            "result": assessment.model_dump(by_alias=True),
            "riskLabel": RISK_LABELS[assessment.risk_level],
        })
    return results, failed

def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Batch wellness risk scoring")
    parser.add_argument("input", help="CSV or JSON file of lifestyle records")
    parser.add_argument("-o", "--output", help="Write results here instead of stdout")
    args = parser.parse_args(argv)

    rows = load_records(args.input)
    if not rows:
        print(f"[{args.input}] nothing to score")
        return 0

    results, failed = score_rows(rows)

    if args.output:
        with open(args.output, "w", encoding="utf-8") as f:
            json.dump(results, f, indent=2, ensure_ascii=False)
        print(f"✅ Scored {len(rows) - failed}/{len(rows)} records -> {args.output}", file=sys.stderr)
    else:
        json.dump(results, sys.stdout, indent=2, ensure_ascii=False)
        sys.stdout.write("\n")
    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main())
