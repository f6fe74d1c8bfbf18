"""Parsing of bulk roster uploads (tab-separated text, CSV or Excel)."""
from __future__ import annotations

import io
from dataclasses import dataclass
from pathlib import PurePath
from typing import IO, Optional

import pandas as pd

from ..core.exceptions import ValidationError

_COLUMNS = ["school_id", "name", "program"]


@dataclass(frozen=True)
class RosterRow:
    line_no: int
    school_id: str
    name: str
    program: str


def _read_frame(stream: IO, filename: str) -> pd.DataFrame:
    suffix = PurePath(filename or "").suffix.lower()
    if suffix in {".xlsx", ".xls"}:
        return pd.read_excel(stream, header=None, dtype=str)
    if suffix == ".csv":
        return pd.read_csv(stream, header=None, dtype=str, skip_blank_lines=False)
    return pd.read_csv(stream, sep="\t", header=None, dtype=str, skip_blank_lines=False)


def _looks_like_header(first_cell: Optional[str]) -> bool:
    return bool(first_cell) and "school" in str(first_cell).lower()


def parse_roster(stream: IO, filename: str = "") -> list[RosterRow]:
    try:
        frame = _read_frame(stream, filename)
    except pd.errors.EmptyDataError:
        return []
    except (ValueError, pd.errors.ParserError) as e:
        raise ValidationError(f"Could not read roster file: {e}") from e

    if frame.shape[1] < len(_COLUMNS):
        raise ValidationError("Roster rows need three columns: school ID, name, program")

    frame = frame.iloc[:, : len(_COLUMNS)].copy()
    frame.columns = _COLUMNS
    frame = frame.fillna("")
    for col in _COLUMNS:
        frame[col] = frame[col].astype(str).str.strip()

    rows: list[RosterRow] = []
    # blank lines stay in the frame so the index tracks source line numbers
    for idx, rec in zip(frame.index, frame.to_dict("records")):
        line_no = int(idx) + 1
        if line_no == 1 and _looks_like_header(rec["school_id"]):
            continue
        if not rec["school_id"]:
            continue
        rows.append(RosterRow(line_no=line_no, school_id=rec["school_id"], name=rec["name"], program=rec["program"]))
    return rows


def parse_roster_text(text: str) -> list[RosterRow]:
    if not (text or "").strip():
        return []
    return parse_roster(io.StringIO(text), "pasted.tsv")
