# interview_prep/services/spreadsheet_service.py
import io
import re
from typing import Dict, List, Optional

import pandas as pd

from interview_prep.models.enums import Difficulty
from interview_prep.models.question import ExcelData, Question
from interview_prep.utils.config import settings
from interview_prep.utils.exceptions import (
    EmptyWorkbookError,
    FileTooLargeError,
    InvalidFileTypeError,
    MissingColumnError,
    NoFileError,
    SpreadsheetParseError,
)
from interview_prep.utils.logger import logger

NO_FILE_MESSAGE = "No file uploaded."
INVALID_TYPE_MESSAGE = "Invalid file type. Please upload a .xlsx or .csv file."
TOO_LARGE_MESSAGE = "The uploaded file is too large."
EMPTY_WORKBOOK_MESSAGE = "The uploaded file contains no data."
PARSE_FAILED_MESSAGE = "Failed to parse the file. Please ensure it is a valid file and not corrupted."
MISSING_COMPANY_MESSAGE = "The file name must start with the company name (e.g., Amazon.xlsx)."

QUESTION_HEADER = "question"
EXPECTED_ANSWER_HEADER = "expected answer"
DIFFICULTY_HEADER = "difficulty"

_EXTENSION_RE = re.compile(r"\.(xlsx|csv)$", re.IGNORECASE)


def normalize_header(header) -> str:
    return str(header).strip().lower()


def find_header(columns, wanted: str) -> Optional[str]:
    """Returns the first column whose normalized name equals ``wanted``."""
    for column in columns:
        if normalize_header(column) == wanted:
            return column
    return None


def company_from_filename(filename: str) -> str:
    return _EXTENSION_RE.sub("", filename)


def _cell(value):
    """Maps pandas' missing-value markers and blank strings to None."""
    if value is None:
        return None
    if isinstance(value, str):
        return value if value.strip() else None
    try:
        if pd.isna(value):
            return None
    except (TypeError, ValueError):
        pass
    return value


def _as_text(value) -> Optional[str]:
    # Excel stores every number as a float; 42 must not come back as "42.0".
    if value is None:
        return None
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


class SpreadsheetService:
    def __init__(self, max_size_mb: Optional[int] = None):
        self.max_size_mb = max_size_mb if max_size_mb is not None else settings.max_upload_size_mb

    def parse(self, filename: Optional[str], content: Optional[bytes]) -> ExcelData:
        """Parses an uploaded .xlsx or .csv file into questions grouped by role.

        Each sheet of a workbook becomes a role; a CSV file is a single role named
        after the company. Raises an ``UploadError`` subclass carrying a static,
        user-facing message on any failure.
        """
        if not filename or not content:
            raise NoFileError(NO_FILE_MESSAGE)

        lower_name = filename.lower()
        if not (lower_name.endswith(".xlsx") or lower_name.endswith(".csv")):
            raise InvalidFileTypeError(INVALID_TYPE_MESSAGE, {"filename": filename})

        if len(content) > self.max_size_mb * 1024 * 1024:
            raise FileTooLargeError(TOO_LARGE_MESSAGE, {"filename": filename, "size": len(content)})

        company = company_from_filename(filename).strip()
        if not company:
            raise InvalidFileTypeError(MISSING_COMPANY_MESSAGE, {"filename": filename})
        is_csv = lower_name.endswith(".csv")

        try:
            sheets = self._read_csv(content, company) if is_csv else self._read_workbook(content)
        except Exception as e:
            logger.exception(f"File parsing error for '{filename}': {e}")
            raise SpreadsheetParseError(PARSE_FAILED_MESSAGE, {"filename": filename}) from e

        if not sheets:
            raise EmptyWorkbookError(EMPTY_WORKBOOK_MESSAGE, {"filename": filename})

        roles: Dict[str, List[Question]] = {}
        for sheet_name, frame in sheets.items():
            roles[sheet_name] = self._questions_from_frame(sheet_name, frame)

        total = sum(len(q) for q in roles.values())
        logger.info(f"Parsed '{filename}': company '{company}', {len(roles)} role(s), {total} question(s).")
        return ExcelData(company=company, roles=roles)

    def _read_workbook(self, content: bytes) -> Dict[str, pd.DataFrame]:
        # sheet_name=None returns every sheet, keyed by name, in workbook order.
        # Cells keep their own types; "N/A" and friends stay literal text.
        return pd.read_excel(
            io.BytesIO(content), sheet_name=None, engine="openpyxl", dtype=object, keep_default_na=False
        )

    def _read_csv(self, content: bytes, company: str) -> Dict[str, pd.DataFrame]:
        try:
            frame = pd.read_csv(io.BytesIO(content), dtype=str, keep_default_na=False)
        except pd.errors.EmptyDataError:
            frame = pd.DataFrame()
        return {company: frame}

    def _questions_from_frame(self, sheet_name: str, frame: pd.DataFrame) -> List[Question]:
        if frame.empty:
            # Empty sheets are allowed and simply yield a role with no questions.
            return []

        question_col = find_header(frame.columns, QUESTION_HEADER)
        if question_col is None:
            raise MissingColumnError(
                f'Sheet "{sheet_name}" is missing the "Question" column.',
                {"sheet": sheet_name, "columns": [str(c) for c in frame.columns]},
            )
        answer_col = find_header(frame.columns, EXPECTED_ANSWER_HEADER)
        difficulty_col = find_header(frame.columns, DIFFICULTY_HEADER)

        questions: List[Question] = []
        for index, row in frame.iterrows():
            text = _cell(row[question_col])
            if not isinstance(text, str) or not text.strip():
                logger.debug(f"Skipping row {index} in sheet '{sheet_name}': empty question.")
                continue

            expected = _cell(row[answer_col]) if answer_col is not None else None
            raw_difficulty = _cell(row[difficulty_col]) if difficulty_col is not None else None
            difficulty = Difficulty.parse(raw_difficulty)
            if raw_difficulty is not None and difficulty is None:
                logger.warning(f"Ignoring unknown difficulty {raw_difficulty!r} in sheet '{sheet_name}', row {index}.")

            questions.append(Question(
                question=text,
                expected_answer=_as_text(expected),
                difficulty=difficulty,
            ))
        return questions


spreadsheet_service = SpreadsheetService()
