from __future__ import annotations

import io
import logging
from dataclasses import dataclass
from typing import Optional

import pandas as pd

from ..common.time_interval import elapsed, format_duration
from ..core.constants import INVALID_INTERVAL, NOT_AVAILABLE, REPORT_FILENAME, REPORT_SHEET_NAME, XLSX_MIMETYPE
from ..core.enums import DurationStyle
from ..core.exceptions import NegativeIntervalError, TimeParseError
from ..sessions.model import Session
from ..sessions.repository import SessionRepository

logger = logging.getLogger(__name__)

REPORT_COLUMNS = [
    "Sessão",
    "Aula",
    "E-mail",
    "Disciplina",
    "Dia da semana",
    "Data",
    "Inicio",
    "Fim",
    "Status",
    "Duração (horas)",
]


@dataclass(frozen=True)
class ReportFile:
    content: bytes
    filename: str = REPORT_FILENAME
    mimetype: str = XLSX_MIMETYPE


class SessionReportService:
    """Exports every stored session as a single-sheet xlsx workbook.

    The duration column is recomputed from the start/end strings instead of
    read from the stored ``duration`` field.
    """

    def __init__(self, sessions: SessionRepository, *, style: DurationStyle = DurationStyle.VERBOSE):
        self._sessions = sessions
        self._style = DurationStyle(style)

    def _duration_cell(self, start: Optional[str], end: Optional[str]) -> str:
        start = start.strip() if start else ""
        end = end.strip() if end else ""
        if not start or not end:
            return NOT_AVAILABLE

        try:
            return format_duration(elapsed(start, end), self._style)
        except NegativeIntervalError:
            return INVALID_INTERVAL
        except TimeParseError:
            logger.warning("Malformed time in session row (%r, %r)", start, end)
            return NOT_AVAILABLE

    def _to_row(self, s: Session) -> list:
        return [
            s.session_key,
            s.activity_id,
            s.owner_email,
            s.subject_name,
            s.weekday,
            s.calendar_date,
            s.start_time or NOT_AVAILABLE,
            s.end_time or NOT_AVAILABLE,
            s.display_status,
            self._duration_cell(s.start_time, s.end_time),
        ]

    def rows(self) -> list[list]:
        return [self._to_row(s) for s in self._sessions.find_all()]

    def build_report(self) -> ReportFile:
        rows = self.rows()
        df = pd.DataFrame(rows, columns=REPORT_COLUMNS)

        # Written in memory, never to disk.
        output = io.BytesIO()
        with pd.ExcelWriter(output, engine="openpyxl") as writer:
            df.to_excel(writer, index=False, sheet_name=REPORT_SHEET_NAME)

        logger.info("Report built with %d sessions", len(rows))
        return ReportFile(content=output.getvalue())
