"""Constants and defaults.

Note: Keep constants here to avoid magic strings spread across code.
"""

from .enums import SessionStatus

DATE_FORMAT = "%d/%m/%Y"
DATE_PATTERN = r"^[0-9]{2}/[0-9]{2}/[0-9]{4}$"

REPORT_FILENAME = "relatorio_logs.xlsx"
REPORT_SHEET_NAME = "Logs"
XLSX_MIMETYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"

NOT_AVAILABLE = "N/A"
INVALID_INTERVAL = "Horário inválido"

DEFAULT_STATUS_LABELS = {
    SessionStatus.OPEN: "Em Andamento",
    SessionStatus.CLOSED: "Concluído",
}
