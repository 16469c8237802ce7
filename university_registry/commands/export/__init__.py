# Export commands module

from .roster import build_roster_workbook, export_roster

__all__ = [
    "build_roster_workbook",
    "export_roster",
]
