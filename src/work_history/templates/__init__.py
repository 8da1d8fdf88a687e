"""Report rendering for work history entries."""

from work_history.templates.renderer import REPORT_TEMPLATE, render_report, save_report

__all__ = ["REPORT_TEMPLATE", "render_report", "save_report"]
