from .aggregator import assemble_report, build_report
from .reporter import load_report, print_summary, render_summary, report_filename, write_report

__all__ = [
    "assemble_report",
    "build_report",
    "load_report",
    "print_summary",
    "render_summary",
    "report_filename",
    "write_report",
]
