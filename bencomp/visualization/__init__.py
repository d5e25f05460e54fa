from bencomp.visualization.report import ResultReport, format_bytes, format_duration, format_ratio

__all__ = ["ResultReport", "format_bytes", "format_duration", "format_ratio"]
