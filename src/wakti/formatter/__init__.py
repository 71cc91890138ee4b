"""Table rendering for search results."""

from wakti.formatter.table_formatter import render_results_table

__all__ = ["render_results_table"]
