"""
waste_segregation.reporting - CSV report I/O and terminal formatting.

Modules:
  csv_report - ``write_report()`` / ``read_report()`` for ``item,category`` CSVs.
  formatters - Plain-text lines and summary tables for ``typer.echo()``.
"""
