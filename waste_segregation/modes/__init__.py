"""
Mode drivers - each reads item strings, classifies them, and writes a report.

Modules
-------
interactive : InteractiveSession state machine (READING / SAVING / EXITING).
bulk        : run_bulk() - one item per line from a text file.
sample      : run_sample() - fixed ten-item demonstration set.
"""
