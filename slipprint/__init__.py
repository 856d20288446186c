"""SlipPrint - fixed-width order slip printing.

SlipPrint lays out tabular order rows as a plain-text receipt that keeps its
columns aligned when Latin and Devanagari text are mixed, then hands the text
to the host print spooler (CUPS on Linux/macOS, PowerShell on Windows). When
no printer is reachable it falls back to a mock backend so callers always get
a job identifier back.

Usage:
    slipprint printers
    slipprint preview
    slipprint test --method file
    slipprint serve --port 8000
"""

__version__ = "1.0.0"
