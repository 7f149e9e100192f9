"""ETERNUS DX Advanced Copy session check.

Runs ``show advanced-copy-sessions`` on the array's management shell and turns
the session table into a monitoring severity plus a per-session report.
"""

__version__ = "0.4.0"
