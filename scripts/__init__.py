"""Maintenance scripts (run as ``python scripts/<name>.py``)."""
