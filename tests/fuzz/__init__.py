"""Fuzz tests for trcatalog.

Intensive property tests marked with pytest.mark.fuzz; run via: pytest -m fuzz

Python 3.13+.
"""
