"""Extraction of translatable messages from source trees.

Submodules:
    callsites - CallSite descriptors and the Python source scanner
    extractor - Extractor (call sites -> deduplicated message set)

Python 3.13+.
"""

from .callsites import CallSite, scan_python_source
from .extractor import Extractor

__all__ = [
    "CallSite",
    "Extractor",
    "scan_python_source",
]
