"""Catalog synchronization: configuration, per-file sync and the full pipeline.

Submodules:
    config   - SyncConfig (explicit run configuration)
    syncer   - sync_catalog (carry-forward merge of one catalog file)
    pipeline - run_sync (extract once, sync every target locale)

Python 3.13+.
"""

from .config import SyncConfig, parse_locale_list
from .pipeline import SyncSummary, run_sync
from .syncer import SyncResult, index_messages, merge_messages, sync_catalog

__all__ = [
    "SyncConfig",
    "SyncResult",
    "SyncSummary",
    "index_messages",
    "merge_messages",
    "parse_locale_list",
    "run_sync",
    "sync_catalog",
]
