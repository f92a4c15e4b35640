from enum import IntEnum

# Note: this file cannot be named "signal.py" because it will result in a namespace conflict with an imported library


class Signal(IntEnum):
    NODE_UPSERTED_IN_CACHE = 16
    """Sent after mkdir() or write() adds a node to the cache"""
    NODE_REMOVED_IN_CACHE = 17
    """Sent after remove() purges a subtree from the cache"""

    LOAD_SUBTREE_STARTED = 40
    """Fired by the scanner when it has begun to load a subtree from storage"""
    LOAD_SUBTREE_DONE = 41
    """Fired by the scanner when it has finished loading a subtree from storage"""

    # --- Progress ---
    PROGRESS_MADE = 103
    """One more storage entry has been scanned"""
