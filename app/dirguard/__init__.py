"""dirguard - Directory integrity watcher.

Captures a baseline snapshot of one or more directories and removes
any new top-level entries that appear after the baseline was taken.
"""

__version__ = "0.1.0"
