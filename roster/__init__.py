"""roster — console student roster manager.

Keeps students grouped by class name in memory for the life of the process
and drives them from a text menu (add, remove, view, view details, exit).

Usage:
    python -m roster                        # Interactive menu
    python -m roster menu --log-level debug # Same, with store debug logging
"""
