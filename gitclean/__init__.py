"""
GitClean

Clean, conventional git commits built through guided prompts with live
spell checking.
"""

__version__ = "1.0.5"

# Centralized commit types - single source of truth
# Used by: commit/builder.py (choices, preview), commit/format.py (colors)
COMMIT_TYPES = {
    'ADD': {'color': 'green', 'emoji': '➕', 'description': 'Add new code or files'},
    'FIX': {'color': 'red', 'emoji': '🐛', 'description': 'A bug fix'},
    'UPDATE': {'color': 'yellow', 'emoji': '🔄', 'description': 'Updated a file or code'},
    'DOCS': {'color': 'blue', 'emoji': '📚', 'description': 'Documentation only changes'},
    'TEST': {'color': 'cyan', 'emoji': '✅', 'description': 'Adding missing tests or correcting existing tests'},
    'REMOVE': {'color': 'bright_red', 'emoji': '🗑️', 'description': 'Removing code or files'},
}

COMMIT_TYPE_NAMES = list(COMMIT_TYPES.keys())
