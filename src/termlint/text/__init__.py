"""Text extraction for termlint.

Exports ``TextIndex`` and the ``TextInstance`` records it produces.
"""
from __future__ import annotations

from termlint.text.index import LocationKind, TextIndex, TextInstance

__all__ = ["LocationKind", "TextIndex", "TextInstance"]
