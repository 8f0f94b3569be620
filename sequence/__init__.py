"""
sequence/
---------
Data layer.  Public API:

    from sequence import SequenceStore, random_array, parse_array_text
    from sequence import InvalidConfiguration, NoSnapshotError
"""

from sequence.store     import SequenceStore, InvalidConfiguration, NoSnapshotError
from sequence.generator import random_array, parse_array_text

__all__ = [
    "SequenceStore",
    "InvalidConfiguration",
    "NoSnapshotError",
    "random_array",
    "parse_array_text",
]
