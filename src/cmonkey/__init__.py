"""
cmonkey
==================

Record types for motifs produced by the cMonkey biclustering pipeline,
with JSON serialization and a few conveniences around them.

The top level modules expose the following key components:

``motif``
    :class:`Motif`, a motif with its PSSM, MAST hits and MEME training
    sites.

``hits``
    :class:`MastHit` and :class:`SiteMeme`, the element types of a motif's
    hit and site lists.

``records``
    Shared record machinery: JSON-bound fields, generated
    ``get_``/``set_``/``with_`` accessors, the additional-properties bag
    and the debug string.

``functions``
    numpy and pandas views of motif records.

``io``
    Reading and writing motif JSON files and exporting PSSMs in MEME format.

``cli``
    Command line interface (``cmonkey-motif``).
"""

from cmonkey.hits import MastHit, SiteMeme
from cmonkey.motif import Motif

__all__ = ["MastHit", "Motif", "SiteMeme"]
