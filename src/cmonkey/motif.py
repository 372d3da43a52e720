"""
Motif Record
============

Motif generated by cMonkey together with its MAST hits in upstream sequences
and the MEME training sites it was built from.

On the wire a motif is a JSON object::

    {"id": "M1", "seq_type": "upstream", "pssm_id": 7, "evalue": 0.001,
     "pssm_rows": [[0.1, 0.2, 0.3, 0.4], ...], "hits": [...], "sites": [...]}

Every key is optional. Absent values are omitted when encoding and any key
outside this set is kept as an additional property.
"""

from __future__ import annotations

from typing import ClassVar, List, Optional, Tuple

from pydantic import Field, StrictInt, StrictStr

from cmonkey.hits import MastHit, SiteMeme
from cmonkey.records import JsonRecord, WireFloat, json_record


@json_record
class Motif(JsonRecord):
    """cMonkey motif record.

    Elements of ``hits`` and ``sites`` may be ``null`` on the wire; they are
    kept as ``None`` and encoded back as ``null``.
    """

    JSON_PROPERTY_ORDER: ClassVar[Tuple[str, ...]] = (
        "id",
        "seq_type",
        "pssm_id",
        "evalue",
        "pssm_rows",
        "hits",
        "sites",
    )

    id: Optional[StrictStr] = Field(None, description="Motif identifier")
    seq_type: Optional[StrictStr] = Field(None, description="Type of sequence, e.g. 'upstream'")
    pssm_id: Optional[StrictInt] = Field(None, description="Number of the motif")
    evalue: Optional[WireFloat] = Field(None, description="Motif e-value")
    pssm_rows: Optional[List[List[WireFloat]]] = Field(None, description="PSSM, one row per motif position")
    hits: Optional[List[Optional[MastHit]]] = Field(None, description="Hits (motif annotations)")
    sites: Optional[List[Optional[SiteMeme]]] = Field(None, description="Training set")
