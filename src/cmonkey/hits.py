"""MAST hits and MEME training sites attached to a cMonkey motif."""

from __future__ import annotations

from typing import ClassVar, Optional, Tuple

from pydantic import StrictInt, StrictStr

from cmonkey.records import JsonRecord, WireFloat, json_record


@json_record
class MastHit(JsonRecord):
    """Occurrence of a motif in an upstream sequence reported by MAST.

    Attributes
    ----------
    seq_id : str
        Identifier of the sequence containing the hit
    strand : str
        ``"+"`` or ``"-"``
    pssm_id : int
        Number of the motif that produced the hit
    hit_start, hit_end : int
        Hit coordinates within the sequence
    score : float
        MAST score
    hit_pvalue : float
        P-value of the hit
    """

    JSON_PROPERTY_ORDER: ClassVar[Tuple[str, ...]] = (
        "seq_id",
        "strand",
        "pssm_id",
        "hit_start",
        "hit_end",
        "score",
        "hit_pvalue",
    )

    seq_id: Optional[StrictStr] = None
    strand: Optional[StrictStr] = None
    pssm_id: Optional[StrictInt] = None
    hit_start: Optional[StrictInt] = None
    hit_end: Optional[StrictInt] = None
    score: Optional[WireFloat] = None
    hit_pvalue: Optional[WireFloat] = None


@json_record
class SiteMeme(JsonRecord):
    """Training-set site that MEME used to build a motif."""

    JSON_PROPERTY_ORDER: ClassVar[Tuple[str, ...]] = (
        "source_sequence_id",
        "start",
        "pvalue",
        "left_flank",
        "sequence",
        "right_flank",
    )

    source_sequence_id: Optional[StrictStr] = None
    start: Optional[StrictInt] = None
    pvalue: Optional[WireFloat] = None
    left_flank: Optional[StrictStr] = None
    sequence: Optional[StrictStr] = None
    right_flank: Optional[StrictStr] = None
