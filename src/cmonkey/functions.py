from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List

import numpy as np
import pandas as pd

from cmonkey.hits import MastHit, SiteMeme
from cmonkey.motif import Motif


def pssm_matrix(motif: Motif) -> np.ndarray:
    """Return the PSSM of a motif as a (positions, letters) float64 array."""
    rows = motif.pssm_rows
    if not rows:
        return np.zeros((0, 0), dtype=np.float64)

    widths = sorted({len(row) for row in rows})
    if len(widths) != 1:
        raise ValueError(f"Motif {motif.id!r} has ragged PSSM rows with widths {widths}")

    return np.array(rows, dtype=np.float64)


def matrix_to_rows(matrix: Any) -> List[List[float]]:
    """Convert a 2D array-like into PSSM rows of plain floats."""
    array = np.asarray(matrix, dtype=np.float64)
    if array.ndim != 2:
        raise ValueError(f"PSSM must be two-dimensional, got {array.ndim} dimensions")
    return array.tolist()


def records_frame(records: Iterable[Any] | None, record_cls: type) -> pd.DataFrame:
    """Tabulate records with one column per declared JSON key.

    Elements may be record instances or plain dicts; ``None`` elements are
    skipped and bag entries are left out.
    """
    columns = list(record_cls.JSON_PROPERTY_ORDER)

    rows = []
    for record in records or []:
        if record is None:
            continue
        if isinstance(record, dict):
            rows.append({key: record.get(key) for key in columns})
        else:
            rows.append({key: getattr(record, key) for key in columns})

    if not rows:
        return pd.DataFrame(columns=columns)
    return pd.DataFrame(rows, columns=columns)


def hits_frame(motif: Motif) -> pd.DataFrame:
    """Return the MAST hits of a motif as a DataFrame."""
    return records_frame(motif.hits, MastHit)


def sites_frame(motif: Motif) -> pd.DataFrame:
    """Return the training sites of a motif as a DataFrame."""
    return records_frame(motif.sites, SiteMeme)


def collect_hits(motifs: Iterable[Motif]) -> pd.DataFrame:
    """Concatenate the hits of several motifs, prefixed by a ``motif_id`` column."""
    frames = []
    for motif in motifs:
        frame = hits_frame(motif)
        if frame.empty:
            continue
        frame.insert(0, "motif_id", motif.id)
        frames.append(frame)

    if not frames:
        return pd.DataFrame(columns=["motif_id", *MastHit.JSON_PROPERTY_ORDER])

    logger = logging.getLogger(__name__)
    logger.debug(f"Collected hits from {len(frames)} motifs")
    return pd.concat(frames, ignore_index=True)


def summarize(motif: Motif) -> Dict[str, Any]:
    """Short description of a motif suitable for logging or JSON output."""
    return {
        "id": motif.id,
        "seq_type": motif.seq_type,
        "pssm_id": motif.pssm_id,
        "evalue": motif.evalue,
        "length": len(motif.pssm_rows or []),
        "hits": len(motif.hits or []),
        "sites": len(motif.sites or []),
    }
