from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Optional, Tuple

from cmonkey.functions import pssm_matrix
from cmonkey.motif import Motif

_ALPHABETS = {"ACGT": 4, "ACDEFGHIKLMNPQRSTVWY": 20}


@dataclass
class MemeOptions:
    """Header settings for MEME output."""

    alphabet: str = "ACGT"
    strands: str = "+ -"
    background: Tuple[float, ...] = field(default_factory=lambda: (0.25, 0.25, 0.25, 0.25))


def create_meme_options(
    alphabet: str = "ACGT",
    strands: str = "+ -",
    background: Optional[Iterable[float]] = None,
) -> MemeOptions:
    """Build MEME output options, uniform background by default."""
    if alphabet not in _ALPHABETS:
        raise ValueError(f"Unsupported alphabet '{alphabet}'. Available: {list(_ALPHABETS)}")

    size = _ALPHABETS[alphabet]
    resolved = tuple(float(x) for x in background) if background is not None else (1.0 / size,) * size
    if len(resolved) != size:
        raise ValueError(f"Background has {len(resolved)} frequencies, alphabet '{alphabet}' needs {size}")

    return MemeOptions(alphabet=alphabet, strands=strands, background=resolved)


def _load_json(path: str | Path):
    if not os.path.isfile(path):
        raise FileNotFoundError(f"File {path} not found")
    with open(path, "r") as handle:
        return json.load(handle)


def read_motifs(path: str | Path) -> List[Motif]:
    """Read motifs from a JSON file holding an array of motifs or a single motif."""
    payload = _load_json(path)

    if isinstance(payload, dict):
        items = [payload]
    elif isinstance(payload, list):
        items = payload
    else:
        raise ValueError(f"Expected a JSON object or array in {path}, got {type(payload).__name__}")

    motifs = [Motif.from_dict(item) for item in items]
    logger = logging.getLogger(__name__)
    logger.debug(f"Read {len(motifs)} motifs from {path}")
    return motifs


def read_motif(path: str | Path, index: int = 0) -> Motif:
    """Read a specific motif from a JSON motif file."""
    motifs = read_motifs(path)
    if not motifs:
        raise ValueError(f"No motifs found in {path}")
    if not -len(motifs) <= index < len(motifs):
        raise IndexError(f"Motif index {index} out of range. File contains {len(motifs)} motifs.")
    return motifs[index]


def _prepare(path: str | Path) -> None:
    os.makedirs(os.path.dirname(os.path.abspath(path)), exist_ok=True)


def write_motif(motif: Motif, path: str | Path, indent: Optional[int] = 2) -> None:
    """Write a single motif as a JSON object."""
    _prepare(path)
    with open(path, "w") as out:
        json.dump(motif.to_dict(), out, indent=indent)
        out.write("\n")


def write_motifs(motifs: Iterable[Motif], path: str | Path, indent: Optional[int] = 2) -> None:
    """Write motifs as a JSON array."""
    payload = [motif.to_dict() for motif in motifs]
    _prepare(path)
    with open(path, "w") as out:
        json.dump(payload, out, indent=indent)
        out.write("\n")
    logger = logging.getLogger(__name__)
    logger.info(f"Wrote {len(payload)} motifs to {path}")


def _motif_name(motif: Motif, position: int) -> str:
    if motif.id:
        return motif.id
    if motif.pssm_id is not None:
        return f"motif_{motif.pssm_id}"
    return f"motif_{position}"


def write_meme(motifs: Iterable[Motif], path: str | Path, options: Optional[MemeOptions] = None) -> int:
    """Write the PSSMs of motifs to a MEME formatted file.

    Motifs without a PSSM are skipped. Returns the number of motifs written.
    """
    options = options or create_meme_options()
    width = len(options.alphabet)
    logger = logging.getLogger(__name__)

    blocks = []
    for position, motif in enumerate(motifs):
        matrix = pssm_matrix(motif)
        name = _motif_name(motif, position)
        if matrix.size == 0:
            logger.warning(f"Motif {name} has no PSSM, skipped")
            continue
        if matrix.shape[1] != width:
            raise ValueError(f"Motif {name} has {matrix.shape[1]} columns, alphabet '{options.alphabet}' needs {width}")

        header = f"letter-probability matrix: alength= {width} w= {matrix.shape[0]}"
        if motif.sites is not None:
            header += f" nsites= {len(motif.sites)}"
        if motif.evalue is not None:
            header += f" E= {motif.evalue:.1e}"

        lines = [f"MOTIF {name}", header]
        for row in matrix:
            lines.append(" " + " ".join(f"{val:.6f}" for val in row))
        blocks.append("\n".join(lines) + "\n")

    _prepare(path)
    with open(path, "w") as out:
        out.write("MEME version 4\n\n")
        out.write(f"ALPHABET= {options.alphabet}\n\n")
        out.write(f"strands: {options.strands}\n\n")
        out.write("Background letter frequencies\n")
        out.write(" ".join(f"{letter} {freq:g}" for letter, freq in zip(options.alphabet, options.background)) + "\n\n")
        for block in blocks:
            out.write(block)
            out.write("\n")

    logger.info(f"Wrote {len(blocks)} motifs to {path}")
    return len(blocks)
