from __future__ import annotations
import csv, io, json, os
from pathlib import Path
from typing import Iterable

from j2kcodec.progression import ProgressionData
from j2kcodec.progression.data import FIELDS

def atomic_write(path: Path | str, data: bytes) -> None:
    path = Path(path)
    tmp = path.with_suffix(path.suffix + ".tmp")
    tmp.parent.mkdir(parents=True, exist_ok=True)
    with open(tmp, "wb") as f:
        f.write(data)
        f.flush()
        os.fsync(f.fileno())
    os.replace(tmp, path)

def packet_rows(packets: Iterable[ProgressionData], fmt: str = "csv") -> str:
    """Sérialise une séquence de paquets en CSV (avec en-tête) ou JSON-lines."""
    if fmt == "csv":
        buf = io.StringIO()
        w = csv.writer(buf, lineterminator="\n")
        w.writerow(FIELDS)
        for p in packets:
            w.writerow(p.as_tuple())
        return buf.getvalue()
    if fmt == "jsonl":
        return "".join(json.dumps(p.to_dict(), separators=(",", ":")) + "\n" for p in packets)
    raise ValueError(f"unknown output format: {fmt}")
