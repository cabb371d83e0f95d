from __future__ import annotations
import json, logging, os, sys
from pathlib import Path
from typing import Optional

from j2kcodec.precincts import PrecinctTable

def setup_logging(log_file: Optional[Path], verbose: bool = True) -> None:
    log_fmt = "[%(asctime)s] %(levelname)s: %(message)s"
    datefmt = "%Y-%m-%d %H:%M:%S"
    level = logging.DEBUG if verbose else logging.INFO
    handlers = [logging.StreamHandler(sys.stderr)]
    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))
    logging.basicConfig(level=level, format=log_fmt, datefmt=datefmt, handlers=handlers, force=True)

def env_default(name: str, fallback: str) -> str:
    v = os.getenv(name)
    return v if v else fallback

def load_precinct_table(p: Path) -> PrecinctTable:
    """Charge une table JSON [[n(r=0,c=0), n(r=0,c=1), ...], ...] indexée [r][c]."""
    with open(p, "r", encoding="utf-8") as f:
        return PrecinctTable(json.load(f))
