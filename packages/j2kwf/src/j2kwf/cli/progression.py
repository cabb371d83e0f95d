from __future__ import annotations
import argparse, logging, sys
from pathlib import Path

from .common import setup_logging, env_default, load_precinct_table
from ..api import atomic_write, packet_rows
from j2kcodec.config import ProgressionConfig
from j2kcodec.errors import UnknownProgressionOrderError, UnsupportedProgressionOrderError
from j2kcodec.precincts import constant_precincts
from j2kcodec.progression import drain, make_progression_iterator, parse_progression_order

ORDER_ENV = "J2K_PROGRESSION_ORDER"

def parse_args(argv=None):
    p = argparse.ArgumentParser(description="J2K — séquence des paquets d'une tuile (LRCP/RLCP)")
    p.add_argument("--order", default=env_default(ORDER_ENV, "LRCP"),
                   help=f"Ordre de progression (LRCP|RLCP, défaut: ${ORDER_ENV} ou LRCP)")
    p.add_argument("--layers", type=int, required=True, help="Nombre de couches (L)")
    p.add_argument("--levels", type=int, required=True, help="Nmax : niveaux de décomposition max de la tuile")
    p.add_argument("--components", type=int, required=True, help="Nombre de composantes (Csiz)")
    src = p.add_mutually_exclusive_group(required=True)
    src.add_argument("--precincts", type=int, help="Nombre constant de précincts par (r, c)")
    src.add_argument("--precinct-table", default=None, help="JSON [r][c] -> nombre de précincts")
    p.add_argument("--out", default=None, help="Fichier de sortie (défaut: stdout)")
    p.add_argument("--format", choices=("csv", "jsonl"), default="csv")
    p.add_argument("--log-file", default=None)
    p.add_argument("--verbose", action="store_true")
    return p.parse_args(argv)

def main(argv=None) -> int:
    args = parse_args(argv)
    setup_logging(Path(args.log_file) if args.log_file else None, verbose=args.verbose)

    try:
        cfg = ProgressionConfig(layer_count=args.layers,
                                max_decomposition_levels=args.levels,
                                component_count=args.components)
        if args.precinct_table:
            precinct_count = load_precinct_table(Path(args.precinct_table))
        else:
            precinct_count = constant_precincts(args.precincts)
        order = parse_progression_order(args.order)
        it = make_progression_iterator(order, cfg, precinct_count)
    except UnsupportedProgressionOrderError as e:
        logging.error("Ordre non supporté: %s", e)
        return 2
    except UnknownProgressionOrderError as e:
        logging.error("Ordre inconnu: %s", e)
        return 2
    except (ValueError, OSError) as e:
        logging.error("Paramètres invalides: %s", e)
        return 2

    packets = drain(it)
    text = packet_rows(packets, fmt=args.format)
    if args.out:
        out = Path(args.out)
        atomic_write(out, text.encode("utf-8"))
        logging.info("→ écrit %s", out)
    else:
        sys.stdout.write(text)
    logging.info("%s: %d paquets (L=%d, Nmax=%d, C=%d)", order.name, len(packets),
                 cfg.layer_count, cfg.max_decomposition_levels, cfg.component_count)
    return 0

if __name__ == "__main__":
    sys.exit(main())
