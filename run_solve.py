#!/usr/bin/env python
import argparse
import logging
import sys
import numpy as np
from utils.logging_config import setup_logging, get_logger
from inout.yaml_matrix import load_matrix_config
from core.cached_matrix import CachedMatrix
from core.solve import cache_solve
from core.exceptions import CacheMatrixError

logger = get_logger(__name__)

def _show(label: str, value) -> None:
    print(f"{label}:")
    print(value if value is not None else "  (none)")

def main(argv=None) -> int:
    """
    Walk a matrix file through the cached-inverse lifecycle.

    Command-line arguments:
      --matrix: Path to the YAML matrix file.
      --repeat: Number of solves on each matrix (default 2).
      --dump: Optional path to dump the final matrix and inverse (e.g., inverse.npz).
      --verbose: Enable DEBUG logging.
      --log-file: Optional path that receives a copy of the log.
    """
    parser = argparse.ArgumentParser(description="Compute and cache a matrix inverse.")
    parser.add_argument("--matrix", required=True, help="Path to the YAML matrix file.")
    parser.add_argument("--repeat", type=int, default=2, help="Solves per matrix (default 2).")
    parser.add_argument("--dump", help="Path to dump matrix and inverse (e.g., inverse.npz)", default=None)
    parser.add_argument("--verbose", action="store_true", help="Enable DEBUG logging.")
    parser.add_argument("--log-file", help="Also write log records to this file.", default=None)
    args = parser.parse_args(argv)

    if args.verbose:
        setup_logging(level=logging.DEBUG, log_file=args.log_file)
        logger.debug("Verbose logging enabled.")
    else:
        setup_logging(level=logging.INFO, log_file=args.log_file)

    if args.repeat < 1:
        logger.error("--repeat must be at least 1, got %d", args.repeat)
        return 1

    try:
        config = load_matrix_config(args.matrix)
    except CacheMatrixError as e:
        logger.error("Could not load matrix file: %s", e)
        return 1

    cached = CachedMatrix(config["matrix"])
    try:
        for step, new_matrix in enumerate([None] + config["replacements"]):
            if new_matrix is not None:
                cached.set_matrix(new_matrix)
                logger.info("Matrix replaced (step %d); cached inverse cleared.", step)
            _show("Matrix", cached.get_matrix())
            _show("Cached inverse", cached.get_cached_inverse())
            for _ in range(args.repeat):
                hit = cached.has_cached_inverse()
                inverse = cache_solve(cached)
                _show("Inverse (cached)" if hit else "Inverse (computed)", inverse)
    except CacheMatrixError as e:
        logger.error("Inversion failed: %s", e)
        return 1

    logger.info("Solve completed.")

    if args.dump:
        np.savez(args.dump, matrix=cached.get_matrix(), inverse=cached.get_cached_inverse())
        print(f"Matrix and inverse dumped to {args.dump}")
    return 0

if __name__ == "__main__":
    sys.exit(main())
