"""File-based debug logging setup, with optional console echo."""

from __future__ import annotations

import logging
import sys
from pathlib import Path


def setup_logging(log_dir: Path, *, verbose: bool = False) -> Path:
    """Configure the ``ots`` logger: DEBUG to a file in *log_dir*, INFO to stderr when verbose."""
    log_dir.mkdir(parents=True, exist_ok=True)
    log_path = log_dir / 'ots_debug.log'
    handler = logging.FileHandler(log_path, encoding='utf-8')
    handler.setFormatter(logging.Formatter('%(asctime)s %(levelname)s %(name)s %(message)s'))
    root = logging.getLogger('ots')
    root.setLevel(logging.DEBUG)
    root.addHandler(handler)

    if verbose:
        console = logging.StreamHandler(sys.stderr)
        console.setLevel(logging.INFO)
        console.setFormatter(logging.Formatter('%(levelname)s %(message)s'))
        root.addHandler(console)

    logging.getLogger('ots.sync').info('Debug logging started → %s', log_path)
    return log_path
