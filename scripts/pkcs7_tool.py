#!/usr/bin/env python3
"""Run the pkcs7 command line tool from a source checkout.

Usage
-----
    python scripts/pkcs7_tool.py pad --block-size 8 --hex deadbeef
    python scripts/pkcs7_tool.py unpad --strict --input padded.bin --output plain.bin
"""

from __future__ import annotations

import sys
from pathlib import Path

_repo = Path(__file__).resolve().parent.parent
_src = _repo / "src"
if _src.is_dir():
    sys.path.insert(0, str(_src))

from pypkcs7.cli import main  # noqa: E402

if __name__ == "__main__":
    sys.exit(main())
