"""build_site.py – renders data/cards.json into site/.

Thin wrapper around ``onchain_banks.cli`` so the build can run from a
checkout without installing the package.
"""

import sys
from pathlib import Path

SRC_DIR = Path(__file__).resolve().parents[1] / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from onchain_banks.cli import main  # noqa: E402

if __name__ == "__main__":
    sys.exit(main())
