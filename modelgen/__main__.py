"""Entry point: python -m modelgen

Reads table metadata from MySQL, generates one Go model per table.
"""

from __future__ import annotations

from .cli import main

if __name__ == "__main__":
    main()
