#!/usr/bin/env python3
"""
Switch the live `.env` in the current directory to another profile.

Usage:
    python scripts/switch_env.py dev
    python scripts/switch_env.py prod --force

The previously active profile is saved back to `.env.<env>` before the new
one is copied into `.env`. Profiles that do not exist yet are seeded from
`.env.example`.
"""

from __future__ import annotations

import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.append(str(REPO_ROOT))

from envswitch.cli import main  # noqa: E402


if __name__ == "__main__":
    sys.exit(main())
