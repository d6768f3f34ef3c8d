#!/usr/bin/env python3
"""
(C) 2026 Joseph Tingiris (joseph.tingiris@gmail.com)

Launcher for the `hop-hints` command; see `hop_hints/cli.py` for usage.
"""
from hop_hints.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
