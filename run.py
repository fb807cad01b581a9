#!/usr/bin/env python3
"""Convenience runner for the journey map tool.

Usage:
    python run.py [summary|render|html|export|serve]
"""
import logging
from journey_map.main import main

if __name__ == "__main__":
    if not logging.getLogger().hasHandlers():
        logging.basicConfig(level=logging.INFO, format="[%(asctime)s] %(levelname)s %(name)s: %(message)s")
    raise SystemExit(main())
