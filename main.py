#!/usr/bin/env python3
"""
Pine Engine

Convenience entry point for running the engine from a source checkout.
"""

import sys

from pine_engine.main import main

if __name__ == "__main__":
    sys.exit(main())
