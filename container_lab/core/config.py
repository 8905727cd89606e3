# container_lab/core/config.py
from __future__ import annotations

import os

# ---- Tunables (overridable via environment variables) -----------------------
CHECK_INVARIANTS = os.getenv("CONTAINER_LAB_CHECK_INVARIANTS", "0").lower() in ("1", "true", "yes", "on")
LOG_LEVEL        = os.getenv("CONTAINER_LAB_LOG_LEVEL", "WARNING").upper()
DEMO_SIZE        = int(os.getenv("CONTAINER_LAB_DEMO_SIZE", "1000"))   # keys in the balance walkthrough
DEMO_SEED        = int(os.getenv("CONTAINER_LAB_DEMO_SEED", "7"))
