"""Ledger defaults read from the environment.

Values are read at import time; restart the process to pick up changes.
"""

import os

# Reserved null identity; it can never become the authority.
BURN_IDENTITY = os.getenv("LEDGER_BURN_IDENTITY", "SP000000000000000000002Q6VF78")

# Cooldown period (logical-time units) until an authority changes it.
DEFAULT_COOLDOWN_PERIOD = int(os.getenv("LEDGER_DEFAULT_COOLDOWN_PERIOD", "144"))
