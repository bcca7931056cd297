"""Centralised tunables and magic numbers.

All numeric constants that control runtime behaviour are collected here
so they are easy to find, document, and adjust.  SettingsManager falls
back to these when settings.ini does not override them.
"""

# ---------------------------------------------------------------------------
# Parser  (clicker/core/parser.py)
# ---------------------------------------------------------------------------
COMMENT_PREFIX = "#"

# ---------------------------------------------------------------------------
# Killswitch  (clicker/core/killswitch.py)
# ---------------------------------------------------------------------------
KILLSWITCH_TOLERANCE_PX = 2    # pointer drift beyond this on either axis → halt

# ---------------------------------------------------------------------------
# Interpreter  (clicker/core/interpreter.py)
# ---------------------------------------------------------------------------
SETTLE_INTERVAL_MS = 5     # delay between pointer polls after MOVE
SETTLE_ATTEMPTS    = 50    # polls before a MOVE gives up settling
SETTLE_TOLERANCE_PX = 2    # pointer within this of the target → settled

# ---------------------------------------------------------------------------
# Tracker / player  (clicker/core/tracker.py, clicker/core/player.py)
# ---------------------------------------------------------------------------
TRACKER_INTERVAL_MS = 10   # pointer sampling cadence for display
STATUS_POLL_MS      = 100  # is_running poll cadence for the status light
