"""Duration rendering for the live clock, the save dialog and summaries.

The live clock and the minute summary are two separate conventions on purpose;
views expect exactly these strings.
"""

import math


def format_live_clock(seconds):
    """Seconds as ``H:MM:SS`` once an hour has passed, ``MM:SS`` before that. Negative values clamp to zero."""
    seconds = max(0, int(seconds))
    h, rem = divmod(seconds, 3600)
    m, s = divmod(rem, 60)
    if h > 0:
        return f"{h}:{m:02d}:{s:02d}"
    return f"{m:02d}:{s:02d}"


def format_summary(minutes):
    """Whole minutes as ``Xh Ym``, ``Xh`` or ``Ym``."""
    minutes = max(0, int(minutes))
    h, m = divmod(minutes, 60)
    if h > 0 and m > 0:
        return f"{h}h {m}m"
    if h > 0:
        return f"{h}h"
    return f"{m}m"


def format_session_duration(seconds):
    """Headline for a just-finished session; falls back to ``Ns`` when under a minute."""
    seconds = max(0, int(seconds))
    h = seconds // 3600
    m = (seconds % 3600) // 60
    if h > 0 and m > 0:
        return f"{h}h {m}m"
    if h > 0:
        return f"{h}h"
    if m > 0:
        return f"{m}m"
    return f"{seconds}s"


# Rounds half up (not banker's rounding), and never reports less than a minute.
def to_save_minutes(seconds):
    return max(1, math.floor(seconds / 60 + 0.5))


def focus_label(level):
    if level >= 9:
        return "Flow state!"
    if level >= 7:
        return "Very focused"
    if level >= 5:
        return "Good focus"
    if level >= 3:
        return "Some distractions"
    return "Distracted"
