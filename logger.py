# logger.py

import constants as C

# This will hold a reference to a running Stopwatch, if one has been attached.
_stopwatch = None
_enabled = C.LOG_ENABLED

def set_stopwatch(stopwatch):
    """Sets the stopwatch the logger uses to timestamp messages."""
    global _stopwatch
    _stopwatch = stopwatch

def set_enabled(enabled):
    """Turns log output on or off."""
    global _enabled
    _enabled = bool(enabled)

def is_enabled():
    return _enabled

def log(message):
    """Prints a message with an elapsed-time stamp if a stopwatch is attached."""
    if not _enabled:
        return
    if _stopwatch is not None and _stopwatch.is_running():
        # Elapsed wall time since the stopwatch was started.
        print(f"{C.LOG_PREFIX} [{_stopwatch.get_display_string()}] {message}")
    else:
        # For messages logged outside a timed section.
        print(f"{C.LOG_PREFIX} {message}")
