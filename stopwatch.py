# stopwatch.py

import time

class Stopwatch:
    def __init__(self):
        self.started_at = None
        self.total_seconds = 0.0

    def start(self):
        """Starts (or resumes) timing."""
        if self.started_at is None:
            self.started_at = time.perf_counter()
        return self

    def stop(self):
        """Stops timing and folds the running interval into the total."""
        if self.started_at is not None:
            self.total_seconds += time.perf_counter() - self.started_at
            self.started_at = None
        return self.total_seconds

    def reset(self):
        self.started_at = None
        self.total_seconds = 0.0

    def is_running(self):
        return self.started_at is not None

    def elapsed(self):
        """Returns total seconds timed so far, including a running interval."""
        if self.started_at is None:
            return self.total_seconds
        return self.total_seconds + (time.perf_counter() - self.started_at)

    def get_display_string(self):
        elapsed = self.elapsed()
        minutes = int(elapsed // 60)
        seconds = elapsed % 60
        return f"{minutes:02d}:{seconds:06.3f}"

    def __enter__(self):
        return self.start()

    def __exit__(self, exc_type, exc, tb):
        self.stop()
        return False
