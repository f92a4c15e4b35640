import time


class Stopwatch:
    """Measures elapsed wall time. Meant to be interpolated into log messages, e.g. f'{sw} Scan done'"""
    def __init__(self):
        self.start_time = time.perf_counter()

    def elapsed_sec(self) -> float:
        return time.perf_counter() - self.start_time

    def __repr__(self):
        return f'{self.elapsed_sec():.3f}s'
