import threading

from histogram import Histogram
from stats import Stats


class HistogramStore:
    """
    one histogram shared between the flask request threads and the file observer thread
    every access goes through the lock, so no two adds run at the same time
    """

    def __init__(self):
        self._lock = threading.Lock()
        self.reset()

    def reset(self):
        with self._lock:
            self._histogram = Histogram()
            self._chunk_stats = Stats()

    def add(self, text):
        with self._lock:
            self._histogram.add(text)
            self._chunk_stats.add_value(len(text))
            return self._histogram.total_letters

    def merge(self, histogram, chunk_stats):
        # a whole file counted on the side goes in at once
        with self._lock:
            self._histogram.merge(histogram)
            self._chunk_stats.merge(chunk_stats)
            return self._histogram.total_letters

    def total_letters(self):
        with self._lock:
            return self._histogram.total_letters

    def format(self):
        with self._lock:
            return self._histogram.format()

    def stats(self):
        with self._lock:
            result = {
                "total_letters": self._histogram.total_letters,
                "unique_characters": self._histogram.unique_elements(),
            }
            chunk_stats = self._chunk_stats.to_dict()
            result["chunks"] = chunk_stats["count"]
            result["chunk_length"] = {"min": chunk_stats["min"], "avg": chunk_stats["avg"], "max": chunk_stats["max"]}
            return result
