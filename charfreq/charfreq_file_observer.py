import os

from watchdog.events import FileSystemEventHandler

from charfreq_helper import DEFAULT_CHUNK_SIZE, log, read_chunks
from histogram import Histogram
from stats import Stats

# uploads are written under this suffix and renamed once complete
PART_SUFFIX = ".part"


# Handles the file observer and adds every finished text file to the histogram
class IngestFileHandler(FileSystemEventHandler):
    def __init__(self, store, chunk_size=DEFAULT_CHUNK_SIZE):
        self._files = set()
        self._store = store
        self._chunk_size = chunk_size

    def on_moved(self, event):
        # a finished upload is renamed from name.part to name
        self._register(event.dest_path, event.is_directory)

    def on_closed(self, event):
        # a file copied into the folder by someone else
        self._register(event.src_path, event.is_directory)

    def _register(self, file_path, is_directory):
        file_path = os.fsdecode(file_path)
        if is_directory or file_path.endswith(PART_SUFFIX):
            return
        if file_path in self._files or not os.path.isfile(file_path):
            return
        log("FileHandler", "------------------------------------------ ")
        log("FileHandler", f"Receiving file: {file_path}")
        self._files.add(file_path)  # removed again once the file is deleted
        self.ingest_file(file_path)

    def ingest_file(self, file_path):
        log("FileHandler", f"counting file: {file_path}")
        stats = Stats()
        # counted on the side so a file that fails halfway adds nothing
        histogram = Histogram()
        try:
            with open(file_path, encoding="utf-8") as f:
                for chunk in read_chunks(f, self._chunk_size):
                    histogram.add(chunk)
                    stats.add_value(len(chunk))
        except (OSError, UnicodeDecodeError) as e:
            log("FileHandler", f"Error trying to read: {file_path} : {e}")
        else:
            total = self._store.merge(histogram, stats)
            log("FileHandler", f"min/avg/max chunk lengths for the last file: {stats.get_min()}/{stats.get_average()}/{stats.get_max()}")
            log("FileHandler", f"total letters counted so far: {total}")
        self.delete_file(file_path)

    def delete_file(self, file_path):
        try:
            os.remove(file_path)
            log("FileHandler", "done and successfully deleted.")
        except OSError as e:
            log("FileHandler", f"Error trying to delete: {file_path} : {e.strerror}")
        finally:
            self._files.discard(file_path)
