import sys
from datetime import datetime

DEFAULT_CHUNK_SIZE = 4096


def get_current_timestamp():
    """Returns the current system timestamp in a human-readable format"""
    return datetime.today().strftime('%Y-%m-%d %H:%M:%S')


def log(tag, message, file=None):
    print(f"[{tag}] {message}", file=file or sys.stdout, flush=True)


def read_chunks(stream, chunk_size=DEFAULT_CHUNK_SIZE):
    """
    yields the text of a stream chunk by chunk, blocking on each read until the stream ends
    """
    if chunk_size < 1:
        raise ValueError(f"Invalid chunk size {chunk_size}. Must be >= 1.")
    while True:
        chunk = stream.read(chunk_size)
        if not chunk:
            return
        yield chunk


def close_thread(t, name):
    log("server", f"trying to end the {name} thread...")
    if hasattr(t, "stop"):
        try:
            t.stop()
            log("server", f"{name} thread stopped")
        except RuntimeError as e:
            log("server", f"could not stop {name} thread: {e}")
    try:
        t.join()
        log("server", f"{name} thread joined")
    except RuntimeError as e:
        log("server", f"could not join {name} thread: {e}")
