import sys

from charfreq_helper import DEFAULT_CHUNK_SIZE, log, read_chunks
from histogram import Histogram


def histogram_from_stream(stream, chunk_size=DEFAULT_CHUNK_SIZE, histogram=None):
    """
    reads the stream chunk by chunk and adds every chunk to the histogram
    """
    if histogram is None:
        histogram = Histogram()
    for chunk in read_chunks(stream, chunk_size):
        histogram.add(chunk)
    return histogram


def histogram_from_files(paths, chunk_size=DEFAULT_CHUNK_SIZE):
    """
    one histogram over all given utf-8 files, read in argument order
    """
    histogram = Histogram()
    for path in paths:
        with open(path, encoding="utf-8") as f:
            histogram_from_stream(f, chunk_size, histogram)
    return histogram


def main(argv=None):
    # no arguments: read standard input
    # otherwise:    every argument is a text file to count
    if argv is None:
        argv = sys.argv[1:]

    if argv:
        try:
            histogram = histogram_from_files(argv)
        except (OSError, UnicodeDecodeError) as e:
            log("charfreq", f"error: could not read input: {e}", file=sys.stderr)
            return 1
    else:
        # unicode text, not bytes; undecodable bytes become U+FFFD
        if hasattr(sys.stdin, "reconfigure"):
            sys.stdin.reconfigure(encoding="utf-8", errors="replace")
        histogram = histogram_from_stream(sys.stdin)

    print(histogram.format())
    return 0


###########################################################################
# START
###########################################################################
if __name__ == "__main__":
    sys.exit(main())
