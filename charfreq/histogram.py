import math
import re
from decimal import Decimal, ROUND_HALF_UP

from counter import Counter

# whitespace and line terminators as the ECMAScript \s class defines them,
# so a byte order mark (U+FEFF) is dropped while U+001C-U+001F and U+0085 are counted
_WHITESPACE = re.compile(r"[\t\n\v\f\r \u00a0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000\ufeff]")

# characters below this share (in percent) are left out of the report
THRESHOLD_PERCENT = 1.0

_HUNDREDTHS = Decimal("0.01")


def _bar_length(percentage: float) -> int:
    # round half up, 12.5 -> 13
    return math.floor(percentage + 0.5)


def _format_percentage(percentage: float) -> str:
    # exact binary value rounded half up, 3.125 -> 3.13
    return str(Decimal(percentage).quantize(_HUNDREDTHS, rounding=ROUND_HALF_UP))


class Histogram:
    """
    counts the characters of a text stream and renders them as an ASCII bar chart
    """

    def __init__(self):
        self._letter_counts = Counter(0)
        self.total_letters = 0

    def add(self, text: str):
        """
        strips all whitespace, uppercases the rest and counts every character
        the counts accumulate across calls, so text can be added chunk by chunk
        """
        text = _WHITESPACE.sub("", text).upper()
        for character in text:
            self._letter_counts.increment(character)
            self.total_letters += 1

    def add_all(self, chunks):
        for chunk in chunks:
            self.add(chunk)

    def merge(self, other):
        """
        adds the counts of another histogram, as if its text had been added here
        """
        for character, count in other.entries():
            self._letter_counts.increment(character, count)
        self.total_letters += other.total_letters

    def get_count(self, character: str) -> int:
        return self._letter_counts.get(character)

    def unique_elements(self) -> int:
        return self._letter_counts.unique_elements()

    def entries(self) -> list:
        """
        Returns:
            list: (character, count) pairs, most frequent first, ties in character order
        """
        return sorted(self._letter_counts.items(), key=lambda entry: (-entry[1], entry[0]))

    def format(self) -> str:
        """

        renders one line per character, e.g. "B: ### 60.00%"

        Returns:
            str: the report lines joined by newlines, empty if nothing was counted

        """
        if self.total_letters == 0:
            return ""

        lines = []
        for character, count in self.entries():
            percentage = count / self.total_letters * 100
            if percentage < THRESHOLD_PERCENT:
                continue
            lines.append(f"{character}: {'#' * _bar_length(percentage)} {_format_percentage(percentage)}%")
        return "\n".join(lines)

    def __str__(self):
        return self.format()
