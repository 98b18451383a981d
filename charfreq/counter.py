class Counter:
    """
    a frequency table which answers a default value for keys it has never seen
    """

    def __init__(self, default_value=0):
        self._counts = {}
        self._default_value = default_value

    def get(self, key):
        if key in self._counts:
            return self._counts[key]
        else:
            return self._default_value

    def set(self, key, count):
        self._counts[key] = count

    def increment(self, key, count=1):
        if count < 1:
            raise ValueError(f"Invalid count {count}. Must be >= 1.")
        self._counts[key] = self.get(key) + count

    def unique_elements(self):
        return len(self._counts)

    def keys(self):
        return self._counts.keys()

    def values(self):
        return self._counts.values()

    def items(self):
        return self._counts.items()

    def __iter__(self):
        return iter(self._counts.items())

    def __contains__(self, key):
        return key in self._counts

    def __str__(self):
        return self._counts.__str__()

    def __len__(self):
        return len(self._counts)
