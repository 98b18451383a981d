class Stats:
    """
    running count/min/max/sum over a stream of values, the values themselves are not kept
    """

    def __init__(self):
        self._count = 0
        self._sum = 0
        self._min = None
        self._max = None

    def add_value(self, value):
        self._count += 1
        self._sum += value
        if self._min is None or value < self._min:
            self._min = value
        if self._max is None or value > self._max:
            self._max = value

    def merge(self, other):
        if other._count == 0:
            return
        self._count += other._count
        self._sum += other._sum
        self._min = other._min if self._min is None else min(self._min, other._min)
        self._max = other._max if self._max is None else max(self._max, other._max)

    def count(self):
        return self._count

    def get_max(self):
        return 0 if self._max is None else self._max

    def get_min(self):
        return 0 if self._min is None else self._min

    def get_average(self):
        if self._count == 0:
            return 0
        return self._sum / self._count

    def to_dict(self):
        return {
            "count": self.count(),
            "min": self.get_min(),
            "avg": self.get_average(),
            "max": self.get_max(),
        }
