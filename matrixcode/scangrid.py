"""Coarse-to-fine pixel visiting order for barcode search."""

from enum import Enum, auto


class _Range(Enum):
    GOOD = auto()
    BAD = auto()
    END = auto()


def _trunc_div(a, b):
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b >= 0) else -q


class ScanGrid:
    """Visits pixels in cross patterns of shrinking size.

    Each level covers the area with crosses twice as dense as the one
    before, so large features are found first.
    """

    def __init__(self, x_min, x_max, y_min, y_max, scan_gap, scale):
        smallest_feature = _trunc_div(scan_gap, scale)

        self._x_min = x_min
        self._x_max = x_max
        self._y_min = y_min
        self._y_max = y_max

        max_extent = max(x_max - x_min, y_max - y_min)
        if max_extent <= 1:
            raise ValueError("scan area is too small")

        self._min_extent = 0
        extent = 1
        while extent < max_extent:
            if extent <= smallest_feature:
                self._min_extent = extent
            extent = (extent + 1) * 2 - 1
        self._max_extent = extent

        self._x_offset = _trunc_div(x_min + x_max - extent, 2)
        self._y_offset = _trunc_div(y_min + y_max - extent, 2)

        self._total = 1
        self._extent = extent
        self._set_derived()

    def _set_derived(self):
        self._jump_size = self._extent + 1
        self._pixel_total = 2 * self._extent - 1
        self._start_pos = self._extent // 2
        self._pixel_count = 0
        self._x_center = self._y_center = self._start_pos

    def _coordinates(self):
        if self._pixel_count >= self._pixel_total:
            self._pixel_count = 0
            self._x_center += self._jump_size

        if self._x_center > self._max_extent:
            self._x_center = self._start_pos
            self._y_center += self._jump_size

        if self._y_center > self._max_extent:
            self._total *= 4
            self._extent //= 2
            self._set_derived()

        if self._extent == 0 or self._extent < self._min_extent:
            return _Range.END, None

        count = self._pixel_count
        if count == self._pixel_total - 1:
            x, y = self._x_center, self._y_center
        else:
            half = self._pixel_total // 2
            quarter = half // 2
            if count < half:
                delta = count - quarter if count < quarter else half - count
                x, y = self._x_center + delta, self._y_center
            else:
                count -= half
                delta = count - quarter if count < quarter else half - count
                x, y = self._x_center, self._y_center + delta

        x += self._x_offset
        y += self._y_offset

        if not (self._x_min <= x <= self._x_max and self._y_min <= y <= self._y_max):
            return _Range.BAD, (x, y)
        return _Range.GOOD, (x, y)

    def pop_location(self):
        """Return the next in-bounds (x, y) location, or None when done."""
        while True:
            status, loc = self._coordinates()
            self._pixel_count += 1
            if status is not _Range.BAD:
                return loc

    def __iter__(self):
        while (loc := self.pop_location()) is not None:
            yield loc