"""A fixed-capacity integer array with positional insert, lookup and delete."""


class FixedArray:
    """Array of a fixed capacity that keeps its elements packed at the front."""

    def __init__(self, capacity):
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        self._data = [0] * capacity
        self._length = 0

    @property
    def capacity(self):
        """Number of slots the array was created with."""
        return len(self._data)

    def __len__(self):
        return self._length

    def _out_of_range(self, index):
        return not 0 <= index < len(self._data)

    def find(self, index):
        """Return the value stored in slot ``index``."""
        if self._out_of_range(index):
            raise IndexError("index out of range")
        return self._data[index]

    def insert(self, index, value):
        """Insert ``value`` at ``index``, shifting later elements one slot right."""
        if self._length == len(self._data):
            raise OverflowError("array is full")
        if index != self._length and self._out_of_range(index):
            raise IndexError("index out of range")
        if index < self._length:
            self._data[index + 1:self._length + 1] = self._data[index:self._length]
        self._data[index] = value
        self._length += 1

    def append(self, value):
        """Insert ``value`` after the last element."""
        self.insert(self._length, value)

    def delete(self, index):
        """Remove and return the value at ``index``, shifting later elements left."""
        if self._out_of_range(index):
            raise IndexError("index out of range")
        if self._length == 0:
            raise IndexError("delete from empty array")
        value = self._data[index]
        if index < self._length - 1:
            self._data[index:self._length - 1] = self._data[index + 1:self._length]
        self._length -= 1
        return value

    def __str__(self):
        return "".join(f"|{value}" for value in self._data[:self._length])