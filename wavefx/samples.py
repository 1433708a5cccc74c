"""In-memory stereo sample buffers."""

import numpy as np

from .constants import NUM_CHANNELS, SAMPLE_DTYPE


class SampleStore:
    """Left and right channel buffers of signed 16-bit samples.

    Both channels always hold the same number of samples; the constructor
    rejects anything else. Transforms build new arrays and wrap them in a new
    store rather than resizing one channel at a time.
    """

    __slots__ = ('_left', '_right')

    def __init__(self, left, right):
        left = np.asarray(left, dtype=np.int16)
        right = np.asarray(right, dtype=np.int16)
        if left.ndim != 1 or right.ndim != 1:
            raise ValueError("Channels must be 1D arrays")
        if len(left) != len(right):
            raise ValueError(
                f"Channel length mismatch: {len(left)} != {len(right)}")
        self._left = left
        self._right = right

    @classmethod
    def empty(cls):
        return cls(np.zeros(0, dtype=np.int16), np.zeros(0, dtype=np.int16))

    @classmethod
    def from_bytes(cls, raw):
        """Decode interleaved little-endian frames (left, right, left, ...).

        Args:
            raw: Bytes whose length is a multiple of the frame size.

        Returns:
            SampleStore owning its own (writable) copies of the channels.
        """
        frames = np.frombuffer(raw, dtype=SAMPLE_DTYPE).reshape(-1, NUM_CHANNELS)
        return cls(frames[:, 0].astype(np.int16), frames[:, 1].astype(np.int16))

    def to_bytes(self):
        """Encode as interleaved little-endian frames."""
        frames = np.empty((len(self), NUM_CHANNELS), dtype=SAMPLE_DTYPE)
        frames[:, 0] = self._left
        frames[:, 1] = self._right
        return frames.tobytes()

    @property
    def left(self):
        return self._left

    @property
    def right(self):
        return self._right

    @property
    def num_samples(self):
        return len(self._left)

    def swapped(self):
        """Return a store with the channel buffers exchanged."""
        return SampleStore(self._right, self._left)

    def __len__(self):
        return len(self._left)

    def __eq__(self, other):
        if not isinstance(other, SampleStore):
            return NotImplemented
        return (np.array_equal(self._left, other._left)
                and np.array_equal(self._right, other._right))

    def __repr__(self):
        return f"SampleStore(num_samples={len(self)})"
