"""Shared fixtures for wavefx tests."""

import struct

import numpy as np
import pytest

from wavefx.wav_io import Wave


def build_wav(left, right, riff_id=b'RIFF', fmt_id=b'fmt ', fmt_size=16,
              compression=1, channels=2, sample_rate=44100,
              bits_per_sample=16, data_id=b'data', data_size=None):
    """Build raw WAV bytes field by field so any field can be corrupted."""
    frames = np.empty((len(left), 2), dtype='<i2')
    frames[:, 0] = left
    frames[:, 1] = right
    audio_bytes = frames.tobytes()
    if data_size is None:
        data_size = len(audio_bytes)

    block_align = channels * (bits_per_sample // 8)
    byte_rate = sample_rate * block_align
    fmt_chunk = struct.pack('<4sIHHIIHH',
        fmt_id, fmt_size, compression, channels,
        sample_rate, byte_rate, block_align, bits_per_sample,
    )
    data_chunk_header = struct.pack('<4sI', data_id, data_size)
    riff_size = 4 + len(fmt_chunk) + len(data_chunk_header) + data_size
    return (struct.pack('<4sI4s', riff_id, riff_size, b'WAVE')
            + fmt_chunk + data_chunk_header + audio_bytes)


@pytest.fixture
def wav_builder():
    """The build_wav helper, for tests that corrupt individual fields."""
    return build_wav


@pytest.fixture
def tiny_wave():
    """The 2-frame stereo wave left=[100, -100], right=[50, -50]."""
    return Wave.from_samples([100, -100], [50, -50])


@pytest.fixture
def random_wave():
    """One second of random stereo noise."""
    rng = np.random.default_rng(42)
    left = rng.integers(-32768, 32768, 44100, dtype=np.int16)
    right = rng.integers(-32768, 32768, 44100, dtype=np.int16)
    return Wave.from_samples(left, right)


@pytest.fixture
def ramp_wave():
    """Short wave with distinct, easy-to-track sample values."""
    left = np.arange(10, dtype=np.int16) * 100
    right = -np.arange(10, dtype=np.int16) * 100
    return Wave.from_samples(left, right)
