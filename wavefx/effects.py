"""Sample-domain transforms for stereo waves.

Each factory validates its arguments and returns a transform function:
fn(wave) -> wave. Transforms never modify the wave they are given.
"""

import math
import sys
from dataclasses import replace

import numpy as np

from .arithmetic import scale_samples, saturating_add
from .errors import (
    InsufficientMemoryError, InvalidSpeedError, InvalidTimeError,
    InvalidVolumeError, InvalidEchoError,
)
from .samples import SampleStore


def _is_non_negative(value):
    return math.isfinite(value) and value >= 0


def _window_length(sample_rate, seconds):
    # Capped at sys.maxsize; an infinite product would overflow int()
    return int(min(sample_rate * seconds, sys.maxsize))


def reverse():
    """Play the samples backwards.

    Returns:
        Transform function: fn(wave) -> wave.
    """
    def transform(wave):
        samples = wave.samples
        return replace(wave, samples=SampleStore(samples.left[::-1].copy(),
                                                 samples.right[::-1].copy()))

    return transform


def change_speed(factor):
    """Speed up (factor > 1) or slow down (factor < 1) by resampling.

    Sample i of the output is sample floor(i * factor) of the input, with no
    interpolation. The output holds floor(N / factor) samples.

    Args:
        factor: Speed multiplier, must be positive.

    Returns:
        Transform function: fn(wave) -> wave.
    """
    if not (math.isfinite(factor) and factor > 0):
        raise InvalidSpeedError()

    def transform(wave):
        samples = wave.samples
        n = len(samples)
        try:
            length = int(n / factor)
            header = wave.header.with_sample_count(length)
            indices = (np.arange(length, dtype=np.float64) * factor).astype(np.intp)
            if n:
                # Guard against i * factor rounding up to n
                np.minimum(indices, n - 1, out=indices)
            left = samples.left[indices]
            right = samples.right[indices]
        except (MemoryError, OverflowError) as e:
            raise InsufficientMemoryError() from e
        return replace(wave, header=header, samples=SampleStore(left, right))

    return transform


def flip_channels():
    """Swap the left and right channels.

    Returns:
        Transform function: fn(wave) -> wave.
    """
    def transform(wave):
        return replace(wave, samples=wave.samples.swapped())

    return transform


def fade_out(duration):
    """Squared linear fade from full level to silence at the end.

    The ramp spans floor(sample_rate * duration) samples. If that is longer
    than the wave, only the tail of the ramp that overlaps the wave is applied.

    Args:
        duration: Fade length in seconds, must be non-negative.

    Returns:
        Transform function: fn(wave) -> wave.
    """
    if not _is_non_negative(duration):
        raise InvalidTimeError()

    def transform(wave):
        n = _window_length(wave.sample_rate, duration)
        count = min(n, wave.num_samples)
        if count == 0:
            return wave
        # Ramp positions (n - count) .. (n - 1) land on the last count samples
        positions = (n - count) + np.arange(count, dtype=np.float64)
        gains = (1.0 - positions / n) ** 2
        return replace(wave, samples=_apply_gains(wave.samples, gains,
                                                  start=wave.num_samples - count))

    return transform


def fade_in(duration):
    """Squared linear fade from silence to full level at the start.

    Args:
        duration: Fade length in seconds, must be non-negative.

    Returns:
        Transform function: fn(wave) -> wave.
    """
    if not _is_non_negative(duration):
        raise InvalidTimeError()

    def transform(wave):
        n = _window_length(wave.sample_rate, duration)
        count = min(n, wave.num_samples)
        if count == 0:
            return wave
        gains = (np.arange(count, dtype=np.float64) / n) ** 2
        return replace(wave, samples=_apply_gains(wave.samples, gains, start=0))

    return transform


def _apply_gains(samples, gains, start):
    """Scale samples[start:start + len(gains)] of both channels by gains."""
    stop = start + len(gains)
    left = samples.left.copy()
    right = samples.right.copy()
    left[start:stop] = scale_samples(left[start:stop], gains)
    right[start:stop] = scale_samples(right[start:stop], gains)
    return SampleStore(left, right)


def volume(scale):
    """Multiply every sample by scale, saturating at the int16 limits.

    Args:
        scale: Non-negative gain; 0 produces silence.

    Returns:
        Transform function: fn(wave) -> wave.
    """
    if not _is_non_negative(scale):
        raise InvalidVolumeError()

    def transform(wave):
        samples = wave.samples
        return replace(wave, samples=SampleStore(scale_samples(samples.left, scale),
                                                 scale_samples(samples.right, scale)))

    return transform


def echo(delay, scale):
    """Add a delayed, scaled copy of the wave on top of itself.

    The wave grows by floor(sample_rate * delay) samples so the echo tail is
    kept. Overlapping sums saturate at the int16 limits.

    Args:
        delay: Echo delay in seconds, must be non-negative.
        scale: Echo gain, must be non-negative.

    Returns:
        Transform function: fn(wave) -> wave.
    """
    if not (_is_non_negative(delay) and _is_non_negative(scale)):
        raise InvalidEchoError()

    def transform(wave):
        n = _window_length(wave.sample_rate, delay)
        if n == 0:
            return wave
        samples = wave.samples
        try:
            header = wave.header.grown_by(n)
            left = _echo_channel(samples.left, n, scale)
            right = _echo_channel(samples.right, n, scale)
        except (MemoryError, OverflowError) as e:
            raise InsufficientMemoryError() from e
        return replace(wave, header=header, samples=SampleStore(left, right))

    return transform


def _echo_channel(channel, delay_samples, scale):
    out = np.zeros(len(channel) + delay_samples, dtype=np.int16)
    out[:len(channel)] = channel
    out[delay_samples:] = saturating_add(out[delay_samples:],
                                         scale_samples(channel, scale))
    return out
