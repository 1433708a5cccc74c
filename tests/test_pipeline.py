"""Tests for wavefx.pipeline."""

from dataclasses import replace

import numpy as np
import pytest

from wavefx.commands import (
    Reverse, ChangeSpeed, FlipChannels, FadeIn, Volume, Echo,
)
from wavefx.errors import InvalidSpeedError, InvalidVolumeError
from wavefx.pipeline import WavePipeline
from wavefx.samples import SampleStore


def _offset(amount):
    def transform(wave):
        samples = wave.samples
        return replace(wave, samples=SampleStore(samples.left + amount,
                                                 samples.right + amount))
    return transform


def _double(wave):
    samples = wave.samples
    return replace(wave, samples=SampleStore(samples.left * 2,
                                             samples.right * 2))


class TestWavePipeline:
    def test_empty_pipeline_length(self):
        p = WavePipeline()
        assert len(p) == 0

    def test_add_increases_length(self):
        p = WavePipeline()
        p.add(lambda w: w)
        assert len(p) == 1
        p.add(lambda w: w)
        assert len(p) == 2

    def test_add_returns_self(self):
        p = WavePipeline()
        result = p.add(lambda w: w)
        assert result is p

    def test_process_applies_in_order(self, tiny_wave):
        p = WavePipeline()
        p.add(_double).add(_offset(1))
        result = p.process(tiny_wave)
        # (samples * 2) + 1
        np.testing.assert_array_equal(result.samples.left, [201, -199])
        np.testing.assert_array_equal(result.samples.right, [101, -99])

    def test_process_empty_pipeline(self, tiny_wave):
        result = WavePipeline().process(tiny_wave)
        assert result is tiny_wave

    def test_stops_at_first_error(self, tiny_wave):
        calls = []

        def fail(wave):
            raise InvalidVolumeError()

        def record(wave):
            calls.append(wave)
            return wave

        p = WavePipeline().add(fail).add(record)
        with pytest.raises(InvalidVolumeError):
            p.process(tiny_wave)
        assert calls == []

    def test_progress_bar(self, tiny_wave, capsys):
        p = WavePipeline().add(lambda w: w)
        p.process(tiny_wave, progress=True)
        captured = capsys.readouterr()
        assert 'Processing' in captured.err
        assert captured.out == ''

    def test_clear(self):
        p = WavePipeline()
        p.add(_double).add(_offset(1))
        p.clear()
        assert len(p) == 0


class TestFromCommands:
    def test_length(self):
        p = WavePipeline.from_commands([Reverse(), Volume(2.0), Echo(0.1, 0.5)])
        assert len(p) == 3

    def test_reverse_two_frames(self, tiny_wave):
        result = WavePipeline.from_commands([Reverse()]).process(tiny_wave)
        np.testing.assert_array_equal(result.samples.left, [-100, 100])
        np.testing.assert_array_equal(result.samples.right, [-50, 50])

    def test_volume_two_frames(self, tiny_wave):
        result = WavePipeline.from_commands([Volume(2.0)]).process(tiny_wave)
        np.testing.assert_array_equal(result.samples.left, [200, -200])
        np.testing.assert_array_equal(result.samples.right, [100, -100])

    def test_order_matters(self, ramp_wave):
        flip_then_speed = WavePipeline.from_commands(
            [FlipChannels(), ChangeSpeed(2.0)]).process(ramp_wave)
        speed_then_flip = WavePipeline.from_commands(
            [ChangeSpeed(2.0), FlipChannels()]).process(ramp_wave)
        assert flip_then_speed.samples == speed_then_flip.samples

        reverse_then_fade = WavePipeline.from_commands(
            [Reverse(), FadeIn(5 / 44100)]).process(ramp_wave)
        fade_then_reverse = WavePipeline.from_commands(
            [FadeIn(5 / 44100), Reverse()]).process(ramp_wave)
        assert reverse_then_fade.samples != fade_then_reverse.samples

    def test_invalid_argument_fails_at_build(self):
        with pytest.raises(InvalidSpeedError):
            WavePipeline.from_commands([Reverse(), ChangeSpeed(0.0)])

    def test_header_threaded_through(self, random_wave):
        p = WavePipeline.from_commands([ChangeSpeed(2.0), Echo(0.5, 0.5)])
        result = p.process(random_wave)
        assert result.num_samples == 22050 + 22050
        assert result.header.data_chunk.size == 4 * result.num_samples
