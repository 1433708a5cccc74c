"""Stereo PCM WAV transformer."""

from .samples import SampleStore
from .wav_io import (Header, Wave, read_wave, write_wave, load_wave, save_wave,
                     format_header)
from .pipeline import WavePipeline
from .commands import (Reverse, ChangeSpeed, FlipChannels, FadeOut, FadeIn,
                       Volume, Echo)
from .effects import (reverse, change_speed, flip_channels, fade_out, fade_in,
                      volume, echo)
from .errors import WaveError
