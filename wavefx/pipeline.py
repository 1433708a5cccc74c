"""Pipeline of wave transforms applied in command-line order."""

from dataclasses import astuple

from tqdm import tqdm

from .commands import (
    Reverse, ChangeSpeed, FlipChannels, FadeOut, FadeIn, Volume, Echo,
)
from .effects import (
    reverse, change_speed, flip_channels, fade_out, fade_in, volume, echo,
)

FACTORIES = {
    Reverse: reverse,
    ChangeSpeed: change_speed,
    FlipChannels: flip_channels,
    FadeOut: fade_out,
    FadeIn: fade_in,
    Volume: volume,
    Echo: echo,
}


class WavePipeline:
    """A chain of transforms applied to a wave.

    Each transform is a callable: fn(wave) -> wave
    """

    def __init__(self):
        self.transforms = []

    @classmethod
    def from_commands(cls, commands):
        """Build a pipeline from parsed commands.

        Argument validation happens here, so an out-of-range value is
        reported before any audio is read.

        Args:
            commands: Iterable of Command variants.
        """
        pipeline = cls()
        for command in commands:
            factory = FACTORIES[type(command)]
            pipeline.add(factory(*astuple(command)))
        return pipeline

    def add(self, transform_fn):
        """Add a transform to the pipeline.

        Args:
            transform_fn: Callable (wave) -> wave.
        """
        self.transforms.append(transform_fn)
        return self  # Allow chaining

    def process(self, wave, progress=False):
        """Apply all transforms to the wave in order.

        The first error raised by a transform propagates immediately; later
        transforms do not run.

        Args:
            wave: Input Wave.
            progress: Show a tqdm progress bar on stderr.

        Returns:
            Transformed Wave.
        """
        for fn in tqdm(self.transforms, unit='transform', desc='Processing',
                       disable=not progress):
            wave = fn(wave)
        return wave

    def clear(self):
        """Remove all transforms."""
        self.transforms.clear()

    def __len__(self):
        return len(self.transforms)
