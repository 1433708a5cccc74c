"""Error kinds raised while decoding, transforming or encoding a wave.

Every error is fatal for a run. Each class carries the single-line message
the CLI prints before exiting.
"""

USAGE = ("Usage: wave [[-r][-s factor][-f][-o delay][-i delay][-v scale]"
         "[-e delay scale] < input > output")


class WaveError(ValueError):
    """Base class for all wavefx failures."""

    message = "Wave processing failed"

    def __init__(self, message=None):
        super().__init__(message or self.message)


# --- Header validation ---

class NotRiffContainerError(WaveError):
    message = "File is not a RIFF file"


class BadFormatChunkError(WaveError):
    message = "Format chunk is corrupted"


class BadDataChunkError(WaveError):
    message = "Data chunk is corrupted"


class NotStereoError(WaveError):
    message = "File is not stereo"


class InvalidSampleRateError(WaveError):
    message = "File does not use 44,100Hz sample rate"


class InvalidSampleSizeError(WaveError):
    message = "File does not have 16-bit samples"


class InvalidFileSizeError(WaveError):
    message = "File size does not match size in header"


class InsufficientMemoryError(WaveError):
    message = "Program out of memory"


# --- Transform arguments ---

class InvalidSpeedError(WaveError):
    message = "A positive number must be supplied for the speed change"


class InvalidTimeError(WaveError):
    message = ("A positive number must be supplied for the fade in and "
               "fade out time")


class InvalidVolumeError(WaveError):
    message = "A positive number must be supplied for the volume scale"


class InvalidEchoError(WaveError):
    message = ("A positive number must be supplied for the echo delay and "
               "scale parameters")


class UnrecognizedCommandError(WaveError):
    message = USAGE
