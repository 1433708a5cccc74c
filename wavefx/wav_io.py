"""WAV file decoding/encoding for 16-bit stereo PCM audio."""

import struct
from dataclasses import dataclass, replace

from .constants import (
    RIFF_ID, WAVE_ID, FMT_ID, DATA_ID,
    FMT_CHUNK_SIZE, PCM_COMPRESSION, NUM_CHANNELS, SAMPLE_RATE,
    BITS_PER_SAMPLE, HEADER_FORMAT, HEADER_SIZE, FRAME_BYTES,
    MAX_CHUNK_SIZE,
)
from .errors import (
    NotRiffContainerError, BadFormatChunkError, BadDataChunkError,
    NotStereoError, InvalidSampleRateError, InvalidSampleSizeError,
    InvalidFileSizeError, InsufficientMemoryError,
)
from .samples import SampleStore


@dataclass(frozen=True)
class FormatChunk:
    chunk_id: bytes = FMT_ID
    size: int = FMT_CHUNK_SIZE
    compression: int = PCM_COMPRESSION
    channels: int = NUM_CHANNELS
    sample_rate: int = SAMPLE_RATE
    byte_rate: int = SAMPLE_RATE * FRAME_BYTES
    block_align: int = FRAME_BYTES
    bits_per_sample: int = BITS_PER_SAMPLE


@dataclass(frozen=True)
class DataChunk:
    chunk_id: bytes = DATA_ID
    size: int = 0


@dataclass(frozen=True)
class Header:
    """The fixed 44-byte RIFF/WAVE header.

    The size fields are redundant with the sample count: whenever a
    transform changes the number of samples, both ``size`` and
    ``data_chunk.size`` must be updated together (see ``with_sample_count``
    and ``grown_by``).
    """

    riff_id: bytes = RIFF_ID
    size: int = HEADER_SIZE
    wave_id: bytes = WAVE_ID
    format_chunk: FormatChunk = FormatChunk()
    data_chunk: DataChunk = DataChunk()

    @classmethod
    def for_samples(cls, num_samples):
        """Build a valid header for ``num_samples`` stereo frames."""
        return cls().with_sample_count(num_samples)

    @classmethod
    def unpack(cls, raw):
        """Parse the header fields from exactly HEADER_SIZE bytes."""
        (riff_id, size, wave_id,
         fmt_id, fmt_size, compression, channels, sample_rate,
         byte_rate, block_align, bits_per_sample,
         data_id, data_size) = struct.unpack(HEADER_FORMAT, raw)
        fmt = FormatChunk(fmt_id, fmt_size, compression, channels,
                          sample_rate, byte_rate, block_align,
                          bits_per_sample)
        return cls(riff_id, size, wave_id, fmt, DataChunk(data_id, data_size))

    def pack(self):
        fmt = self.format_chunk
        return struct.pack(HEADER_FORMAT,
            self.riff_id, self.size, self.wave_id,
            fmt.chunk_id, fmt.size, fmt.compression, fmt.channels,
            fmt.sample_rate, fmt.byte_rate, fmt.block_align,
            fmt.bits_per_sample,
            self.data_chunk.chunk_id, self.data_chunk.size,
        )

    def validate(self):
        """Check the header describes 16-bit stereo PCM at 44.1 kHz.

        Checks run in a fixed order and the first failure is raised.

        Raises:
            NotRiffContainerError, BadFormatChunkError, BadDataChunkError,
            NotStereoError, InvalidSampleRateError, InvalidSampleSizeError.
        """
        fmt = self.format_chunk
        if self.riff_id != RIFF_ID:
            raise NotRiffContainerError()
        if (fmt.chunk_id != FMT_ID or fmt.size != FMT_CHUNK_SIZE
                or fmt.compression != PCM_COMPRESSION):
            raise BadFormatChunkError()
        if self.data_chunk.chunk_id != DATA_ID:
            raise BadDataChunkError()
        if fmt.channels != NUM_CHANNELS:
            raise NotStereoError()
        if fmt.sample_rate != SAMPLE_RATE:
            raise InvalidSampleRateError()
        if fmt.bits_per_sample != BITS_PER_SAMPLE:
            raise InvalidSampleSizeError()
        return self

    @property
    def num_samples(self):
        """Number of stereo frames declared by the data chunk."""
        return self.data_chunk.size // FRAME_BYTES

    def with_sample_count(self, num_samples):
        """Recompute both size fields from a new sample count."""
        data_size = FRAME_BYTES * num_samples
        return self._resized(HEADER_SIZE + data_size, data_size)

    def grown_by(self, num_samples):
        """Increase both size fields by ``num_samples`` frames."""
        delta = FRAME_BYTES * num_samples
        return self._resized(self.size + delta, self.data_chunk.size + delta)

    def _resized(self, size, data_size):
        if size > MAX_CHUNK_SIZE or data_size > MAX_CHUNK_SIZE:
            raise InsufficientMemoryError()
        return replace(self, size=size,
                       data_chunk=replace(self.data_chunk, size=data_size))


@dataclass(frozen=True)
class Wave:
    """A header together with the samples it describes."""

    header: Header
    samples: SampleStore

    @classmethod
    def from_samples(cls, left, right):
        """Wrap raw channel data with a freshly computed header."""
        samples = SampleStore(left, right)
        return cls(Header.for_samples(len(samples)), samples)

    @property
    def sample_rate(self):
        return self.header.format_chunk.sample_rate

    @property
    def num_samples(self):
        return len(self.samples)

    def to_bytes(self):
        return self.header.pack() + self.samples.to_bytes()


def _read_exact(stream, size):
    """Read exactly ``size`` bytes or fail on a short stream."""
    chunks = []
    remaining = size
    while remaining > 0:
        chunk = stream.read(remaining)
        if not chunk:
            raise InvalidFileSizeError()
        chunks.append(chunk)
        remaining -= len(chunk)
    return b''.join(chunks)


def read_header(stream):
    """Read and validate the header from a binary stream.

    Args:
        stream: Readable binary file object positioned at the RIFF ID.

    Returns:
        Validated Header.
    """
    return Header.unpack(_read_exact(stream, HEADER_SIZE)).validate()


def read_samples(stream, header):
    """Read the frames declared by ``header`` from a binary stream.

    Raises:
        InvalidFileSizeError: The stream ends before the declared data size.
    """
    raw = _read_exact(stream, header.num_samples * FRAME_BYTES)
    try:
        return SampleStore.from_bytes(raw)
    except MemoryError as e:
        raise InsufficientMemoryError() from e


def read_wave(stream):
    """Decode a complete wave (header, then samples) from a binary stream."""
    header = read_header(stream)
    return Wave(header, read_samples(stream, header))


def write_header(header, stream):
    stream.write(header.pack())


def write_wave(wave, stream):
    """Encode a wave to a binary stream in the same fixed layout."""
    write_header(wave.header, stream)
    stream.write(wave.samples.to_bytes())


def load_wave(filepath):
    """Load a 16-bit stereo 44.1 kHz WAV file.

    Args:
        filepath: Input WAV file path.

    Returns:
        Wave with validated header and decoded samples.
    """
    with open(filepath, 'rb') as f:
        return read_wave(f)


def save_wave(wave, filepath):
    """Write a wave to disk.

    The file is encoded in memory first so nothing is written if encoding
    fails.
    """
    data = wave.to_bytes()
    with open(filepath, 'wb') as f:
        f.write(data)


def format_header(header):
    """Render the header fields as human-readable lines."""
    fmt = header.format_chunk
    rows = [
        ('ID', header.riff_id.decode('latin-1')),
        ('Size', header.size),
        ('Format', header.wave_id.decode('latin-1')),
        ('Format ID', fmt.chunk_id.decode('latin-1')),
        ('Format Size', fmt.size),
        ('Compression', fmt.compression),
        ('Channels', fmt.channels),
        ('Sample Rate', fmt.sample_rate),
        ('Byte Rate', fmt.byte_rate),
        ('Block Align', fmt.block_align),
        ('Bits Per Sample', fmt.bits_per_sample),
        ('Data ID', header.data_chunk.chunk_id.decode('latin-1')),
        ('Data Size', header.data_chunk.size),
    ]
    return '\n'.join(f"{name + ':':<17}{value}" for name, value in rows)
