"""RIFF/WAVE container constants for 16-bit stereo PCM at 44.1 kHz."""

import struct

# --- Chunk IDs ---
RIFF_ID = b'RIFF'
WAVE_ID = b'WAVE'
FMT_ID = b'fmt '
DATA_ID = b'data'

# --- Accepted Format ---
FMT_CHUNK_SIZE = 16                     # PCM format chunk body
PCM_COMPRESSION = 1
NUM_CHANNELS = 2
SAMPLE_RATE = 44100
BITS_PER_SAMPLE = 16

# --- Wire Layout ---
# RIFF header, fmt chunk and data chunk header, little-endian throughout
HEADER_FORMAT = '<4sI4s4sIHHIIHH4sI'
HEADER_SIZE = struct.calcsize(HEADER_FORMAT)    # 44 bytes

SAMPLE_BYTES = BITS_PER_SAMPLE // 8
FRAME_BYTES = NUM_CHANNELS * SAMPLE_BYTES       # 4 bytes: left i16, right i16
SAMPLE_DTYPE = '<i2'

MAX_CHUNK_SIZE = 0xFFFFFFFF             # u32 size fields
MAX_SAMPLES = (MAX_CHUNK_SIZE - HEADER_SIZE) // FRAME_BYTES

# --- 16-bit Limits ---
INT16_MIN = -32768
INT16_MAX = 32767
