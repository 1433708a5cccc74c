"""CLI entry point for the stereo WAV transformer."""

import argparse
import sys
from dataclasses import fields

from wavefx.commands import COMMANDS
from wavefx.errors import WaveError, UnrecognizedCommandError
from wavefx.pipeline import WavePipeline
from wavefx.wav_io import read_wave, format_header


class _ArgumentParser(argparse.ArgumentParser):
    """Argument parser that reports bad usage as a WaveError.

    Keeps exit codes and diagnostics uniform: every failure exits with
    status 1 and an ``Error: ...`` line.
    """

    def error(self, message):
        raise UnrecognizedCommandError()


class _CommandAction(argparse.Action):
    """Append a transform command to ``namespace.commands`` in flag order."""

    def __init__(self, option_strings, dest, command, **kwargs):
        self.command = command
        super().__init__(option_strings, dest, nargs=command.arity(), **kwargs)

    def __call__(self, parser, namespace, values, option_string=None):
        commands = getattr(namespace, self.dest, None)
        if commands is None:
            commands = []
            setattr(namespace, self.dest, commands)
        commands.append(self.command.from_tokens(values))


_HELP = {
    'Reverse': 'Reverse the samples',
    'ChangeSpeed': 'Change speed by FACTOR (2.0=twice as fast)',
    'FlipChannels': 'Swap left and right channels',
    'FadeOut': 'Fade out over the last DELAY seconds',
    'FadeIn': 'Fade in over the first DELAY seconds',
    'Volume': 'Scale volume by SCALE (saturates at 16-bit limits)',
    'Echo': 'Add an echo DELAY seconds later at volume SCALE',
}

_METAVARS = {
    'factor': 'factor',
    'duration': 'delay',
    'scale': 'scale',
    'delay': 'delay',
}


def _build_parser():
    parser = _ArgumentParser(
        description="Transform 16-bit stereo 44.1 kHz WAV audio",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        allow_abbrev=False,
        epilog="""\
Transforms are applied in the order given and may be repeated.

Examples:
  python main.py -r < input.wav > reversed.wav
  python main.py -s 2.0 -v 0.5 < input.wav > fast_quiet.wav
  python main.py -i 1.5 -o 1.5 --input in.wav --output out.wav
  python main.py -e 0.25 0.6 -f < input.wav > echo_flipped.wav
        """)

    group = parser.add_argument_group('transforms')
    for command in COMMANDS:
        names = [f.name for f in fields(command)]
        group.add_argument(command.flag, dest='commands', action=_CommandAction,
                           command=command, default=None,
                           metavar=tuple(_METAVARS[n] for n in names) or None,
                           help=_HELP[command.__name__])

    parser.add_argument('--input', default=None,
                        help='Input WAV file (default: stdin)')
    parser.add_argument('--output', default=None,
                        help='Output WAV file (default: stdout)')
    parser.add_argument('--verbose', action='store_true',
                        help='Print input and output headers to stderr')
    parser.add_argument('--progress', action='store_true',
                        help='Show a progress bar on stderr')
    return parser


def _read_input(path):
    """Decode the input wave from a file path, or stdin when path is None."""
    if path is None:
        return read_wave(sys.stdin.buffer)
    try:
        f = open(path, 'rb')
    except OSError:
        print(f"Error: Cannot open input file '{path}'", file=sys.stderr)
        sys.exit(1)
    with f:
        return read_wave(f)


def _write_output(path, data):
    """Write encoded bytes to a file path, or stdout when path is None."""
    if path is None:
        sys.stdout.buffer.write(data)
        sys.stdout.buffer.flush()
        return
    try:
        with open(path, 'wb') as f:
            f.write(data)
    except OSError:
        print(f"Error: Cannot write output file '{path}'", file=sys.stderr)
        sys.exit(1)


def _print_header(title, header):
    print(f"\n{title}\n", file=sys.stderr)
    print(format_header(header), file=sys.stderr)
    print(file=sys.stderr)


def main(argv=None):
    parser = _build_parser()

    try:
        args = parser.parse_args(argv)
        pipeline = WavePipeline.from_commands(args.commands or [])

        wave = _read_input(args.input)
        if args.verbose:
            _print_header("Input Wave Header Information", wave.header)
            print(f"Applying {len(pipeline)} transform(s)", file=sys.stderr)

        wave = pipeline.process(wave, progress=args.progress)
        if args.verbose:
            _print_header("Output Wave Header Information", wave.header)

        # Encode fully before writing so a failed run produces no output
        data = wave.to_bytes()
    except WaveError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    _write_output(args.output, data)


if __name__ == '__main__':
    main()
