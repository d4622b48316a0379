from __future__ import annotations

import argparse
import os
import sys
from typing import Optional

from ..conversion import ConversionJob, ConversionSettings
from ..errors import ConversionError
from ..mif import SUPPORTED_DEPTHS, read_mif
from ..preview import write_preview
from ..sampling import ResamplerRegistry
from ..targets import DEFAULT_TARGET, TARGET_ENV_VAR, TargetProfile, TargetRegistry


def positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: {value!r}")
    if number <= 0:
        raise argparse.ArgumentTypeError(f"must be positive: {number}")
    return number


def parse_args(argv: Optional[list] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="bmpmif",
        description="Convert a 24-bit BMP into a MIF memory image for an FPGA frame buffer.",
    )
    parser.add_argument("path", nargs="?", help="24-bit uncompressed .bmp file")
    parser.add_argument(
        "--target",
        help=f"Target profile (default: ${TARGET_ENV_VAR} or {DEFAULT_TARGET})",
    )
    parser.add_argument("--width", type=positive_int, help="Output grid columns")
    parser.add_argument("--height", type=positive_int, help="Output grid rows")
    parser.add_argument("--depth", type=int, choices=SUPPORTED_DEPTHS, help="Bits per colour channel")
    parser.add_argument(
        "--policy",
        choices=sorted(ResamplerRegistry().policies),
        help="Resampling policy: point sampling or centred block averaging",
    )
    parser.add_argument("-o", "--output", metavar="PATH", help="MIF path (default: bmp_<W>_<3N>.mif)")
    parser.add_argument("--preview", metavar="PNG", help="Also render the MIF to a PNG")
    parser.add_argument("--preview-scale", type=positive_int, default=1, help="Preview pixel size")
    parser.add_argument("--list-targets", action="store_true", help="List known target profiles and exit")
    return parser.parse_args(argv)


def list_targets() -> int:
    registry = TargetRegistry.load()
    for target in registry.targets:
        print(
            f"{target.name}: {target.width}x{target.height}, "
            f"{target.word_width}-bit, {target.policy}  {target.description}".rstrip()
        )
    return 0


def _resolve_profile(args: argparse.Namespace) -> TargetProfile:
    name = args.target or os.environ.get(TARGET_ENV_VAR) or DEFAULT_TARGET
    return TargetRegistry.load().require(name)


def resolve_settings(args: argparse.Namespace) -> ConversionSettings:
    settings = ConversionSettings.from_profile(_resolve_profile(args))
    return settings.override(
        width=args.width,
        height=args.height,
        depth=args.depth,
        policy=args.policy,
    )


def convert(args: argparse.Namespace) -> int:
    settings = resolve_settings(args)
    job = ConversionJob(settings)
    print(f"USING COLS={settings.width} ROWS={settings.height}")
    written = job.convert_file(args.path, args.output)
    print(f"Wrote {written}")
    if args.preview:
        write_preview(read_mif(written), settings.width, settings.height, args.preview, args.preview_scale)
        print(f"Wrote {args.preview}")
    return 0


def main(argv: Optional[list] = None) -> int:
    args = parse_args(argv)
    if args.list_targets:
        return list_targets()
    if not args.path:
        print("Missing BMP file path. Use --help for usage.", file=sys.stderr)
        return 2
    try:
        return convert(args)
    except (ConversionError, ValueError) as exc:
        print(str(exc), file=sys.stderr)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
