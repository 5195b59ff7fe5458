import argparse
import sys
from pathlib import Path
from typing import Dict, Iterable

from .effects import EFFECTS, get_effect
from .encoder import encode_animation
from .errors import FontLoadError
from .renderer import build_animation, render_base64


def parse_arguments(argv: Iterable[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="gif-effects",
        description=(
            "Render a countdown timer, LED banner or animated text effect as an "
            "animated GIF."
        ),
    )
    parser.add_argument(
        "effect",
        type=str,
        help=f"Effect to render ({', '.join(EFFECTS)}).",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        default=None,
        help="Output GIF path (defaults to EFFECT.gif in the current directory).",
    )
    parser.add_argument(
        "-s",
        "--set",
        dest="options",
        metavar="KEY=VALUE",
        action="append",
        default=[],
        help=(
            "Effect option, repeatable (e.g. --set text=HELLO --set frames=20). "
            "Names match the HTTP query parameters."
        ),
    )
    parser.add_argument(
        "--base64",
        action="store_true",
        help="Print the GIF base64-encoded to stdout instead of writing a file.",
    )
    return parser.parse_args(list(argv))


def parse_options(pairs: Iterable[str]) -> Dict[str, str]:
    options: Dict[str, str] = {}
    for pair in pairs:
        key, separator, value = pair.partition("=")
        if not separator or not key.strip():
            raise ValueError(f"Options must be provided as KEY=VALUE. Got: {pair}")
        options[key.strip()] = value
    return options


def resolve_unique_path(path: Path) -> Path:
    if not path.exists():
        return path
    stem = path.stem
    suffix = path.suffix
    index = 1
    while True:
        candidate = path.with_name(f"{stem}-{index}{suffix}")
        if not candidate.exists():
            return candidate
        index += 1


def save_gif(gif_bytes: bytes, output_path: Path) -> Path:
    target_path = resolve_unique_path(output_path)
    target_path.parent.mkdir(parents=True, exist_ok=True)
    target_path.write_bytes(gif_bytes)
    return target_path


def main(argv: Iterable[str]) -> int:
    try:
        args = parse_arguments(argv)
        effect_name = get_effect(args.effect).name
        options = parse_options(args.options)

        if args.base64:
            print(render_base64(effect_name, options))
            return 0

        animation = build_animation(effect_name, options)
        output = args.output or Path(f"{effect_name}.gif")
        final_output = save_gif(encode_animation(animation), output)
        if final_output != output:
            print(
                "Existing file detected. Saved new animation as"
                f" {final_output} instead."
            )
        print(f"Created GIF with {len(animation)} frames at {final_output}")
        return 0
    except FontLoadError as font_err:
        print(f"Font error: {font_err}", file=sys.stderr)
    except ValueError as value_err:
        print(f"Error: {value_err}", file=sys.stderr)
    except OSError as os_err:
        print(f"Error: {os_err}", file=sys.stderr)
    return 1


def run() -> None:
    raise SystemExit(main(sys.argv[1:]))


if __name__ == "__main__":
    run()
