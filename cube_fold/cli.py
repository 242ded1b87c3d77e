"""CLI entrypoint for folding a cube net and walking its surface."""

from __future__ import annotations

import argparse

from tqdm import tqdm

from .config import DEFAULT_CONFIG, load_config
from .engine import CubeWalker
from .errors import InvalidNetError, ParseError
from .folding import fold_net
from .reader import read_input
from .space import Direction


def build_parser(defaults: dict | None = None) -> argparse.ArgumentParser:
    cfg = {**DEFAULT_CONFIG, **(defaults or {})}

    parser = argparse.ArgumentParser(description="Fold a cube net and walk over its surface")
    sub = parser.add_subparsers(dest="mode", required=True)

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("input", help="Path to the map and instruction file")
    common.add_argument("--config", type=str, default=None, help="Path to YAML config")
    common.add_argument("--face-size", type=int, default=cfg["face_size"], help="Edge length of one face")

    walk = sub.add_parser("walk", parents=[common], help="Walk the instructions and print the password")
    walk.add_argument("--trail-file", type=str, default=cfg["trail_file"])
    walk.add_argument("--plot-file", type=str, default=cfg["plot_file"])
    walk.add_argument("--show-map", action="store_true", default=cfg["show_map"])
    walk.add_argument("--no-progress", dest="progress", action="store_false", default=cfg["progress"])

    sub.add_parser("glue", parents=[common], help="Print the glue table of every face")

    return parser


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    # Pre-parse to get --config
    pre = argparse.ArgumentParser(add_help=False)
    pre.add_argument("--config", type=str, default=None)
    pre_args, _ = pre.parse_known_args(argv)
    defaults = load_config(pre_args.config) if pre_args.config else None

    parser = build_parser(defaults)
    args = parser.parse_args(argv)
    if args.face_size is None:
        parser.error("--face-size required (or set face_size in --config)")
    args.parser = parser
    return args


def run_glue(args: argparse.Namespace) -> None:
    parsed = read_input(args.input, args.face_size)
    fold = fold_net(parsed.net)
    net = parsed.net
    for face in net.face_keys():
        slots = []
        for direction in sorted(net.faces[face].glue, key=Direction.as_int):
            neighbour, rotation = net.get_glue(face, direction)
            slots.append(f"{direction.as_char()}->{neighbour}/{rotation.name.lower()}")
        print(f"face={face} normal={fold.normal_of(face).name} {' '.join(slots)}")


def run_walk(args: argparse.Namespace) -> int:
    print(f"File name is '{args.input}'. Reading input...", flush=True)
    parsed = read_input(args.input, args.face_size)
    print("Gluing faces...", flush=True)
    fold_net(parsed.net)

    record = bool(args.trail_file or args.plot_file)
    walker = CubeWalker(parsed.net, parsed.start.copy(), record_trail=record)
    print(f"Initial state: {walker.marker}, num instructions: {len(parsed.instructions)}", flush=True)
    for instruction in tqdm(parsed.instructions, desc="Instructions", unit="ins", disable=not args.progress):
        walker.apply(instruction)
    print(f"Final marker: {walker.marker}", flush=True)

    if args.show_map:
        from .render import render_text

        print(render_text(parsed.net, walker.marker, walker.trail))
    if args.trail_file:
        from .render import write_trail

        print(f"Saved: {write_trail(walker.trail, args.trail_file).resolve()}")
    if args.plot_file:
        from .render import plot_trail

        print(f"Saved: {plot_trail(parsed.net, walker.trail, args.plot_file).resolve()}")

    result = walker.password()
    print(f"Password is {result}", flush=True)
    return result


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    try:
        if args.mode == "walk":
            run_walk(args)
            return
        if args.mode == "glue":
            run_glue(args)
            return
    except (ParseError, InvalidNetError) as exc:
        args.parser.error(str(exc))

    args.parser.error(f"Unsupported mode: {args.mode}")


if __name__ == "__main__":
    main()
