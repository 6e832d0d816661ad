#!/usr/bin/env python3
"""Render every tick of one animation run to PNG files."""

import argparse
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from PIL import Image

from sprite_player import AnimatedSprite
from sprite_player.assets import load_sheet_config
from sprite_player.engine import ManualTicker
from sprite_player.renderer import FrameRenderer
from sprite_player.types import SheetDimensions


def main():
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("sheet", type=Path, help="Sprite sheet image")
    parser.add_argument("config", type=Path, help="Sprite config JSON")
    parser.add_argument("animation", help="Animation name to render")
    parser.add_argument("--fps", type=float, default=24.0)
    parser.add_argument("--tick-ms", type=float, default=1000 / 60)
    parser.add_argument("--out", type=Path, default=Path("frames"))
    args = parser.parse_args()

    ticker = ManualTicker()
    sprite = AnimatedSprite(load_sheet_config(args.config), ticker=ticker)

    with Image.open(args.sheet) as img:
        renderer = FrameRenderer(img)
        width, height = img.size

    sprite.set_dimensions(SheetDimensions(width, height))

    finished = []
    options = {
        "type": args.animation,
        "fps": args.fps,
        "onFinish": lambda: finished.append(True),
    }
    if not sprite.handle.play(options):
        sys.exit(1)

    args.out.mkdir(parents=True, exist_ok=True)
    tick = 0
    while not finished:
        renderer.render(sprite.frame_view()).save(args.out / f"frame_{tick:04d}.png")
        ticker.advance(args.tick_ms)
        tick += 1

    print(f"Saved {tick} frames to {args.out}")


if __name__ == "__main__":
    main()
