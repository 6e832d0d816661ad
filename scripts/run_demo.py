#!/usr/bin/env python3
"""Run a sprite playback demo against a generated sheet."""

import asyncio
import logging
import sys
import tempfile
from pathlib import Path

# Add src to path for running directly
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from sprite_player import AnimatedSprite
from sprite_player.assets import generate_grid_sheet
from sprite_player.engine import AsyncioTicker
from sprite_player.types import PlayOptions, SheetConfig


def build_config() -> SheetConfig:
    """Four walking directions on a 3x4 sheet."""
    return SheetConfig.from_dict(
        {
            "columns": 3,
            "rows": 4,
            "animations": {
                "down": {"row": 0, "startFrame": 0, "endFrame": 2},
                "left": {"row": 1, "startFrame": 0, "endFrame": 2},
                "right": {"row": 2, "startFrame": 0, "endFrame": 2},
                "up": {"row": 3, "startFrame": 0, "endFrame": 2},
                "blink": {"row": 0, "startFrame": 1, "endFrame": 1},
            },
        }
    )


async def run_demo():
    """Play each direction once, then loop one and stop it."""
    print("Sprite Player Demo")
    print("=" * 60)

    with tempfile.TemporaryDirectory() as tmp:
        sheet_path = Path(tmp) / "walk.png"
        generate_grid_sheet(3, 4, 48, 48, output_path=sheet_path)

        ticker = AsyncioTicker(target_fps=60)
        sprite = AnimatedSprite(build_config(), ticker=ticker)
        sprite.diagnostics.subscribe(
            lambda d: print(f"  [{d.severity.value}] {d.message}")
        )

        ticker.start()
        await sprite.load(sheet_path)
        print(f"Sheet: {sprite.dimensions.width:.0f}x{sprite.dimensions.height:.0f}")
        print(f"Curves: {', '.join(sprite.curves.names)}")

        for direction in ("down", "left", "right", "up"):
            done = asyncio.Event()
            sprite.handle.play(PlayOptions(direction, fps=12, on_finish=done.set))
            seen = []
            while not done.is_set():
                offset = sprite.offset().as_tuple()
                if not seen or seen[-1] != offset:
                    seen.append(offset)
                await asyncio.sleep(0.01)
            print(f"\n[{direction}] offsets: {seen}")

        print("\nPlaying an invalid animation:")
        sprite.handle.play({"type": "blink"})

        print("\nLooping 'down' for half a second...")
        sprite.handle.play({"type": "down", "fps": 12, "loop": True})
        await asyncio.sleep(0.5)

        stopped = asyncio.Event()
        sprite.handle.stop(stopped.set)
        await stopped.wait()
        print(f"Stopped at progress {sprite.controller.progress:.2f}")

        sprite.dispose()
        await ticker.close()

    print("\n" + "=" * 60)
    print("Demo Complete!")


def main():
    """Main entry point."""
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    asyncio.run(run_demo())


if __name__ == "__main__":
    main()
