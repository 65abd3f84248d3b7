#!/usr/bin/env python3
"""
Via Romana: Texture Exporter
==============================

Writes every cobblestone variant to disk as PNG, for checking the
procedural recipe outside the game.

Usage:
    python -m via_romana.tools.export_textures out/
    python -m via_romana.tools.export_textures out/ --size 80 --count 8
"""

import argparse
import os
from typing import List

import pygame

from via_romana.config import TILE_SIZE, TEXTURE_VARIANTS
from via_romana.gui.assets import create_cobblestone_texture


def export_cobblestone_textures(out_dir: str, size: int = TILE_SIZE,
                                count: int = TEXTURE_VARIANTS) -> List[str]:
    """Render and save each variant; returns the written paths."""
    os.makedirs(out_dir, exist_ok=True)
    paths = []
    for i in range(count):
        path = os.path.join(out_dir, f"cobblestone_{i}.png")
        pygame.image.save(create_cobblestone_texture(size, i), path)
        paths.append(path)
    return paths


def main():
    parser = argparse.ArgumentParser(description="Export Via Romana road textures")
    parser.add_argument("out_dir", help="Directory to write PNG files into")
    parser.add_argument("--size", type=int, default=TILE_SIZE,
                        help="Texture edge in pixels")
    parser.add_argument("--count", type=int, default=TEXTURE_VARIANTS,
                        help="Number of variants")
    args = parser.parse_args()

    for path in export_cobblestone_textures(args.out_dir, args.size, args.count):
        print(f"  wrote {path}")


if __name__ == "__main__":
    main()
