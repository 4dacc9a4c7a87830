#!/usr/bin/env python3
# -*- coding: utf-8 -*-

import sys
import argparse

from palette_extractor.config import load_config
from palette_extractor.log import configure_logging
from palette_extractor.pipeline import process_image

def parse_args(argv=None):
    ap = argparse.ArgumentParser(description="Extract the dominant color palette of an image.")
    ap.add_argument("image", help="path to the input image")
    ap.add_argument("-k", "--colors", type=int, default=None, help="number of colors (default: config, 6)")
    ap.add_argument("-c", "--config", default=None, help="JSON config overriding the defaults")
    ap.add_argument("-o", "--out-dir", default="out", help="output folder for palette.json / palette_preview.png")
    ap.add_argument("--seed", type=int, default=None, help="random seed for reproducible palettes")
    ap.add_argument("--no-preview", action="store_true", help="do not write palette_preview.png")
    ap.add_argument("--log-level", default=None, help="DEBUG, INFO, WARNING...")
    return ap.parse_args(argv)

def main(argv=None):
    args = parse_args(argv)
    try:
        cfg = load_config(args.config)
        configure_logging(args.log_level or cfg["logging"]["level"])
        process_image(
            args.image, cfg,
            out_dir=args.out_dir,
            color_count=args.colors,
            seed=args.seed,
            save_preview=not args.no_preview
        )
    except (FileNotFoundError, ValueError) as e:
        print(f"error: palette extraction failed: {e}", file=sys.stderr)
        return 1
    return 0

if __name__ == "__main__":
    sys.exit(main())
