"""
Sketch Studio
Photo to pencil, ink, line-art and coloring-page sketches
"""

import argparse
import logging
import sys
from pathlib import Path

from models import ExportFormat, SketchError, SketchMode, SketchSettings

logger = logging.getLogger("sketch_studio")


def _parse_args(argv=None) -> argparse.Namespace:
    defaults = SketchSettings()
    parser = argparse.ArgumentParser(description="Convert a photo into a sketch")
    parser.add_argument("input", nargs="?", help="Input image path (PNG, JPG, ...)")
    parser.add_argument("--synthetic", action="store_true", help="Use a generated test image")
    parser.add_argument("-o", "--output", help="Output path (defaults to the format's file name)")
    parser.add_argument(
        "--mode",
        choices=[m.value for m in SketchMode],
        default=defaults.mode.value,
        help="Sketch style",
    )
    parser.add_argument(
        "--format",
        choices=[f.value for f in ExportFormat],
        default=ExportFormat.PNG.value,
        help="Export format",
    )
    parser.add_argument("--line-thickness", type=int, default=defaults.line_thickness, help="1..5")
    parser.add_argument("--edge-intensity", type=int, default=defaults.edge_intensity, help="10..100")
    parser.add_argument("--contrast", type=int, default=defaults.contrast, help="0..100")
    parser.add_argument("--noise-reduction", type=int, default=defaults.noise_reduction, help="0..100")
    parser.add_argument("--smoothing", type=int, default=defaults.smoothing, help="0..100")
    parser.add_argument("--brightness", type=int, default=defaults.brightness, help="0..100")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    args = parser.parse_args(argv)
    if not args.input and not args.synthetic:
        parser.error("an input image or --synthetic is required")
    return args


def run_cli(argv=None) -> int:
    """Load, sketch, export and save one image."""
    from engines.pipeline import process_sketch
    from engines.export_transforms import apply_export
    from models.pixel_buffer import PixelBuffer
    from utils.image_io import load_image, save_export
    from utils.scaling import cap_source_size
    from utils.test_images import generate_portrait_disc

    args = _parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        settings = SketchSettings.from_dict({
            "mode": args.mode,
            "line_thickness": args.line_thickness,
            "edge_intensity": args.edge_intensity,
            "contrast": args.contrast,
            "noise_reduction": args.noise_reduction,
            "smoothing": args.smoothing,
            "brightness": args.brightness,
        })
        fmt = ExportFormat(args.format)

        if args.synthetic:
            print("Generating test image...")
            image = generate_portrait_disc(512)
        else:
            print(f"Loading: {args.input}")
            image = load_image(args.input)

        source = PixelBuffer.from_array(cap_source_size(image))
        print(f"Image: {source.width}x{source.height}")
        print(f"Mode:  {settings.mode.value}")

        result = process_sketch(source, settings)
        exported = apply_export(result.processed, fmt)

        output = args.output or fmt.default_filename
        save_export(exported, fmt, output)
    except SketchError as exc:
        logger.error("Sketch failed: %s", exc)
        return 1
    except ValueError as exc:
        logger.error("Error: %s", exc)
        return 1
    except OSError as exc:
        logger.error("I/O error: %s", exc)
        return 2

    print("\n=== Results ===")
    for stage, ms in result.stage_times_ms.items():
        print(f"{stage:<11}{ms:8.2f} ms")
    print(f"Total:     {result.total_time_ms:8.2f} ms")
    print(f"Ink:       {result.ink_coverage * 100:.1f}% of pixels")
    print(f"\nSaved: {Path(output)} ({exported.width}x{exported.height}, {fmt.value})")
    return 0


def main():
    sys.exit(run_cli())


if __name__ == '__main__':
    main()
