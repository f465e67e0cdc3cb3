"""
RectScan CLI - Main entry point.

Searches a JSON scene file for overlapping objects and prints the report
as JSON on stdout. Structured logs go to stderr.
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

import cv2

from rectscan_core.rendering import IntersectionVisualizer
from rectscan_io import (
    IntersectionPipeline,
    IntersectionReport,
    LogEvent,
    RectScanError,
    StructuredLogger,
    create_logger,
)

from .config import VALID_LOG_LEVELS, AppConfig, RenderConfig


def build_visualizer(config: RenderConfig) -> IntersectionVisualizer:
    """Create a visualizer styled by the render configuration."""
    return IntersectionVisualizer(
        area_color=config.color("area_color"),
        intersection_color=config.color("intersection_color"),
        text_color=config.color("text_color"),
        background_color=config.color("background_color"),
        scale=config.scale,
        padding=config.padding,
        max_canvas_size=config.max_canvas_size,
        thickness=config.thickness,
        opacity=config.opacity,
    )


def render_report(
    report: IntersectionReport,
    output_path: Path,
    config: RenderConfig,
) -> None:
    """
    Draw the report and write it as an image.

    Args:
        report: Report to draw
        output_path: Image path; the extension selects the format
        config: Render style

    Raises:
        OSError: If the image cannot be encoded or written
    """
    visualizer = build_visualizer(config)
    labels = [area.name for area in report.areas] if config.draw_labels else None

    frame = visualizer.render(
        areas=[area.area for area in report.areas],
        intersections=[hit.area for hit in report.intersections],
        labels=labels,
    )

    try:
        written = cv2.imwrite(str(output_path), frame)
    except cv2.error as e:
        raise OSError(f"Could not encode image {output_path}: {e}") from e

    if not written:
        raise OSError(f"Could not write image {output_path}")


def load_config(config_path: Optional[str], logger: StructuredLogger) -> AppConfig:
    """Load the YAML config if one was given, otherwise defaults."""
    if config_path is None:
        return AppConfig()

    try:
        config = AppConfig.from_yaml(config_path)
    except (FileNotFoundError, ValueError) as e:
        logger.error(
            event=LogEvent.CONFIG_ERROR,
            message="Configuration could not be loaded",
            metadata={'path': config_path},
            exc_info=e,
        )
        raise

    logger.info(
        event=LogEvent.CONFIG_LOADED,
        message="Configuration loaded",
        metadata={'path': config_path},
    )
    return config


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rectscan",
        description="Search a JSON scene file for intersecting objects",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Print areas and intersections as JSON
  rectscan scene.json

  # Also draw the scene to an image
  rectscan scene.json --render scene.png

  # Use a config file and verbose logs
  rectscan scene.json --config rectscan.yaml --log-level INFO
"""
    )

    parser.add_argument(
        "input_file",
        help="Input file (*.json)"
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Path to YAML config (default: built-in defaults)"
    )
    parser.add_argument(
        "--render",
        default=None,
        metavar="IMAGE",
        help="Write a drawing of areas and intersections to IMAGE (e.g. scene.png)"
    )
    parser.add_argument(
        "--log-level",
        choices=VALID_LOG_LEVELS,
        default=None,
        help="Override the configured logging level"
    )

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Main CLI entry point."""
    args = build_parser().parse_args(argv)

    logger = create_logger("cli")

    try:
        config = load_config(args.config, logger)
        logger.set_level(
            getattr(logging, args.log_level)
            if args.log_level
            else config.logging.level_value
        )

        pipeline = IntersectionPipeline(logger=logger)
        report = pipeline.run(args.input_file)

        print(json.dumps(report.to_dict(), indent=config.output.indent or None))
        logger.info(
            event=LogEvent.REPORT_WRITTEN,
            message="Report written to stdout",
            metadata={
                'areas': len(report.areas),
                'intersections': report.intersection_count,
            },
        )

        if args.render:
            output_path = Path(args.render)
            try:
                render_report(report, output_path, config.render)
            except OSError as e:
                logger.error(
                    event=LogEvent.RENDER_ERROR,
                    message="Rendered image could not be saved",
                    metadata={'path': str(output_path)},
                    exc_info=e,
                )
                raise
            logger.info(
                event=LogEvent.RENDER_SAVED,
                message="Rendered image saved",
                metadata={'path': str(output_path)},
            )

    except (RectScanError, FileNotFoundError, ValueError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == '__main__':
    main()
