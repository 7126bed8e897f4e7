"""Sample Page Generator

Builds a US Letter page with three titled text sections and an optional
image in the top-right corner.

Usage:
    python app.py out/sample.pdf --image quantum-joe.jpeg --dpi 300
"""
import argparse
import logging
import sys

from blockpdf import BuildResult, DocumentBuilder, ImageBlock, TextNode, TextSection
from blockpdf.config import DEFAULT_IMAGE_DPI

SECTIONS = [
    (
        "Serendipitous Reflections",
        "In the grand tapestry of life's comedy,\n"
        "the keen eye discerns humor lurking amidst the everyday trivialities.",
        (20.0, 40.0),
    ),
    (
        "Tapestry of Time",
        "Behold! The threads of fate weaving storied pasts\n"
        "with present musings, like a fashion show designed by Cosmo Kramer.",
        (20.0, 100.0),
    ),
    (
        "Whispers of Evolution",
        "Unceasing metamorphosis defines our journey,\n"
        "linked indelibly to the reverberations of existence.",
        (20.0, 160.0),
    ),
]


def build_sample_blocks(image_path=None, dpi=DEFAULT_IMAGE_DPI):
    """Return the sample page's blocks, image first so text draws above it."""
    blocks = []
    if image_path:
        blocks.append(ImageBlock(image_path, dpi=dpi, pos=(200.0, 20.0)))

    for title, body, pos in SECTIONS:
        blocks.append(TextSection(
            nodes=[
                TextNode(title, font_size=24.0, line_height=24.0),
                TextNode(body, font_size=12.0, line_height=14.0),
            ],
            pos=pos,
        ))
    return blocks


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Generate the sample block layout PDF.")
    parser.add_argument("output", help="Where to write the PDF")
    parser.add_argument("--image", help="Image placed with its top-right corner at (200mm, 20mm)")
    parser.add_argument("--dpi", type=float, default=DEFAULT_IMAGE_DPI, help="Image resolution")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    builder = DocumentBuilder()
    result: BuildResult = builder.build(build_sample_blocks(args.image, args.dpi), args.output)
    print(result.status_message)
    return 0 if result.is_complete else 1


if __name__ == "__main__":
    sys.exit(main())
