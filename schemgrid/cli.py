#!/usr/bin/env python3
"""
SchemGrid CLI

Command-line interface for rendering circuit layouts as text schematics.

Usage:
    schemgrid render <circuit.yaml> [options]
    schemgrid glyphs
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional


def setup_logging(verbose: bool):
    """Send log output to stderr so rendered text stays clean on stdout."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )


def cmd_render(args):
    """Render a circuit file."""
    from .circuit.loader import load_circuit
    from .config import load_render_options
    from .render.passes import render_circuit

    circuit_path = Path(args.circuit)
    if not circuit_path.exists():
        print(f"Error: Circuit file not found: {circuit_path}", file=sys.stderr)
        return 1

    try:
        options = load_render_options(args.config).merged(
            grid_scale_x=args.scale_x,
            grid_scale_y=args.scale_y,
            glyph_set=args.glyphs,
            show_axis_labels=True if args.axis else None,
            chip_labels=False if args.no_chip_labels else None,
        )
        circuit = load_circuit(circuit_path)
        text = render_circuit(circuit, options).to_string()
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.output:
        output_path = Path(args.output)
        output_path.write_text(text + "\n", encoding="utf-8")
        print(f"Schematic saved to: {output_path}")
    else:
        print(text)

    return 0


def cmd_glyphs(args):
    """List available glyph sets."""
    from .render.glyphs import get_glyph_set, list_glyph_sets

    for name in list_glyph_sets():
        glyphs = get_glyph_set(name)
        sample = "".join([
            glyphs.top_left, glyphs.horizontal, glyphs.top_right,
            glyphs.left_pin_wall, glyphs.junction,
        ])
        print(f"  {name:<10} {sample}  {glyphs.description}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    from . import __version__

    parser = argparse.ArgumentParser(
        prog="schemgrid",
        description="SchemGrid - Text Schematic Renderer",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  schemgrid render circuit.yaml
  schemgrid render circuit.json --scale-x 2 --scale-y 5 --axis
  schemgrid render circuit.yaml --glyphs ascii -o schematic.txt
  schemgrid render circuit.yaml --config render.yaml
        """,
    )

    parser.add_argument('--version', action='version', version=f'schemgrid {__version__}')

    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    # Render command
    render_parser = subparsers.add_parser('render', help='Render a circuit file')
    render_parser.add_argument('circuit', help='Path to circuit file (.yaml, .yml or .json)')
    render_parser.add_argument('-o', '--output', help='Output file path')
    render_parser.add_argument('--config', help='YAML file with render options')
    render_parser.add_argument('--scale-x', type=float, help='Cells per unit horizontally (default: 1)')
    render_parser.add_argument('--scale-y', type=float, help='Cells per unit vertically (default: 1)')
    render_parser.add_argument('--axis', action='store_true', help='Show axis labels')
    render_parser.add_argument('--no-chip-labels', action='store_true',
                               help='Do not draw chip identifiers above chips')
    render_parser.add_argument('--glyphs', help='Glyph set (default: unicode)')
    render_parser.add_argument('-v', '--verbose', action='store_true', help='Verbose output')

    # Glyphs command
    subparsers.add_parser('glyphs', help='List available glyph sets')

    return parser


def main(argv: Optional[List[str]] = None):
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    setup_logging(getattr(args, 'verbose', False))

    # Dispatch command
    commands = {
        'render': cmd_render,
        'glyphs': cmd_glyphs,
    }

    return commands[args.command](args)


if __name__ == '__main__':
    sys.exit(main())
