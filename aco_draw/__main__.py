"""aco-draw — Render Adobe .aco colour swatch files as a grid of solid cells.

Usage: aco-draw <command> <file.aco> [options]

Colour spaces are auto-discovered from aco_draw/spaces/.
Each space module's docstring is its documentation.
Run `aco-draw spaces <name>` for full module docs.

Environment variables / .env loading:
  OS environment variables are always used first.
  If a variable is not set, aco-draw looks for a .env file starting from
  the current directory and walking up, stopping at the nearest .git boundary.
  Use --env-file to override the .env location explicitly.
"""

import argparse
import importlib
import sys

from aco_draw import registry
from aco_draw.core.aco_parser import parse_aco_file
from aco_draw.core.env import CANVAS_VAR, CELL_VAR, DEFAULT_CANVAS, DEFAULT_CELL, load_env, size_setting
from aco_draw.core.errors import AcoError
from aco_draw.core.render import parse_size, save_palette_image
from aco_draw.core.report import format_json, format_text
from aco_draw.core.types import GridLayout


def _load_space_module(name: str) -> object:
    """Load the raw module for a colour space (for docstring access)."""
    return importlib.import_module(f'aco_draw.spaces.{name.replace("-", "_")}')


def _size_arg(text: str) -> tuple[int, int]:
    try:
        return parse_size(text)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from e


def _build_parser() -> argparse.ArgumentParser:
    epilog = (
        'Examples:\n'
        '  aco-draw draw swatches.aco\n'
        '  aco-draw draw swatches.aco --out grid.png --canvas 16x8 --cell 24x24\n'
        '  aco-draw info swatches.aco --json\n'
        '  aco-draw spaces lab\n'
        '\n'
        'Defaults (set in .env or environment):\n'
        f'  {CANVAS_VAR}=25x12   grid size, <columns>x<rows>\n'
        f'  {CELL_VAR}=10x10     cell size, <width>x<height>\n'
    )
    parser = argparse.ArgumentParser(
        prog='aco-draw',
        description='Render Adobe .aco colour swatch files as a grid of solid cells.',
        epilog=epilog,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    # Global --env-file option before subcommand
    parser.add_argument(
        '--env-file',
        metavar='PATH',
        default=None,
        help='Path to .env file (default: walk up from cwd to .git boundary)',
    )
    sub = parser.add_subparsers(dest='command', help='Command to run')

    draw = sub.add_parser('draw', help='Decode a .aco file and save its colours as an image grid')
    draw.add_argument('file', help='Path to .aco swatch file')
    draw.add_argument('-o', '--out', help='Output image path (default: <file>.png)')
    draw.add_argument(
        '-c',
        '--canvas',
        type=_size_arg,
        default=None,
        metavar='COLSxROWS',
        help=f'Grid size in cells (default: ${CANVAS_VAR} or {DEFAULT_CANVAS[0]}x{DEFAULT_CANVAS[1]})',
    )
    draw.add_argument(
        '-s',
        '--cell',
        type=_size_arg,
        default=None,
        metavar='WxH',
        help=f'Cell size in pixels (default: ${CELL_VAR} or {DEFAULT_CELL[0]}x{DEFAULT_CELL[1]})',
    )
    draw.add_argument('-q', '--quiet', action='store_true', help='Suppress progress output')

    info = sub.add_parser('info', help='Decode a .aco file and list its colours')
    info.add_argument('file', help='Path to .aco swatch file')
    info.add_argument('-j', '--json', action='store_true', help='Output JSON instead of text')

    # `spaces` subcommand — lists colour spaces or prints one module docstring
    spaces = sub.add_parser('spaces', help='List supported colour spaces, or print docs for one')
    spaces.add_argument('name', nargs='?', help='Colour space name')

    return parser


def _print_spaces(name: str | None) -> None:
    """Print the colour space table, or the full module docstring for one space."""
    spaces = registry.all_spaces()

    if name is None:
        print('Supported colour spaces:\n')
        for space_id, space in sorted(spaces.items()):
            print(f'  {space_id:>2}  {space.name:<10} {space.help}')
        print('\nRun: aco-draw spaces <name> for full docs.')
        return

    try:
        space = registry.by_name(name)
    except KeyError:
        print(f'Unknown colour space: {name}', file=sys.stderr)
        print(f'Available: {", ".join(sorted(s.name for s in spaces.values()))}', file=sys.stderr)
        sys.exit(1)

    mod = _load_space_module(space.name)
    doc = (mod.__doc__ or '').strip()
    if not doc:
        print(f'(No module docs for {name!r})')
        return
    print(doc)


def _status(args: argparse.Namespace, message: str) -> None:
    if not getattr(args, 'quiet', False):
        print(message, file=sys.stderr)


def _draw(args: argparse.Namespace) -> None:
    columns, rows = args.canvas or size_setting(CANVAS_VAR, DEFAULT_CANVAS)
    cell_width, cell_height = args.cell or size_setting(CELL_VAR, DEFAULT_CELL)
    layout = GridLayout(columns=columns, rows=rows, cell_width=cell_width, cell_height=cell_height)
    out = args.out or args.file + '.png'

    _status(args, '=== Arguments ===')
    _status(args, f'Input File:\t{args.file}')
    _status(args, f'Output File:\t{out}')
    _status(args, f'Canvas Size:\t(columns)x(rows) = {columns}x{rows}')
    _status(args, f'Cell Size:\t(width)x(height) = {cell_width}x{cell_height}')
    _status(args, '')

    _status(args, f'Reading colours from {args.file}...')
    palette = parse_aco_file(args.file)
    _status(args, f' * Read {len(palette)} colours')
    if len(palette) > layout.cell_count:
        _status(args, f' * Grid holds {layout.cell_count} cells; {len(palette) - layout.cell_count} colours not drawn')

    _status(args, 'Creating image...')
    save_palette_image(palette, layout, out)
    _status(args, f'Saved {out}')


def _info(args: argparse.Namespace) -> None:
    palette = parse_aco_file(args.file)
    if args.json:
        print(format_json(palette, path=args.file))
    else:
        print(format_text(palette, path=args.file))


def main() -> None:
    parser = _build_parser()
    args = parser.parse_args()

    # Load .env before anything else — OS env vars always win
    env_path = load_env(env_file=getattr(args, 'env_file', None))
    if env_path and not getattr(args, 'quiet', False):
        print(f'aco-draw: loaded {env_path}', file=sys.stderr)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    if args.command == 'spaces':
        _print_spaces(args.name)
        return

    try:
        if args.command == 'draw':
            _draw(args)
        elif args.command == 'info':
            _info(args)
    except (AcoError, OSError, ValueError) as e:
        print(f'Error: {e}', file=sys.stderr)
        sys.exit(1)


if __name__ == '__main__':
    main()
