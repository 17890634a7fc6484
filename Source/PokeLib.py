"""
Launcher for PokéLib.

Starts the Tk browser by default; `--cli` forwards the remaining arguments to
the headless `pokelib.cli`.
"""

import argparse
import sys


if __name__ == '__main__':
    parser = argparse.ArgumentParser(
        description="PokéLib - browse Pokémon species and their forms",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python PokeLib.py                          # Launch GUI (default)
  python PokeLib.py --cli --list --search chu
  python PokeLib.py --cli --show pikachu
        """
    )
    parser.add_argument('--cli', action='store_true',
                        help='Run headless instead of launching the GUI')
    args, rest = parser.parse_known_args()

    if args.cli:
        from pokelib.cli import main as run_cli
        sys.exit(run_cli(rest))
    else:
        from gui import run as run_gui
        sys.exit(run_gui())
