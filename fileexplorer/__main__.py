"""
Entry point for File Explorer.
"""
import argparse
import curses
import locale
import logging
import os
import traceback
from dataclasses import replace

from .app import FileExplorerApp
from .constants import APP_NAME, APP_VERSION
from .core.config import load_config

LOGGER = logging.getLogger(__name__)

# Ensure UTF-8
try:
    locale.setlocale(locale.LC_ALL, '')
except locale.Error:
    pass


def parse_args(argv=None):
    parser = argparse.ArgumentParser(prog='fileexplorer', description=f'{APP_NAME} - terminal file browser.')
    parser.add_argument('path', nargs='?', help='Directory to open (default: current directory).')
    parser.add_argument('--config', help='Path to config.toml.')
    parser.add_argument('--show-hidden', action='store_true', default=None, help='List dotfiles.')
    parser.add_argument('--debug', action='store_true', help='Enable debug logging.')
    parser.add_argument('--version', action='version', version=f'%(prog)s {APP_VERSION}')
    return parser.parse_args(argv)


def configure_logging(config, debug=False):
    """Set up logging from config; stays silent unless asked for output."""
    debug = debug or bool(os.environ.get('FILEEXPLORER_DEBUG'))
    if not debug and not config.log_file:
        return
    level = logging.DEBUG if debug else getattr(logging, config.log_level, logging.WARNING)
    kwargs = {'level': level, 'format': '[%(levelname)s] %(name)s: %(message)s'}
    if config.log_file:
        kwargs['filename'] = os.path.expanduser(config.log_file)
    logging.basicConfig(**kwargs)


def run(argv=None):
    """Run File Explorer and return process exit code."""
    args = parse_args(argv)
    config = load_config(args.config)
    if args.show_hidden is not None:
        config = replace(config, show_hidden=True)
    configure_logging(config, debug=args.debug)

    def main(stdscr):
        FileExplorerApp(stdscr, config=config, start_path=args.path).run()

    try:
        curses.wrapper(main)
        return 0
    except KeyboardInterrupt:
        return 130
    except Exception as e:
        # Restore the terminal before reporting any crash.
        try:
            curses.endwin()
        except curses.error:
            pass
        LOGGER.exception('Unhandled error')
        print(f'\nError: {e}')
        traceback.print_exc()
        return 1


def main_cli():
    """Console script entrypoint."""
    return run()


if __name__ == '__main__':
    raise SystemExit(main_cli())
