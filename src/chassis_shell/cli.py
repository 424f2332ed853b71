import argparse
import curses

from chassis_shell import __version__
from chassis_shell.app import run_shell
from chassis_shell.config import load_config


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Interactive chassis management shell")
    p.add_argument("-v", "--version", action="version",
                   version=f"%(prog)s {__version__}")
    p.add_argument("-c", "--config", default="default",
                   help="Configuration name or path (searches ~/.chassis-shell/configs/, ./configs/, or use full path)")
    p.add_argument("-n", "--history-size", type=int, default=None,
                   help="Number of commands kept for recall - overrides config")
    p.add_argument("--prompt", default=None,
                   help="Prompt text - overrides config")
    p.add_argument("-d", "--debug", action="store_true", default=False,
                   help="Enable debug logging to chassis_*.log files")
    return p


def main(argv=None):
    p = build_parser()
    args = p.parse_args(argv)

    try:
        config = load_config(args.config)
    except (FileNotFoundError, ValueError) as e:
        p.error(str(e))

    # CLI arguments override config values
    if args.history_size is not None:
        if args.history_size <= 0:
            p.error("--history-size must be positive")
        config.history.size = args.history_size
    if args.prompt is not None:
        config.prompt = args.prompt

    curses.wrapper(run_shell, config, debug=args.debug)
