# shell.py

import argparse
from termline import Interface
from termline.config import SessionConfig

def main():
    parser = argparse.ArgumentParser(description='Termline Shell')
    parser.add_argument('--enable-logging',
        action='store_true',
        help='Enable debug logging')
    parser.add_argument('--log-file',
        help='Log file path (use "-" for stdout)')
    parser.add_argument('--scrollback',
        type=int,
        help='Number of output lines kept in the scrollback')
    parser.add_argument('--max-suggestions',
        type=int,
        help='Maximum number of completions shown at once')

    args = parser.parse_args()

    config = SessionConfig.from_env(
        scrollback_capacity=args.scrollback,
        max_suggestions=args.max_suggestions,
    )

    shell = Interface(
        logging_enabled=args.enable_logging,
        log_file=args.log_file,
        config=config
    )
    shell.start()

if __name__ == "__main__":
    main()
