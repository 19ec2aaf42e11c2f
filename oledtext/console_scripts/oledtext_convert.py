#!/usr/bin/env python3

import argparse


def main():
    from oledtext.main import main

    parser = argparse.ArgumentParser(
        description="Convert UTF-8 text to the single byte character set of the display"
    )
    parser.add_argument(
        "-c",
        "--config",
        type=str,
        default=None,
        help="specify path to an alternative configuration file",
    )
    parser.add_argument(
        "-f",
        "--file",
        type=argparse.FileType("rb"),
        default=None,
        help="Read text from file. Default stdin",
    )
    parser.add_argument(
        "--hex", action="store_true", help="Print converted bytes as hex"
    )
    parser.add_argument(
        "--debug", action="store_true", help="Enable debug output"
    )

    args = parser.parse_args()

    main(args)


if __name__ == "__main__":
    from oledtext.lib import help

    try:
        main()
    except ImportError as error:
        help.import_error_help(error)
