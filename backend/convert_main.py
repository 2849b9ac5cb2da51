#!/usr/bin/env python3
import argparse
import logging
import sys
from typing import List, Optional

from helper import Environment
from lirc_config import ConfigReader, ConfigReadError
from remote_set import DocumentBuilder

logger = logging.getLogger("convert_main")


def build_arg_parser(env: Environment) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="convert_main.py",
        description="Parse lircd.conf files and print the remotes as a JSON document.",
    )
    parser.add_argument("path", help="lircd.conf file or directory of config files")
    parser.add_argument("--encoding", default=env.lirc_config_encoding, help="character set of the config files")
    parser.add_argument(
        "--accept-lirccode",
        action="store_true",
        default=env.accept_lirc_code,
        help="keep remotes without timing information",
    )
    parser.add_argument(
        "--no-parameters",
        dest="generate_parameters",
        action="store_false",
        default=env.generate_parameters,
        help="leave protocol parameters out of the document",
    )
    parser.add_argument(
        "--alternating-signs",
        action="store_true",
        default=env.alternating_signs,
        help="render raw spaces as negative durations",
    )
    parser.add_argument("--indent", type=int, default=2, help="JSON indentation")
    return parser


def run(argv: Optional[List[str]] = None) -> int:
    env = Environment()
    args = build_arg_parser(env).parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if env.debug else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    reader = ConfigReader(encoding=args.encoding, accept_lirc_code=args.accept_lirccode)
    try:
        document = reader.parse_config(
            args.path,
            DocumentBuilder(),
            generate_parameters=args.generate_parameters,
            alternating_signs=args.alternating_signs,
        )
    except ConfigReadError as exc:
        logger.error(exc.message)
        return 1

    sys.stdout.write(document.model_dump_json(indent=args.indent))
    sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(run())
