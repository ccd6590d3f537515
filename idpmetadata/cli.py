# -*- coding: utf-8 -*-
import argparse
import json
import sys

from idpmetadata import config, log
from idpmetadata.exceptions import BadConfiguration, MetadataParseError
from idpmetadata.loaders import load_idps

logger = log.logger


def build_arg_parser():
    parser = argparse.ArgumentParser(
        description='Load the SPID IdP metadata and print the whitelisted IdPs.'
    )
    parser.add_argument(
        '-c', dest='config', help='Path to configuration file.',
        default='./conf/config.yaml'
    )
    parser.add_argument(
        '-ct', dest='configuration_type',
        help='Configuration type [yaml|json]', default='yaml',
        choices=['yaml', 'json'],
    )
    return parser


def dump_idps(idps):
    return json.dumps(
        {key: descriptor._asdict() for key, descriptor in idps.items()},
        indent=2, sort_keys=True,
    )


def main(argv=None):
    args = build_arg_parser().parse_args(argv)
    try:
        conf = config.load(args.config, args.configuration_type)
    except BadConfiguration as e:
        log.setup_logging()
        logger.error(e)
        return 1
    log.setup_logging(conf.log_file)
    try:
        idps = load_idps(conf)
    except MetadataParseError as e:
        logger.error('Cannot parse the IdP metadata: %s', e)
        return 1
    print(dump_idps(idps))
    return 0


if __name__ == '__main__':
    sys.exit(main())
