#!/usr/bin/env python3
import sys
import argparse
import logging

from website_blocker.core.blocker import WebsiteBlocker
from website_blocker.core.entry import parse_address
from website_blocker.core.errors import AddressParseError, ArgumentError, BlockerError
from website_blocker.file_handlers.hosts_file import HostsFileHandler

LOG_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'


class ArgumentParser(argparse.ArgumentParser):
    def error(self, message):
        raise ArgumentError(message)


def build_parser():
    parser = ArgumentParser(description='Redirect websites through the hosts file')
    parser.add_argument('command', nargs='?', help='One of: list, block, unblock')
    parser.add_argument('domain', nargs='?', help='Domain to block or unblock')
    parser.add_argument('address', nargs='?', help='IPv4 address the domain is redirected to')
    parser.add_argument('-v', '--verbose', action='count', default=0,
                        help='Log progress to stderr (-vv for debug output)')
    parser.add_argument('--log-file', help='Also write the log to this file')
    return parser


def parse_arguments(argv=None):
    """Parse and validate command line arguments.

    The domain is required for every command except ``list``, the address
    only for ``block``. An address, when given, must be a valid IPv4 address.
    Arguments past the address are ignored. A domain starting with ``-`` has
    to follow ``--``.
    """
    args, extra = build_parser().parse_known_args(argv)
    if extra:
        logging.debug(f"Ignoring extra arguments: {extra}")

    if args.command is None:
        raise ArgumentError("No command was supplied")

    if args.domain is None and args.command != "list":
        raise ArgumentError("No domain name is provided!")

    # hosts lines are split on whitespace
    if args.domain is not None and args.domain.split() != [args.domain]:
        raise ArgumentError(f"Invalid domain name: {args.domain!r}")

    if args.address is not None:
        try:
            args.address = parse_address(args.address)
        except AddressParseError:
            raise ArgumentError("Invalid IP address") from None
    elif args.command == "block":
        raise ArgumentError("No Redirect IP is provided!")

    return args


def setup_logging(verbose=0, log_file=None):
    if verbose >= 2:
        level = logging.DEBUG
    elif verbose == 1:
        level = logging.INFO
    else:
        level = logging.WARNING

    handlers = [logging.StreamHandler()]
    if log_file:
        try:
            handlers.append(logging.FileHandler(log_file))
        except OSError as e:
            raise ArgumentError(f"Cannot open log file {log_file}: {e.strerror}") from e

    logging.basicConfig(level=level, format=LOG_FORMAT, handlers=handlers)


def main(argv=None, hosts_path=None):
    """Main entry point, returns the process exit code"""
    try:
        args = parse_arguments(argv)
        setup_logging(args.verbose, args.log_file)
    except ArgumentError as e:
        print(f"Problem parsing arguments: {e}", file=sys.stderr)
        return e.exit_code

    blocker = WebsiteBlocker(HostsFileHandler(hosts_path))
    try:
        blocker.run(args.command, domain=args.domain, redirect_address=args.address)
    except BlockerError as e:
        logging.debug(f"{args.command} failed: {e!r}")
        print(f"Application Error: {e}", file=sys.stderr)
        return e.exit_code
    return 0


if __name__ == "__main__":
    sys.exit(main())
