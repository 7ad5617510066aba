#!/usr/bin/env python3
"""Errors raised by the website blocker.

Every error that reaches the command line maps to a process exit code:
1 for bad arguments, 2 for anything that goes wrong while running a command.
"""

ARGUMENT_EXIT_CODE = 1
RUNTIME_EXIT_CODE = 2


class BlockerError(Exception):
    """Base class for errors surfaced to the user"""
    exit_code = RUNTIME_EXIT_CODE


class ArgumentError(BlockerError):
    exit_code = ARGUMENT_EXIT_CODE


class UnknownCommand(BlockerError):
    def __init__(self, command):
        super().__init__("Command not found!")
        self.command = command


class HostsFileError(BlockerError):
    pass


class HostsFileNotFound(HostsFileError):
    def __init__(self, path):
        super().__init__("Hosts file couldn't be found")
        self.path = path


class HostsPermissionDenied(HostsFileError):
    def __init__(self, path):
        super().__init__("Please run the app with elevated privileges!")
        self.path = path


class DuplicateDomain(BlockerError):
    def __init__(self, domain):
        super().__init__(f"The website with the domain {domain} already exists.")
        self.domain = domain


class DomainNotFound(BlockerError):
    def __init__(self, domain):
        super().__init__(
            f"There is no website with a domain name '{domain}' that is currently blocked."
        )
        self.domain = domain


class EntryParseError(ValueError):
    """A line could not be read as an ``<address> <domain>`` pair"""


class AddressParseError(EntryParseError):
    pass


class MissingDomainError(EntryParseError):
    pass
