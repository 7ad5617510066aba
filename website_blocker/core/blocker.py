#!/usr/bin/env python3
import logging

from website_blocker.core.entry import ManagedEntry
from website_blocker.core.errors import UnknownCommand
from website_blocker.file_handlers.hosts_file import HostsFileHandler

NO_WEBSITES_MESSAGE = "No Websites were found!"


class WebsiteBlocker:
    def __init__(self, hosts_handler=None):
        self.hosts_handler = hosts_handler or HostsFileHandler()

    def list_blocked(self, document):
        """Return the lines shown by the ``list`` command"""
        if not len(document):
            return [NO_WEBSITES_MESSAGE]
        return [str(entry) for entry in document]

    def block(self, document, domain, redirect_address):
        document.add(ManagedEntry(redirect_address=redirect_address, domain=domain))
        self.hosts_handler.save(document)
        logging.info(f"Blocked {domain} by redirecting it to {redirect_address}")

    def unblock(self, document, domain):
        entry = document.remove(domain)
        self.hosts_handler.save(document)
        logging.info(f"Unblocked {entry.domain} (was redirected to {entry.redirect_address})")

    def run(self, command, domain=None, redirect_address=None, out=print):
        """Run one command against the hosts file.

        The file is read and parsed first, then the command is applied and,
        for ``block`` and ``unblock``, the whole file is written back.
        """
        document = self.hosts_handler.load()

        if command == "list":
            for line in self.list_blocked(document):
                out(line)
            return

        if command == "block":
            self.block(document, domain, redirect_address)
            return

        if command == "unblock":
            self.unblock(document, domain)
            return

        raise UnknownCommand(command)
