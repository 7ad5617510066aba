#!/usr/bin/env python3
import logging
import platform

from website_blocker.core.document import HostsDocument
from website_blocker.core.errors import HostsFileError, HostsFileNotFound, HostsPermissionDenied

HOSTS_PATHS = {
    "darwin": "/private/etc/hosts",
    "linux": "/etc/hosts",
    "windows": "C:\\Windows\\System32\\Drivers\\etc\\hosts",
}


def default_hosts_path(system=None):
    """Return the hosts file path for the given (or current) platform"""
    system = (system or platform.system()).lower()
    return HOSTS_PATHS.get(system, HOSTS_PATHS["linux"])


class HostsFileHandler:
    def __init__(self, hosts_path=None):
        self.hosts_path = hosts_path or default_hosts_path()

    def read_hosts(self):
        """Read the whole hosts file as text"""
        try:
            with open(self.hosts_path, 'r', encoding='utf-8', newline='') as f:
                content = f.read()
        except FileNotFoundError:
            raise HostsFileNotFound(self.hosts_path) from None
        except PermissionError:
            raise HostsPermissionDenied(self.hosts_path) from None
        except (OSError, UnicodeDecodeError) as e:
            logging.error(f"Failed to read hosts file {self.hosts_path}: {e}")
            raise HostsFileError("Failed to read hosts file.") from e
        logging.info(f"Read {len(content)} characters from {self.hosts_path}")
        return content

    def write_hosts(self, content):
        """Overwrite the hosts file with the given text"""
        try:
            with open(self.hosts_path, 'w', encoding='utf-8', newline='') as f:
                f.write(content)
        except FileNotFoundError:
            raise HostsFileNotFound(self.hosts_path) from None
        except PermissionError:
            raise HostsPermissionDenied(self.hosts_path) from None
        except OSError as e:
            logging.error(f"Failed to write hosts file {self.hosts_path}: {e}")
            raise HostsFileError("Failed to write hosts file.") from e
        logging.info(f"Wrote {len(content)} characters to {self.hosts_path}")

    def load(self):
        return HostsDocument.parse(self.read_hosts())

    def save(self, document):
        self.write_hosts(document.render())
