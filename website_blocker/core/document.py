#!/usr/bin/env python3
"""In-memory model of a hosts file.

A hosts file is split into two parts: the lines this tool manages and
everything else. A managed entry takes two consecutive lines, the marker
``#!wb`` followed by ``<ipv4> <domain>``. All other lines, including a marker
whose next line does not parse, are kept verbatim as passthrough text and
written back in their original order. Managed entries are written after the
passthrough text, each preceded by its marker.
"""
import logging
from typing import Dict, Iterator, List, Optional

from website_blocker.core.entry import ManagedEntry, parse_entry
from website_blocker.core.errors import DomainNotFound, DuplicateDomain, EntryParseError

MARKER = "#!wb"


def split_lines(text: str) -> List[str]:
    """Split on newlines only, keeping each line's terminator.

    A last line without a terminator is given ``\\n``.
    """
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    else:
        lines[-1] += "\n"
        return [line + "\n" for line in lines[:-1]] + [lines[-1]]
    return [line + "\n" for line in lines]


class HostsDocument:
    def __init__(self, passthrough: Optional[List[str]] = None,
                 entries: Optional[List[ManagedEntry]] = None):
        self.passthrough = list(passthrough or [])
        self._entries: Dict[str, ManagedEntry] = {}
        for entry in entries or []:
            self.add(entry)

    @classmethod
    def parse(cls, raw_text: str) -> "HostsDocument":
        """Build a document from the raw text of a hosts file.

        Never fails: anything that is not a well-formed marker/entry pair stays
        as passthrough text. When the same domain appears in two pairs, the
        first one wins and the later pair is dropped.
        """
        document = cls()
        pending_marker = None
        for line in split_lines(raw_text):
            content = line.strip()
            if pending_marker is not None:
                try:
                    entry = parse_entry(content)
                except EntryParseError as e:
                    logging.debug(f"Marked line {content!r} is not an entry: {e}")
                    entry = None
                if entry is not None:
                    if entry.domain in document._entries:
                        logging.warning(f"Dropping duplicate entry {entry}")
                    else:
                        document._entries[entry.domain] = entry
                    pending_marker = None
                    continue
                document.passthrough.append(pending_marker)
                pending_marker = None
            if content == MARKER:
                pending_marker = line
            else:
                document.passthrough.append(line)
        if pending_marker is not None:
            document.passthrough.append(pending_marker)
        logging.debug(
            f"Parsed hosts file: {len(document._entries)} managed entries, "
            f"{len(document.passthrough)} passthrough lines"
        )
        return document

    def __iter__(self) -> Iterator[ManagedEntry]:
        return iter(self._entries.values())

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, domain) -> bool:
        return domain in self._entries

    def entries(self) -> List[ManagedEntry]:
        return list(self._entries.values())

    def add(self, entry: ManagedEntry) -> None:
        if entry.domain in self._entries:
            raise DuplicateDomain(entry.domain)
        self._entries[entry.domain] = entry

    def remove(self, domain: str) -> ManagedEntry:
        try:
            return self._entries.pop(domain)
        except KeyError:
            raise DomainNotFound(domain) from None

    def render(self) -> str:
        result = "".join(self.passthrough)
        for entry in self._entries.values():
            result += f"{MARKER}\n{entry}\n"
        return result

    def __str__(self) -> str:
        return self.render()


def parse_document(raw_text: str) -> HostsDocument:
    return HostsDocument.parse(raw_text)


def render(document: HostsDocument) -> str:
    return document.render()
