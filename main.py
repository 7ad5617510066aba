#!/usr/bin/env python3
"""
Website Blocker - Redirect websites through the system hosts file.

Entries managed by this tool are tagged with a `#!wb` line in the hosts file.
Everything else in the file is left as it is.

Usage:
    python main.py list                        # Show redirected websites
    python main.py block example.com 0.0.0.0   # Redirect example.com to 0.0.0.0
    python main.py unblock example.com         # Remove the redirect
"""
import sys

from website_blocker.utils.cli import main

if __name__ == "__main__":
    sys.exit(main())
