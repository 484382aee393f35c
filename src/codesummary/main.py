from __future__ import annotations

"""
Script entry point.

Allows running 'python src/codesummary/main.py' from a checkout: the src
directory is put on sys.path before the CLI is imported. Any exception that
escapes main() is written to the log and stderr before the process exits 1.
"""

import logging
import os
import sys
import traceback
from typing import Any

# -----------------------------------------------------------------------------
# PATH BOOTSTRAP
# -----------------------------------------------------------------------------

SRC_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if SRC_DIR not in sys.path:
    sys.path.insert(0, SRC_DIR)

# -----------------------------------------------------------------------------
# CRASH HOOK
# -----------------------------------------------------------------------------

def report_crash(exctype: type[BaseException], value: BaseException, tb: Any) -> None:
    """Log an uncaught exception and terminate with status 1."""
    details = "".join(traceback.format_exception(exctype, value, tb))
    logging.getLogger("codesummary").critical(f"Uncaught {exctype.__name__}: {value}\n{details}")
    print(f"codesummary crashed:\n{details}", file=sys.stderr)
    sys.exit(1)


sys.excepthook = report_crash

# -----------------------------------------------------------------------------
# ENTRY
# -----------------------------------------------------------------------------

def main() -> int:
    """Run the CLI and return its exit code."""
    from codesummary.interface.cli.app import main as cli_main
    return cli_main()


if __name__ == "__main__":
    sys.exit(main())
