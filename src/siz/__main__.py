"""Application entry point for siz.

Runs the click command line interface. Exit codes:

- 0: success, or the report reader closed the pipe early
- 1: a run failed, the error is printed to standard error
- 2: invalid command line usage
"""

from __future__ import annotations

from siz.app.cli import main

if __name__ == "__main__":
    main()
