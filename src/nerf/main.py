from __future__ import annotations
import sys
from nerf.interface.cli import run

def main() -> None:
    """Run the command-line tool and exit with its status."""
    sys.exit(run())


if __name__ == "__main__":
    main()
