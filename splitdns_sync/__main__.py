"""
Main entry point for running the package directly:
    python -m splitdns_sync --config config.json
"""

from splitdns_sync.cli import run

if __name__ == "__main__":
    run()
