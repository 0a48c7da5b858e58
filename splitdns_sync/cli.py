"""
Command line interface for Tailscale split-DNS sync.

Resolves svc:/device: nameserver references from a JSON config and
replaces the tailnet's split-DNS configuration with the result, once or
on a fixed interval.
"""

import argparse
import logging
import signal
import sys
import threading
from typing import List, Optional

from .config import AppConfig, TailscaleConfig, SyncConfig, load_environment, setup_logging
from .exceptions import ConfigError, InvalidIntervalError, SplitDNSSyncError, SyncError
from .formatters import SplitDNSFormatter
from .parsers import DurationParser
from .services import RunLoop, initialize_sync_service

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="splitdns-sync",
        description=AppConfig.APP_DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Update split DNS once using an API key
  TAILSCALE_API_KEY=tskey-api-... splitdns-sync --config config.json

  # Use OAuth client credentials and keep syncing every 5 minutes
  splitdns-sync --client-id ... --client-secret ... --interval 5m

  # Show what would be pushed without changing anything
  splitdns-sync --config config.json --dry-run --format table

  # Load credentials from a custom .env file
  splitdns-sync --env-file /etc/splitdns-sync.env
        """
    )

    parser.add_argument(
        "--config", "-c",
        help=f"Path to config.json (default: $SPLITDNS_CONFIG or {AppConfig.DEFAULT_CONFIG_PATH})"
    )

    parser.add_argument(
        "--tailnet", "-t",
        help=f"Tailscale tailnet name (default: $TAILSCALE_TAILNET or {TailscaleConfig.DEFAULT_TAILNET})"
    )

    parser.add_argument(
        "--api-key",
        help="Tailscale API key (default: $TAILSCALE_API_KEY)"
    )

    parser.add_argument(
        "--client-id",
        help="OAuth client ID (default: $TAILSCALE_CLIENT_ID)"
    )

    parser.add_argument(
        "--client-secret",
        help="OAuth client secret (default: $TAILSCALE_CLIENT_SECRET)"
    )

    parser.add_argument(
        "--base-url",
        help=f"API base URL (default: $TAILSCALE_BASE_URL or {TailscaleConfig.DEFAULT_BASE_URL})"
    )

    parser.add_argument(
        "--interval", "-i",
        help="Run continuously at this interval, e.g. 90s, 5m, 1h (default: $SPLITDNS_INTERVAL or 0, run once)"
    )

    parser.add_argument(
        "--timeout",
        type=float,
        help="Per-request API timeout in seconds (default: $TAILSCALE_API_TIMEOUT or none)"
    )

    parser.add_argument(
        "--dry-run", "-n",
        action="store_true",
        help="Resolve and print the split DNS table without updating the tailnet"
    )

    parser.add_argument(
        "--format", "-f",
        choices=["list", "table", "json"],
        default=AppConfig.DEFAULT_OUTPUT_FORMAT,
        help="Output format for --dry-run: list (default), table, or json"
    )

    parser.add_argument(
        "--env-file", "-e",
        help="Path to .env file with credentials"
    )

    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose (DEBUG) logging"
    )

    parser.add_argument(
        "--log-file",
        help="Path to log file (optional)"
    )

    return parser


def _install_stop_handler(loop: RunLoop) -> None:
    """Stop the daemon loop cleanly on SIGTERM"""
    if threading.current_thread() is not threading.main_thread():
        return

    def handle_sigterm(signum, frame):
        logger.info("Received SIGTERM, stopping after the current cycle")
        loop.stop()

    signal.signal(signal.SIGTERM, handle_sigterm)


def main(argv: Optional[List[str]] = None) -> int:
    """
    Run the CLI.

    Returns:
        Process exit code
    """
    args = build_parser().parse_args(argv)

    if args.env_file:
        load_environment(args.env_file)

    setup_logging(verbose=args.verbose, log_file=args.log_file)

    try:
        interval = DurationParser.parse(args.interval if args.interval is not None else SyncConfig.interval())
    except InvalidIntervalError as e:
        logger.error(f"Invalid interval: {e}")
        return 1

    try:
        timeout = args.timeout if args.timeout is not None else TailscaleConfig.api_timeout()
    except ValueError as e:
        logger.error(f"Invalid TAILSCALE_API_TIMEOUT: {e}")
        return 1

    try:
        service = initialize_sync_service(
            config_path=args.config or SyncConfig.config_path(),
            tailnet=args.tailnet or TailscaleConfig.tailnet(),
            api_key=args.api_key if args.api_key is not None else TailscaleConfig.api_key(),
            client_id=args.client_id if args.client_id is not None else TailscaleConfig.client_id(),
            client_secret=args.client_secret if args.client_secret is not None else TailscaleConfig.client_secret(),
            base_url=args.base_url or TailscaleConfig.base_url(),
            timeout=timeout
        )
    except ConfigError as e:
        logger.error(f"Failed to load config: {e}")
        return 1
    except SplitDNSSyncError as e:
        logger.error(f"Failed to create client: {e}")
        return 1

    with service:
        if args.dry_run:
            try:
                preview = service.preview()
            except SyncError as e:
                logger.error(f"Failed to resolve split DNS: {e}")
                return 1
            print(SplitDNSFormatter(output_format=args.format).format(preview))
            return 0

        loop = RunLoop(service.run_cycle, interval=interval)
        if loop.is_daemon:
            _install_stop_handler(loop)

        try:
            loop.run()
        except SyncError as e:
            logger.error(f"Failed to update DNS: {e}")
            return 1

    return 0


def run() -> None:
    """Console script entry point"""
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        print("\n\nSync cancelled by user.")
        sys.exit(130)
