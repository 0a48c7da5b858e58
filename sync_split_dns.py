#!/usr/bin/env python3
"""
Tailscale Split DNS Sync

Resolves nameserver references and pushes them to a tailnet's split DNS.
Reference types:
- svc:<name>        Tailscale service, first address is used
- device:<hostname> Tailnet device, matched by hostname, then display name,
                    then MagicDNS name prefix; first address is used
- anything else     Literal nameserver address, used as-is

Usage:
    python sync_split_dns.py --config config.json               # Update once
    python sync_split_dns.py --config config.json --interval 5m # Keep syncing
    python sync_split_dns.py --config config.json --dry-run     # Preview only
"""

from splitdns_sync.cli import run


if __name__ == "__main__":
    run()
