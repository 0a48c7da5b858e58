"""
Split-DNS formatter - Displays a resolved table and how it differs from
the tailnet's current configuration.

Output format (list):
example.com  [changed]
  - 100.64.0.1

internal.example.com  [unchanged]
  - 192.168.1.1
  - 100.64.0.5
"""

import json
from typing import Dict, List
from .base_formatter import OutputFormatter
from ..services.sync_service import SyncPreview


class SplitDNSFormatter(OutputFormatter):
    """
    Formatter for dry-run previews.

    Design Pattern: Strategy Pattern implementation
    """

    def __init__(self, output_format: str = "list"):
        """
        Initialize formatter.

        Args:
            output_format: Output format type ('list', 'table', 'json')
        """
        self.output_format = output_format

    def format(self, preview: SyncPreview) -> str:
        if self.output_format == "json":
            return self._format_json(preview)
        elif self.output_format == "table":
            return self._format_table(preview)
        else:  # list (default)
            return self._format_list(preview)

    def _statuses(self, preview: SyncPreview) -> Dict[str, str]:
        """domain -> added/changed/unchanged, empty when the remote table is unknown"""
        if preview.diff is None:
            return {}
        statuses = {}
        for status in ("added", "changed", "unchanged"):
            for domain in getattr(preview.diff, status):
                statuses[domain] = status
        return statuses

    def _format_list(self, preview: SyncPreview) -> str:
        """Format as a list of domains with their nameservers"""
        if not preview.table:
            return "No domains configured."

        statuses = self._statuses(preview)
        lines: List[str] = []

        for domain, nameservers in preview.table.items():
            status = statuses.get(domain)
            lines.append(f"{domain}  [{status}]" if status else domain)
            for ns in nameservers or []:
                lines.append(f"  - {ns}")
            lines.append("")

        if preview.diff is not None and preview.diff.remote_only:
            lines.append("Not in config (currently set on tailnet):")
            for domain in preview.diff.remote_only:
                lines.append(f"  - {domain} -> {preview.current[domain]}")
            lines.append("")

        return "\n".join(lines).rstrip("\n")

    def _format_table(self, preview: SyncPreview) -> str:
        """Format as table with one row per nameserver"""
        statuses = self._statuses(preview)
        lines = []

        lines.append("{:<40} {:<40} {:<10}".format("DOMAIN", "NAMESERVER", "STATUS"))
        lines.append("=" * 90)

        for domain, nameservers in preview.table.items():
            for i, ns in enumerate(nameservers or [""]):
                # Only show domain and status on the first row
                lines.append("{:<40} {:<40} {:<10}".format(
                    domain if i == 0 else "",
                    ns,
                    statuses.get(domain, "") if i == 0 else ""
                ))

        if not preview.table:
            lines.append("No domains configured.")

        return "\n".join(lines)

    def _format_json(self, preview: SyncPreview) -> str:
        """Format as JSON with the resolved and current tables"""
        output = {
            "split_dns": preview.table,
            "current": preview.current,
        }
        if preview.diff is not None:
            output["diff"] = preview.diff._asdict()

        return json.dumps(output, indent=2)
