"""
Split-DNS table types and comparison helpers.
"""

from typing import Dict, List, NamedTuple, Optional

# domain -> ordered nameserver references (svc:, device: or literal IP)
SplitDNSConfig = Dict[str, List[str]]

# domain -> ordered nameserver IP addresses, as submitted to the API.
# None removes the domain from the tailnet.
SplitDNSTable = Dict[str, Optional[List[str]]]


class TableDiff(NamedTuple):
    """Result of comparing the remote split-DNS table with a resolved one"""

    added: List[str]
    changed: List[str]
    unchanged: List[str]
    remote_only: List[str]

    def has_changes(self) -> bool:
        return bool(self.added or self.changed)


def diff_tables(current: SplitDNSTable, desired: SplitDNSTable) -> TableDiff:
    """
    Compare the current remote table with a freshly resolved one.

    Args:
        current: Table as reported by the API
        desired: Table produced by the resolver

    Returns:
        TableDiff with domain names grouped by outcome. Nameserver order
        is significant, so a reordered list counts as changed.
    """
    added = []
    changed = []
    unchanged = []

    for domain, nameservers in desired.items():
        if domain not in current:
            if nameservers is None:
                unchanged.append(domain)
            else:
                added.append(domain)
        elif list(current[domain] or []) != list(nameservers or []):
            changed.append(domain)
        else:
            unchanged.append(domain)

    remote_only = [domain for domain in current if domain not in desired]

    return TableDiff(
        added=added,
        changed=changed,
        unchanged=unchanged,
        remote_only=remote_only,
    )
