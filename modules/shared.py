"""
Helpers shared by the feature modules.
"""

import re
from typing import Any, Dict

HIDDEN_TAXONOMY_ARGS = {
    'rewrite': False,
    'public': False,
    'show_ui': False,
    'show_admin_column': False,
}


def drop_rules_routing_to(rules: Dict[str, str], query_var: str) -> Dict[str, str]:
    """
    Remove the rewrite rules whose rewrite sets the given query variable
    from a regex match (``...&cpage=$matches[2]``).

    Args:
        rules: Rewrite rules, keyed by their regex pattern
        query_var: Name of the query variable

    Returns:
        The remaining rules, in their original order
    """
    routed = re.compile(r'[?&]' + re.escape(query_var) + r'=\$matches\[')
    return {
        pattern: rewrite for pattern, rewrite in rules.items()
        if not routed.search(rewrite)
    }


def hide_taxonomy_args(args: Dict[str, Any]) -> Dict[str, Any]:
    """Get taxonomy registration args with the taxonomy hidden everywhere."""
    return {**args, **HIDDEN_TAXONOMY_ARGS}
