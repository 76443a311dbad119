"""
Disable Post Tag Module Implementation
"""

from typing import Any, Dict

from hooks import return_empty_list
from module_manager.module_definition import Module, ModuleKind

from ..shared import hide_taxonomy_args


class DisablePostTagModule(Module):
    """Disable the post tag taxonomy."""

    module_id = ModuleKind.DISABLE_POST_TAG.value
    module_description = "Hide the post tag taxonomy"

    def register_hooks(self) -> None:
        self.add_filter('post_tag_rewrite_rules', return_empty_list, 50)
        self.add_filter('register_taxonomy_args', self.register_taxonomy_args, 50, 2)

    def register_taxonomy_args(self, args: Dict[str, Any], taxonomy: str) -> Dict[str, Any]:
        if taxonomy == 'post_tag':
            return hide_taxonomy_args(args)
        return args
