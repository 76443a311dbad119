"""
Disable Post Category Module Implementation
"""

from typing import Any, Dict

from hooks import return_empty_list
from module_manager.module_definition import Module, ModuleKind

from ..shared import hide_taxonomy_args


class DisablePostCategoryModule(Module):
    """Disable the category taxonomy."""

    module_id = ModuleKind.DISABLE_POST_CATEGORY.value
    module_description = "Hide the category taxonomy"

    def register_hooks(self) -> None:
        self.add_filter('category_rewrite_rules', return_empty_list, 50)
        self.add_filter('register_taxonomy_args', self.register_taxonomy_args, 50, 2)

    def register_taxonomy_args(self, args: Dict[str, Any], taxonomy: str) -> Dict[str, Any]:
        """Make the category taxonomy private and hide it from the admin."""
        if taxonomy == 'category':
            return hide_taxonomy_args(args)
        return args
