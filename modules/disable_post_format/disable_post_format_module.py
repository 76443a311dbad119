"""
Disable Post Format Module Implementation
"""

from typing import Any, Dict

from hooks import Site, return_empty_list, return_true
from module_manager.module_definition import Module, ModuleKind

from ..shared import hide_taxonomy_args


class DisablePostFormatModule(Module):
    """Disable post formats."""

    module_id = ModuleKind.DISABLE_POST_FORMAT.value
    module_description = "Hide post formats and remove post format support"

    def register_hooks(self) -> None:
        self.remove_filter('request', '_post_format_request')

        self.add_filter('post_format_rewrite_rules', return_empty_list, 50)
        self.add_filter('disable_formats_dropdown', return_true, 50)
        self.add_filter('register_taxonomy_args', self.register_taxonomy_args, 50, 2)

        self.add_action('wp_loaded', self.filter_post_type_support)
        self.add_action('wp_loaded', self.filter_theme_support)

    def register_taxonomy_args(self, args: Dict[str, Any], taxonomy: str) -> Dict[str, Any]:
        """Make the post format taxonomy private and hide it from the admin."""
        if taxonomy == 'post_format':
            return hide_taxonomy_args(args)
        return args

    def filter_post_type_support(self, site: Site) -> None:
        """Remove post formats support from every post type."""
        for post_type in list(site.post_type_supports):
            site.remove_post_type_support(post_type, 'post-formats')

    def filter_theme_support(self, site: Site) -> None:
        """Remove post formats support from the theme."""
        site.theme_supports.discard('post-formats')
