"""
Disable Post Module Implementation

Hides the built-in "post" post type: it is unregistered from every public
surface, its rewrite rules are removed, its admin screens refuse to load and
it is excluded from search results.
"""

import logging
from typing import Any, Dict

from hooks import Request, Site, return_empty_list
from module_manager.module_definition import FeatureDisabled, Module, ModuleKind

logger = logging.getLogger(__name__)

POST_SCREENS = ('edit.php', 'edit-tags.php', 'post-new.php')

HIDDEN_POST_TYPE_ARGS = {
    'exclude_from_search': False,
    'public': False,
    'publicly_queryable': False,
    'show_in_admin_bar': False,
    'show_in_menu': False,
    'show_in_nav_menus': False,
    'show_in_rest': False,
    'show_ui': False,
}

DASHBOARD_WIDGETS = {
    'quick_press': 'dashboard_quick_press',
    'recent_drafts': 'dashboard_recent_drafts',
}


class DisablePostModule(Module):
    """
    Disable the "post" post type.

    Options:
        hooks.rewrite_rules: False keeps both the date and post rewrite rules
        dashboard_widgets: Map of ``quick_press`` / ``recent_drafts`` to
            whether the widget is removed (both are removed by default)
    """

    module_id = ModuleKind.DISABLE_POST.value
    module_description = "Hide the built-in post type"

    def register_hooks(self) -> None:
        self.add_filter('register_post_type_args', self.filter_register_post_type_args, 50, 2)
        self.add_filter('rest_url', self.filter_rest_url, 50, 2)

        if self.is_hook_active('rewrite_rules'):
            self.add_filter('date_rewrite_rules', return_empty_list, 50)
            self.add_filter('post_rewrite_rules', return_empty_list, 50)

        if self.hooks.is_admin:
            self.add_action('admin_menu', self.action_admin_menu, 10, 2)
            self.add_action('wp_dashboard_setup', self.remove_dashboard_widgets, 50)
        else:
            self.add_action('pre_get_posts', self.action_pre_get_posts)

    def action_admin_menu(self, site: Site, request: Request) -> None:
        """
        Refuse access to the post list, post tags and new post screens.

        Screens for other post types and taxonomies, and form submissions,
        are let through.

        Raises:
            FeatureDisabled: If the request is for a post screen
        """
        if request.pagenow not in POST_SCREENS:
            return

        if 'post_type' in request.query_vars or 'taxonomy' in request.query_vars or request.form_data:
            return

        raise FeatureDisabled('Posts are disabled.', 403)

    def action_pre_get_posts(self, request: Request) -> None:
        """Exclude posts from the main search query."""
        if not request.is_search or not request.is_main_query:
            return

        post_types = request.query_vars.get('post_type') or []
        if isinstance(post_types, str):
            post_types = [post_types]

        if not post_types:
            post_types = request.searchable_post_types

        request.query_vars['post_type'] = [pt for pt in post_types if pt != 'post']

    def filter_register_post_type_args(self, args: Dict[str, Any], post_type: str) -> Dict[str, Any]:
        """Hide the "post" post type everywhere."""
        if post_type != 'post':
            return args

        return {**args, **HIDDEN_POST_TYPE_ARGS}

    def filter_rest_url(self, url: str, path: str) -> str:
        """
        Let the REST availability check point at another post type route,
        since ``/wp/v2/types/post`` is no longer exposed.
        """
        if path != '/wp/v2/types/post':
            return url

        return self.hooks.apply_filters(self.hook_prefix + 'test_rest_availability_url', url, path)

    def remove_dashboard_widgets(self, site: Site) -> None:
        """Remove the Quick Draft and Recent Drafts dashboard widgets."""
        selected = (self.options or {}).get('dashboard_widgets') or {}

        for option, meta_box in DASHBOARD_WIDGETS.items():
            if selected.get(option, True):
                site.meta_boxes.discard(meta_box)
