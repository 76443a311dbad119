"""
Disable Comments Module Implementation

Installs the hooks that close comments and pings everywhere and remove
comment related screens, widgets, feeds, endpoints and rewrite rules.
"""

import logging
import os
import re
from typing import Dict

from hooks import Request, Site, return_empty_list, return_false, return_zero
from module_manager.module_definition import FeatureDisabled, Module, ModuleKind

from ..shared import drop_rules_routing_to

logger = logging.getLogger(__name__)

COMMENT_SCREENS = ('comment.php', 'edit-comments.php', 'options-discussion.php')

NETWORK_COMMENTS_NODE = re.compile(r'^blog-\d+-c$')

ADMIN_CSS = (
    '<style>'
    '#dashboard_right_now .comment-count, '
    '#dashboard_right_now .comment-mod-count, '
    '#latest-comments, '
    '#welcome-panel .welcome-comments, '
    '.user-comment-shortcuts-wrap '
    '{ display: none !important; }'
    '</style>'
)


class DisableCommentsModule(Module):
    """
    Disable comments, pingbacks and trackbacks.

    Admin requests lose the comment screens, dashboard widget and pingback
    option; public requests lose the comment feed and feed links.
    """

    module_id = ModuleKind.DISABLE_COMMENTS.value
    module_description = "Globally disable comments, pingbacks and trackbacks"

    def register_hooks(self) -> None:
        self.add_filter('wp_headers', self.filter_wp_headers)
        self.add_action('widgets_init', self.filter_widgets)
        self.add_action('admin_bar_menu', self.filter_admin_bar, 500)
        self.add_filter('rest_endpoints', self.filter_rest_endpoints)

        self.add_filter('comments_array', return_empty_list, 99)
        self.add_filter('comments_open', return_false, 99)
        self.add_filter('pings_open', return_false, 99)
        self.add_filter('get_comments_number', return_zero, 99)
        self.add_filter('comments_rewrite_rules', return_empty_list, 99)
        self.add_filter('rewrite_rules_array', self.filter_rewrite_rules, 99)

        self.add_action('wp_loaded', self.filter_post_type_support)

        self.remove_action('init', 'register_block_core_latest_comments')

        if self.hooks.is_admin:
            # Run as late as possible
            self.add_action('admin_menu', self.filter_admin_menu, 99, 2)
            self.add_action('admin_print_styles-index.php', self.admin_css)
            self.add_action('admin_print_styles-profile.php', self.admin_css)
            self.add_action('wp_dashboard_setup', self.filter_dashboard)
            self.add_filter('pre_option_default_pingback_flag', return_zero)
        else:
            # Must run before canonical redirects
            self.add_action('template_redirect', self.disable_comment_feed, 9)
            self.add_action('template_redirect', self.check_comment_template)
            self.add_filter('post_comments_feed_link', return_false)
            self.add_filter('comments_link_feed', return_false)
            self.add_filter('comment_link', return_false)
            self.add_filter('feed_links_show_comments_feed', return_false)

    def filter_wp_headers(self, headers: Dict[str, str]) -> Dict[str, str]:
        """Remove the X-Pingback HTTP header."""
        return {name: value for name, value in headers.items() if name != 'X-Pingback'}

    def filter_rest_endpoints(self, endpoints: Dict[str, object]) -> Dict[str, object]:
        """Remove the comment routes from the REST API."""
        return {
            route: handlers for route, handlers in endpoints.items()
            if not route.startswith('/wp/v2/comments')
        }

    def filter_rewrite_rules(self, rules: Dict[str, str]) -> Dict[str, str]:
        """Remove the comment pagination rewrite rules."""
        return drop_rules_routing_to(rules, 'cpage')

    def filter_widgets(self, site: Site) -> None:
        """Unregister the Recent Comments widget."""
        site.widgets.discard('WP_Widget_Recent_Comments')

        # The widget adds its style action when constructed, unregistering it doesn't remove that
        self.add_filter('show_recent_comments_widget_style', return_false)

    def filter_admin_bar(self, site: Site) -> None:
        """Remove the comment links from the admin bar, including the per-site network ones."""
        site.admin_bar_nodes.discard('comments')
        for node in [n for n in site.admin_bar_nodes if NETWORK_COMMENTS_NODE.match(n)]:
            site.admin_bar_nodes.discard(node)

    def filter_post_type_support(self, site: Site) -> None:
        """Remove comments and trackbacks support from every post type."""
        for post_type in list(site.post_type_supports):
            if site.post_type_supports_feature(post_type, 'comments'):
                site.remove_post_type_support(post_type, 'comments')
                site.remove_post_type_support(post_type, 'trackbacks')

    def filter_admin_menu(self, site: Site, request: Request) -> None:
        """
        Remove the Comments and Discussion menu items, and refuse direct
        access to their screens.

        Raises:
            FeatureDisabled: If the request is for a comment screen
        """
        if request.pagenow in COMMENT_SCREENS:
            raise FeatureDisabled('Comments are closed.', 403)

        site.menu_pages.discard('edit-comments.php')
        site.remove_submenu_page('options-general.php', 'options-discussion.php')

    def filter_dashboard(self, site: Site) -> None:
        """Remove the Recent Comments dashboard widget."""
        site.meta_boxes.discard('dashboard_recent_comments')

    def admin_css(self, request: Request) -> None:
        """Print CSS hiding the comment counters on the dashboard and profile screens."""
        request.output.append(ADMIN_CSS)

    def disable_comment_feed(self, request: Request) -> None:
        """Serve a 404 for the comment feed."""
        if request.is_comment_feed:
            request.set_404()

    def check_comment_template(self, request: Request) -> None:
        """Replace the comments template and drop the extra feed links on singular views."""
        if request.is_singular:
            # Deals with themes that don't check the comment status properly
            self.add_filter('comments_template', self.dummy_comments_template, 20)
            self.remove_action('wp_head', 'feed_links_extra', 3)

    @staticmethod
    def dummy_comments_template(*args) -> str:
        """Get the path of an empty comments template."""
        return os.devnull
