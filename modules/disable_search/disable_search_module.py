"""
Disable Search Module Implementation

Front end searches are answered with a 404 and every search entry point
(form, widget, admin bar, rewrite rules, SEO markup) is removed.
"""

import logging

from hooks import Request, Site, return_empty_list, return_empty_string, return_true
from module_manager.module_definition import Module, ModuleKind

logger = logging.getLogger(__name__)


class DisableSearchModule(Module):
    """Disable the site search."""

    module_id = ModuleKind.DISABLE_SEARCH.value
    module_description = "Turn searches into 404s and remove the search form"

    def register_hooks(self) -> None:
        if not self.hooks.is_admin:
            self.add_action('parse_query', self.parse_query, 5)

        self.add_action('widgets_init', self.disable_search_widget, 1)
        self.add_action('admin_bar_menu', self.admin_bar_menu, 11)

        self.add_filter('get_search_form', return_empty_string, 999)
        self.add_filter('search_rewrite_rules', return_empty_list, 999)
        self.add_filter('disable_wpseo_json_ld_search', return_true, 999)

    def disable_search_widget(self, site: Site) -> None:
        """Unregister the Search widget."""
        site.widgets.discard('WP_Widget_Search')

    def parse_query(self, request: Request) -> None:
        """
        Turn a main query search into a 404.

        The search term is dropped from the request and the query so
        templates cannot echo it back.
        """
        if not request.is_main_query or not request.is_search:
            return

        request.form_data.pop('s', None)
        request.query_vars['s'] = ''
        request.is_search = False
        request.set_404()
        request.nocache_headers()

        logger.debug("Search request answered with 404")

    def admin_bar_menu(self, site: Site) -> None:
        """Remove the search form from the admin bar."""
        site.admin_bar_nodes.discard('search')
