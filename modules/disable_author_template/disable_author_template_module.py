"""
Disable Author Template Module Implementation

Author archives are answered with a 404, their templates and rewrite rules
are removed and author links point to the home page instead.
"""

import re
from typing import Any, Dict

from hooks import Request, return_empty_list
from module_manager.module_definition import Module, ModuleKind

TAG_PATTERN = re.compile(r'<[^>]*>')


class DisableAuthorTemplateModule(Module):
    """
    Disable author archives.

    Options:
        home_url: URL author links are replaced with, ``"/"`` by default
    """

    module_id = ModuleKind.DISABLE_AUTHOR_TEMPLATE.value
    module_description = "Remove author archives and replace author links"

    def register_hooks(self) -> None:
        self.add_action('template_redirect', self.disable_author_template, 0)
        self.add_filter('author_template_hierarchy', return_empty_list, 99)
        self.add_filter('author_rewrite_rules', return_empty_list, 99)
        self.add_filter('author_link', self.disable_author_link_url, 99)
        self.add_filter('the_author_posts_link', self.disable_author_link_tag, 99)
        self.add_filter('pll_translated_slugs', self.filter_pll_translated_slugs, 20)

    def filter_pll_translated_slugs(self, slugs: Dict[str, Any]) -> Dict[str, Any]:
        """Remove the author base from the translatable slugs."""
        return {key: value for key, value in slugs.items() if key != 'author'}

    def disable_author_template(self, request: Request) -> None:
        """Serve a 404 for author archives, including ``?author=<id>`` requests."""
        if request.is_author or request.query_vars.get('author'):
            request.set_404()

    def disable_author_link_url(self, url: str) -> str:
        """Replace the author archive URL with the home page URL."""
        home_url = (self.options or {}).get('home_url', '/')
        return self.hooks.apply_filters(self.hook_prefix + 'replace_author_url', home_url)

    def disable_author_link_tag(self, link: str) -> str:
        """Replace the author archive link with the plain author name."""
        author_name = TAG_PATTERN.sub('', link).strip()
        return self.hooks.apply_filters(self.hook_prefix + 'replace_author_link', author_name)
