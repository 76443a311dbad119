"""
Disable Attachment Template Module Implementation

Attachment pages are removed: their rewrite rules and query variable are
dropped, attachment slugs are prefixed so they no longer collide with page
slugs, and attachment links and requests are sent to the file itself.

File URLs are resolved through the ``ecocide/modules/disable_attachment_template/attachment_url``
filter, which the host fills in with ``(url, attachment_id)``.
"""

import logging
from typing import Any, Dict, Optional

from hooks import HookRegistry, Request
from module_manager.module_definition import Module, ModuleKind

from ..shared import drop_rules_routing_to

logger = logging.getLogger(__name__)

SLUG_PREFIX = 'wp-attachment-'


class DisableAttachmentTemplateModule(Module):
    """Disable attachment pages."""

    module_id = ModuleKind.DISABLE_ATTACHMENT_TEMPLATE.value
    module_description = "Remove attachment pages and link attachments to their files"

    def __init__(self, hooks: Optional[HookRegistry] = None):
        super().__init__(hooks)
        self._rerunning_slug_filters = False

    def register_hooks(self) -> None:
        self.add_filter('rewrite_rules_array', self.remove_attachment_rewrites)
        self.add_filter('wp_unique_post_slug', self.wp_unique_post_slug, 10, 6)
        self.add_filter('request', self.remove_attachment_query_var)
        self.add_filter('attachment_link', self.change_attachment_link_to_file, 10, 2)

        # In case an attachment page is requested anyway
        self.add_action('template_redirect', self.redirect_attachment_pages_to_file)

        self.add_filter('register_post_type_args', self.make_attachments_private, 10, 2)
        self.add_filter('pll_translated_slugs', self.filter_pll_translated_slugs, 20)

    def filter_pll_translated_slugs(self, slugs: Dict[str, Any]) -> Dict[str, Any]:
        return {key: value for key, value in slugs.items() if key != 'attachment'}

    def remove_attachment_rewrites(self, rules: Dict[str, str]) -> Dict[str, str]:
        """Remove the rewrite rules routing to attachment pages."""
        return drop_rules_routing_to(rules, 'attachment')

    def wp_unique_post_slug(self, slug: str, post_id: int, post_status: str,
                            post_type: str, post_parent: int, original_slug: str) -> str:
        """
        Prefix attachment slugs so attachments never take a slug a page could use.

        The prefix is filterable; an empty prefix keeps the host's slug. The
        prefixed slug is run through the other slug filters again.
        """
        if post_type != 'attachment' or self._rerunning_slug_filters:
            return slug

        prefix = self.hooks.apply_filters(
            self.hook_prefix + 'attachment_slug_prefix',
            SLUG_PREFIX, original_slug, post_id, post_status, post_type, post_parent,
        )
        if not prefix:
            return slug

        if prefix not in original_slug:
            slug = prefix + original_slug

        # The host recomputes the unique slug for the prefixed slug, so every
        # other slug filter runs again; this one steps aside while it does
        self._rerunning_slug_filters = True
        try:
            slug = self.hooks.apply_filters(
                'wp_unique_post_slug', slug, post_id, post_status, post_type, post_parent, original_slug,
            )
        finally:
            self._rerunning_slug_filters = False

        return slug

    def remove_attachment_query_var(self, query_vars: Dict[str, Any]) -> Dict[str, Any]:
        """Resolve ``?attachment=<slug>`` requests as a regular ``name`` lookup."""
        if not query_vars.get('attachment'):
            return query_vars

        query_vars = dict(query_vars)
        query_vars['page'] = ''
        query_vars['name'] = query_vars.pop('attachment')
        return query_vars

    def make_attachments_private(self, args: Dict[str, Any], post_type: str) -> Dict[str, Any]:
        if post_type == 'attachment':
            return {**args, 'public': False, 'publicly_queryable': False}
        return args

    def change_attachment_link_to_file(self, url: str, attachment_id: int) -> str:
        """Link attachments to their file rather than their page."""
        return self.get_attachment_url(attachment_id) or url

    def redirect_attachment_pages_to_file(self, request: Request) -> None:
        """Permanently redirect attachment page requests to the file."""
        if not request.is_attachment:
            return

        url = self.get_attachment_url(request.post_id)
        if url:
            logger.debug(f"Redirecting attachment {request.post_id} to {url}")
            request.redirect(url, 301)

    def get_attachment_url(self, attachment_id: Optional[int]) -> Optional[str]:
        if attachment_id is None:
            return None
        return self.hooks.apply_filters(self.hook_prefix + 'attachment_url', None, attachment_id)
