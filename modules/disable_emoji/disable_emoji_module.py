"""
Disable Emoji Module Implementation
"""

import logging

from hooks import return_null
from module_manager.module_definition import Module, ModuleKind

logger = logging.getLogger(__name__)

# (hook, callback name, priority) of the host's emoji callbacks
EMOJI_CALLBACKS = [
    ('wp_head', 'print_emoji_detection_script', 7),
    ('admin_print_scripts', 'print_emoji_detection_script', 10),
    ('wp_print_styles', 'print_emoji_styles', 10),
    ('admin_print_styles', 'print_emoji_styles', 10),
    ('the_content_feed', 'wp_staticize_emoji', 10),
    ('comment_text_rss', 'wp_staticize_emoji', 10),
    ('wp_mail', 'wp_staticize_emoji_for_email', 10),
]


class DisableEmojiModule(Module):
    """Disable the emoji scripts and styles."""

    module_id = ModuleKind.DISABLE_EMOJI.value
    module_description = "Remove emoji scripts, styles and static replacements"

    def register_hooks(self) -> None:
        for hook, callback, priority in EMOJI_CALLBACKS:
            if self.is_hook_active(hook, callback):
                self.remove_action(hook, callback, priority)

        self.add_filter('emoji_svg_url', return_null)
