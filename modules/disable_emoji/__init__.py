"""
Disable Emoji Module

Removes the emoji detection script, styles and static emoji replacement.
"""

from .disable_emoji_module import DisableEmojiModule

__all__ = ['DisableEmojiModule']
