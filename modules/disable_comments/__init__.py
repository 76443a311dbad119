"""
Disable Comments Module

Globally disables comments, pingbacks and trackbacks, along with the
widgets, menu items, feeds and REST endpoints that expose them.
"""

from .disable_comments_module import DisableCommentsModule

__all__ = ['DisableCommentsModule']
