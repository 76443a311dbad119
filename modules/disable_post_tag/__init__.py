"""
Disable Post Tag Module

Hides the post tag taxonomy and removes its rewrite rules.
"""

from .disable_post_tag_module import DisablePostTagModule

__all__ = ['DisablePostTagModule']
