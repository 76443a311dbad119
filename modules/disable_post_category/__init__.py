"""
Disable Post Category Module

Hides the category taxonomy and removes its rewrite rules.
"""

from .disable_post_category_module import DisablePostCategoryModule

__all__ = ['DisablePostCategoryModule']
