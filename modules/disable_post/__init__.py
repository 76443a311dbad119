"""
Disable Post Module

Hides the built-in "post" post type from the admin, front end, search and REST API.
"""

from .disable_post_module import DisablePostModule

__all__ = ['DisablePostModule']
