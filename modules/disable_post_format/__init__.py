"""
Disable Post Format Module

Hides post formats and removes post format support.
"""

from .disable_post_format_module import DisablePostFormatModule

__all__ = ['DisablePostFormatModule']
