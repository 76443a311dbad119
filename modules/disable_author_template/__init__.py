"""
Disable Author Template Module

Removes author archives and replaces author links.
"""

from .disable_author_template_module import DisableAuthorTemplateModule

__all__ = ['DisableAuthorTemplateModule']
