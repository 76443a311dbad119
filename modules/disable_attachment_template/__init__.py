"""
Disable Attachment Template Module

Removes attachment pages, pointing attachment links and requests to the file itself.
"""

from .disable_attachment_template_module import DisableAttachmentTemplateModule

__all__ = ['DisableAttachmentTemplateModule']
