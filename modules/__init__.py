"""
Ecocide feature modules.

Each sub-package disables or rewrites one built-in feature of the host.
ALL_MODULES lists the module classes the registry makes available.
"""

from .disable_attachment_template import DisableAttachmentTemplateModule
from .disable_author_template import DisableAuthorTemplateModule
from .disable_comments import DisableCommentsModule
from .disable_customizer import DisableCustomizerModule
from .disable_emoji import DisableEmojiModule
from .disable_post import DisablePostModule
from .disable_post_category import DisablePostCategoryModule
from .disable_post_format import DisablePostFormatModule
from .disable_post_tag import DisablePostTagModule
from .disable_search import DisableSearchModule
from .disable_xml_rpc import DisableXmlRpcModule

ALL_MODULES = [
    DisableAttachmentTemplateModule,
    DisableAuthorTemplateModule,
    DisableCommentsModule,
    DisableCustomizerModule,
    DisableEmojiModule,
    DisablePostModule,
    DisablePostCategoryModule,
    DisablePostFormatModule,
    DisablePostTagModule,
    DisableSearchModule,
    DisableXmlRpcModule,
]

__all__ = [
    'ALL_MODULES',
    'DisableAttachmentTemplateModule',
    'DisableAuthorTemplateModule',
    'DisableCommentsModule',
    'DisableCustomizerModule',
    'DisableEmojiModule',
    'DisablePostModule',
    'DisablePostCategoryModule',
    'DisablePostFormatModule',
    'DisablePostTagModule',
    'DisableSearchModule',
    'DisableXmlRpcModule',
]
