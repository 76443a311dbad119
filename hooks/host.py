"""
Host state passed to action callbacks.

The host fires actions with the objects its callbacks act on. These dataclasses
describe the parts of that state Ecocide modules read or change: the site
wide registries (widgets, menus, feature support) and the current request.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Set


@dataclass
class Site:
    """Site wide registries, as set up while the host loads."""
    widgets: Set[str] = field(default_factory=set)
    post_type_supports: Dict[str, Set[str]] = field(default_factory=dict)
    theme_supports: Set[str] = field(default_factory=set)
    menu_pages: Set[str] = field(default_factory=set)
    submenu_pages: Dict[str, Set[str]] = field(default_factory=dict)
    meta_boxes: Set[str] = field(default_factory=set)
    admin_bar_nodes: Set[str] = field(default_factory=set)

    def remove_post_type_support(self, post_type: str, feature: str) -> None:
        self.post_type_supports.get(post_type, set()).discard(feature)

    def post_type_supports_feature(self, post_type: str, feature: str) -> bool:
        return feature in self.post_type_supports.get(post_type, set())

    def remove_submenu_page(self, parent: str, page: str) -> None:
        self.submenu_pages.get(parent, set()).discard(page)


@dataclass
class Request:
    """
    The request being served, with its parsed query.

    Attributes:
        query_vars: Parsed query variables (``s``, ``post_type``, ...)
        pagenow: Admin screen file name, e.g. ``"edit-comments.php"``
        searchable_post_types: Post types not excluded from search
        status: HTTP status the response will be sent with
        redirect_to: Location to redirect to, if any
        output: Markup printed into the page
    """
    query_vars: Dict[str, Any] = field(default_factory=dict)
    is_main_query: bool = True
    is_singular: bool = False
    is_author: bool = False
    is_attachment: bool = False
    is_comment_feed: bool = False
    is_search: bool = False
    post_id: Optional[int] = None
    pagenow: str = ""
    form_data: Dict[str, Any] = field(default_factory=dict)
    searchable_post_types: List[str] = field(default_factory=list)
    status: int = 200
    headers: Dict[str, str] = field(default_factory=dict)
    redirect_to: Optional[str] = None
    output: List[str] = field(default_factory=list)

    def set_404(self) -> None:
        self.status = 404

    def redirect(self, location: str, status: int = 302) -> None:
        self.redirect_to = location
        self.status = status

    def nocache_headers(self) -> None:
        self.headers.update({
            'Cache-Control': 'no-cache, must-revalidate, max-age=0',
            'Expires': 'Wed, 11 Jan 1984 05:00:00 GMT',
        })
