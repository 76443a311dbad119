"""
Disable Search Module

Turns front end searches into 404s and removes the search form, widget and rewrite rules.
"""

from .disable_search_module import DisableSearchModule

__all__ = ['DisableSearchModule']
