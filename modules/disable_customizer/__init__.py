"""
Disable Customizer Module

Removes the customize capability and blocks the Customizer screen.
"""

from .disable_customizer_module import DisableCustomizerModule

__all__ = ['DisableCustomizerModule']
