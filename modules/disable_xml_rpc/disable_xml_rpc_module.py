"""
Disable XML-RPC Module Implementation
"""

from hooks import return_empty_list, return_false
from module_manager.module_definition import Module, ModuleKind


class DisableXmlRpcModule(Module):
    """Disable XML-RPC methods and requests."""

    module_id = ModuleKind.DISABLE_XML_RPC.value
    module_description = "Turn off the XML-RPC API"

    def register_hooks(self) -> None:
        self.add_filter('xmlrpc_enabled', return_false)
        self.add_filter('xmlrpc_methods', return_empty_list)
        self.add_filter('xmlrpc_element_limit', self.filter_xmlrpc_element_limit, 999)

    def filter_xmlrpc_element_limit(self, element_limit: int) -> int:
        """Limit XML-RPC payloads to a single element."""
        return 1
