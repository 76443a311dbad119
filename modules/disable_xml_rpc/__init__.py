"""
Disable XML-RPC Module

Turns off the XML-RPC API.
"""

from .disable_xml_rpc_module import DisableXmlRpcModule

__all__ = ['DisableXmlRpcModule']
