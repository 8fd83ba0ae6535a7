"""
storefront_bridge.erp

ERP backend client package.
"""

# Package marker.
