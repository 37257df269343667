"""
Router utility functions.

Contains helpers shared by the router endpoints.
"""

from coursehub.api.routers.router_utils.error_handling import handle_store_errors

__all__ = ["handle_store_errors"]
