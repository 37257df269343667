"""
Boundary layer for external system integrations.

Handles all interactions with external systems (database, blob storage).
Provides adapters and clients for infrastructure dependencies.
"""
