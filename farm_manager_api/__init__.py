"""
Top-level package for the Farm Manager data-access layer.

All functionality lives in submodules under ``app``; see
``farm_manager_api.app`` for the service container.
"""

__all__ = []
