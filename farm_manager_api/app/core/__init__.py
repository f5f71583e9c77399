"""
Core infrastructure: settings, logging, exceptions and the contract
with the remote data store.
"""
