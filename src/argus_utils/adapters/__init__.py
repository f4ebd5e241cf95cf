"""Adapters implementing the interfaces in :mod:`argus_utils.interfaces`."""
