"""Concrete curve bindings for :mod:`blsagg`."""
