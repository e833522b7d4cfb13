"""Bundled data files for lsinfo."""
