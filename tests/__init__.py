"""Test package for cricviz."""
