"""Procedural point-cloud generation for instanced rendering."""
