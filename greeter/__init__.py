"""Configurable greeting served over HTTP."""
