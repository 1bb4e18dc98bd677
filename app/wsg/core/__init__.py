"""Core infrastructure for wsg: paths, settings and theming."""
