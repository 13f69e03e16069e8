"""Core building blocks: ordered set, configuration, paths and theme."""
