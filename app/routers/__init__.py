"""
Routers module - API endpoint handlers organized by feature.

- accessibility: HTML accessibility analysis and repair
"""
