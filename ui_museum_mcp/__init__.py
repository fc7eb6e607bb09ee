"""
UI Museum MCP Server
Search and suggestion tools over the UI museum catalog:
- Zone gallery components and atomic-design elements
- Faceted and free-text search
- Description-based component suggestions
- Themes, zones and category metadata
"""

__version__ = "0.1.0"
