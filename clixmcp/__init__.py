"""
clixmcp - relevance search over Clix documentation and SDK sources for AI agents
"""

__version__ = "0.3.0"
