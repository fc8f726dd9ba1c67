"""Catalog search pipeline shared by the search tools."""

from clixmcp.search.catalog import CatalogResolver, parse_index
from clixmcp.search.content import ContentFetcher
from clixmcp.search.engine import SearchEngine, SearchProfile
from clixmcp.search.formatter import render_report
from clixmcp.search.http import HttpFetcher, TextFetcher
from clixmcp.search.models import Catalog, CatalogEntry, FetchResult, ScoredEntry, SearchReport
from clixmcp.search.ranker import BM25Ranker, tokenize

__all__ = [
    "BM25Ranker",
    "Catalog",
    "CatalogEntry",
    "CatalogResolver",
    "ContentFetcher",
    "FetchResult",
    "HttpFetcher",
    "ScoredEntry",
    "SearchEngine",
    "SearchProfile",
    "SearchReport",
    "TextFetcher",
    "parse_index",
    "render_report",
    "tokenize",
]
