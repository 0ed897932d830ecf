"""Application keys for type-safe app configuration access."""

from aiohttp import web

from docnav.core.loader import SiteLoader
from docnav.core.navigation import Navigation

site_loader_key = web.AppKey("site_loader", SiteLoader)
navigation_key = web.AppKey("navigation", Navigation)
