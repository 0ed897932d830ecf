"""Navigation API endpoints.

Provides full navigation tree and subtree endpoints.
"""

import logging

from aiohttp import web

from docnav.app_keys import navigation_key, site_loader_key
from docnav.core.navigation import Link, UnmatchedRuleError, find_link

logger = logging.getLogger(__name__)


def create_navigation_routes() -> list[web.RouteDef]:
    return [
        web.get("/api/navigation", get_navigation),
        web.get("/api/navigation/{path:.*}", get_navigation_subtree),
    ]


async def get_navigation(request: web.Request) -> web.Response:
    try:
        links = _build_links(request)
    except UnmatchedRuleError as e:
        return _unmatched_rule_response(e)

    return web.json_response({"items": [link.to_dict() for link in links]})


async def get_navigation_subtree(request: web.Request) -> web.Response:
    path = request.match_info["path"]

    try:
        links = _build_links(request)
    except UnmatchedRuleError as e:
        return _unmatched_rule_response(e)

    section = find_link(links, path)
    if section is None:
        return web.json_response(
            {"error": "Section not found", "path": path},
            status=404,
        )

    return web.json_response({"items": [child.to_dict() for child in section.children]})


def _build_links(request: web.Request) -> list[Link]:
    site = request.app[site_loader_key].load()
    return request.app[navigation_key].build_for(site)


def _unmatched_rule_response(error: UnmatchedRuleError) -> web.Response:
    logger.error(str(error))
    return web.json_response(
        {"error": "Unmatched navigation rule", "path": str(error.path)},
        status=500,
    )
