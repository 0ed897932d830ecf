"""aiohttp server for Docnav.

Application factory and route registration for standalone server mode.
"""

from aiohttp import web

from docnav.api.navigation import create_navigation_routes
from docnav.app_keys import navigation_key, site_loader_key
from docnav.config import Config
from docnav.core.loader import SiteLoader
from docnav.core.navigation import Navigation


def create_app(config: Config) -> web.Application:
    """Create aiohttp application.

    Args:
        config: Application configuration

    Returns:
        Configured aiohttp application
    """
    app = web.Application()

    app[site_loader_key] = SiteLoader(config.docs.source_dir)
    app[navigation_key] = Navigation.from_config(config)

    app.router.add_routes(create_navigation_routes())

    return app


def run_server(config: Config) -> None:
    """Run the server.

    Args:
        config: Application configuration
    """
    app = create_app(config)
    web.run_app(app, host=config.server.host, port=config.server.port)
