from bobassistant.server_app.api import create_app
from bobassistant.server_app.config import ServerSettings, get_settings

__all__ = ["create_app", "get_settings", "ServerSettings"]
