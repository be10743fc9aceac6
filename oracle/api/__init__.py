"""Oracle API package.

Contains FastAPI routers for the web API.
"""

from oracle.api.dependencies import CommonDependencies

__all__ = ["CommonDependencies"]
