# thrustnav/simulation/__init__.py

from .navigator import Navigator, NavigatorConfig, TickSnapshot

__all__ = ["Navigator", "NavigatorConfig", "TickSnapshot"]
