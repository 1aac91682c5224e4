# thrustnav/collision/__init__.py

from .config import CollisionConfig
from .checker import CollisionChecker
# geometry 通常作为底层库，不需要直接暴露到顶层，除非你经常单独使用它

__all__ = [
    "CollisionConfig",
    "CollisionChecker",
]
