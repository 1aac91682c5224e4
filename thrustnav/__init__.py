# thrustnav/__init__.py
# 推力飞行器的路径规划与滚动时域控制

__version__ = "0.1.0"
