# thrustnav/planning/__init__.py
# 子模块按需导入 (planners / costs 各自暴露接口)，避免与 visualization 循环导入
