# thrustnav/visualization/plotter.py
# 绘图逻辑 (Matplotlib)，用于离线检查规划/跟踪结果，不是实时渲染器

import os
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
from matplotlib.patches import Circle, Rectangle
from typing import Any, Optional, Sequence

from thrustnav.types import Point
from thrustnav.map.arena import Arena


class ScenePlotter:
    """
    场景静态图
    坐标系与竞技场一致 (y 轴向下)，所以绘制时翻转 y 轴。
    """
    def __init__(self, arena: Arena, vehicle_radius: float = 15.0, figsize=(10, 7.5)):
        self.arena = arena
        self.vehicle_radius = vehicle_radius
        self.fig, self.ax = plt.subplots(figsize=figsize)

        self.ax.set_xlim(0, arena.width)
        self.ax.set_ylim(arena.height, 0)
        self.ax.set_aspect('equal')

    def draw_arena(self, show_inflated: bool = True):
        for obs in self.arena.obstacles:
            self.ax.add_patch(Rectangle((obs.x, obs.y), obs.width, obs.height,
                                        facecolor='dimgray', edgecolor='black'))
            if show_inflated and self.vehicle_radius > 0:
                inflated = obs.inflate(self.vehicle_radius)
                self.ax.add_patch(Rectangle((inflated.x, inflated.y), inflated.width, inflated.height,
                                            fill=False, edgecolor='gray', linestyle='--', linewidth=0.8))
        return self

    def draw_tree(self, observer: Any):
        """画 RRT 树枝 (需要 ExperimentObserver / DebugObserver 记录的 edges)"""
        for s1, s2 in getattr(observer, 'edges', []):
            self.ax.plot([s1.x, s2.x], [s1.y, s2.y], 'r-', linewidth=0.5, alpha=0.2)
        return self

    def draw_path(self, path: Sequence[Point], label: str = 'Path', style: str = 'b-o'):
        if path:
            self.ax.plot([p.x for p in path], [p.y for p in path], style,
                         linewidth=2.0, markersize=4, label=label)
        return self

    def draw_trajectory(self, trajectory: Sequence[Point]):
        if trajectory:
            self.ax.plot([p.x for p in trajectory], [p.y for p in trajectory], 'g-',
                         linewidth=1.2, alpha=0.8, label='Trajectory')
        return self

    def draw_endpoints(self, start: Point, goal: Point):
        self.ax.plot(start.x, start.y, 'go', markersize=10, label='Start')
        self.ax.plot(goal.x, goal.y, 'rx', markersize=10, label='Goal')
        return self

    def draw_aim_point(self, aim: Point, position: Optional[Point] = None):
        self.ax.plot(aim.x, aim.y, 'm*', markersize=12, label='Aim point')
        if position is not None:
            self.ax.add_patch(Circle((position.x, position.y), self.vehicle_radius,
                                     fill=False, edgecolor='magenta'))
            self.ax.plot([position.x, aim.x], [position.y, aim.y], 'm:', linewidth=1.0)
        return self

    def save(self, save_path: str, title: str = "") -> str:
        if title:
            self.ax.set_title(title)
        handles, _ = self.ax.get_legend_handles_labels()
        if handles:
            self.ax.legend(loc='upper right')

        directory = os.path.dirname(save_path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        self.fig.savefig(save_path)
        plt.close(self.fig)
        print(f"Result saved to: {save_path}")
        return save_path
