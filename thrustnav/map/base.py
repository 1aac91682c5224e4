# thrustnav/map/base.py
from abc import ABC, abstractmethod
from typing import Sequence

from thrustnav.types import Obstacle, Point


class ObstacleSource(ABC):
    """
    障碍物来源接口 (外部协作者)
    障碍物场的随机生成不属于本包，调用方注入实现即可。
    """

    @abstractmethod
    def generate_obstacles(self, start: Point, target: Point, count: int) -> Sequence[Obstacle]:
        """
        生成一组障碍物
        :param start: 起点 (实现应避免把障碍物放在起点附近)
        :param target: 终点
        :param count: 期望的随机障碍物数量
        :return: 障碍物序列，在一个规划/控制周期内被视为只读
        """
        pass
