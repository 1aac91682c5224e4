from abc import ABC, abstractmethod
from typing import List, Optional

from thrustnav.types import Point
from thrustnav.planning.interfaces import IPlannerObserver


class PlannerBase(ABC):
    """
    所有路径规划器的抽象基类
    规划器只在构造时绑定障碍物/竞技场参数，调用之间无状态
    """

    @abstractmethod
    def find_path(self,
                  start: Point,
                  goal: Point,
                  observer: Optional[IPlannerObserver] = None) -> List[Point]:
        """
        执行路径规划
        :param start: 起点
        :param goal: 目标点
        :param observer: 观察者钩子 (用于可视化搜索过程)
        :return: 路径点列表 (如果失败返回空列表)
        """
        pass
