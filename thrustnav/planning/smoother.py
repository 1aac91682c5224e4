from typing import List

from thrustnav.types import Point
from thrustnav.collision import CollisionChecker
from thrustnav.map.arena import Arena


class GreedyShortcutSmoother:
    """
    Greedy furthest-visible shortcut simplifier for geometric paths.

    Starting from the first waypoint, it connects to the furthest waypoint that is
    reachable by a straight collision-free segment (scanning from the end of the
    path backwards, so longer shortcuts win), then repeats from there. The result
    never has more segments than the input and never introduces a collision the
    checker would report.
    """
    def __init__(self, collision_checker: CollisionChecker, arena: Arena):
        self.collision_checker = collision_checker
        self.arena = arena

    def simplify(self, path: List[Point]) -> List[Point]:
        if len(path) <= 2:
            return list(path)

        simplified = [path[0]]
        i = 0
        last = len(path) - 1

        while i < last:
            # Fallback: the original edge i -> i+1 was accepted by the planner
            furthest_visible = i + 1
            for j in range(last, i, -1):
                if not self.collision_checker.segment_collides(path[i], path[j], self.arena):
                    furthest_visible = j
                    break

            simplified.append(path[furthest_visible])
            i = furthest_visible

        return simplified

    @staticmethod
    def path_length(path: List[Point]) -> float:
        length = 0.0
        for k in range(len(path) - 1):
            length += path[k].distance_to(path[k + 1])
        return length
