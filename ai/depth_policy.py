"""
Search depth selection.

Two pieces:
  - branching_cap: per-node cap from the number of legal moves (always applied
    inside the search, depth only ever shrinks as the tree widens)
  - DepthPolicy: root depth, either a fixed value or adaptive from move count,
    round number and the per-move time budget
"""
from typing import Optional

from config import DepthConfig


def branching_cap(num_moves: int, config: DepthConfig = None) -> Optional[int]:
    """Depth cap for a node with num_moves children, None when narrow enough."""
    config = config or DepthConfig()
    if num_moves <= config.narrow_limit:
        return None
    for max_moves, cap in config.breakpoints:
        if num_moves <= max_moves:
            return cap
    return config.wide_cap


def capped_depth(depth: int, num_moves: int, config: DepthConfig = None) -> int:
    cap = branching_cap(num_moves, config)
    return depth if cap is None else min(cap, depth)


class DepthPolicy:
    """Chooses the root search depth."""

    POLICIES = ('fixed', 'adaptive')

    def __init__(self, config: DepthConfig = None):
        self.config = config or DepthConfig()
        if self.config.policy not in self.POLICIES:
            raise ValueError(f"Unknown depth policy: {self.config.policy}")

    def root_depth(self, num_moves: int, round_number: int = 0, time_budget_ms: Optional[int] = None) -> int:
        if self.config.policy == 'fixed':
            return self.config.fixed_depth
        return self.adaptive_depth(num_moves, round_number, time_budget_ms)

    def adaptive_depth(self, num_moves: int, round_number: int = 0, time_budget_ms: Optional[int] = None) -> int:
        cfg = self.config

        if round_number < cfg.early_round and num_moves > cfg.narrow_limit:
            return cfg.early_depth

        if num_moves == 5:
            depth = cfg.five_moves_depth
        elif num_moves < 5:
            depth = cfg.few_moves_depth
        else:
            depth = capped_depth(cfg.base_depth, num_moves, cfg)

        if time_budget_ms is not None:
            # Panic depth only reaches depths already at or below slow_depth
            if time_budget_ms < cfg.slow_time_ms and depth > cfg.slow_depth:
                depth = cfg.slow_depth
            elif time_budget_ms < cfg.panic_time_ms:
                depth = cfg.panic_depth

        return depth
