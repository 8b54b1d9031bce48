from dataclasses import dataclass
from typing import Optional, Tuple

@dataclass
class DepthConfig:
    policy: str = "adaptive"          # "adaptive" or "fixed"
    fixed_depth: int = 7              # reference depth for the "fixed" policy

    # Branching caps: (max legal moves, depth cap), anything wider gets wide_cap
    breakpoints: Tuple[Tuple[int, int], ...] = ((10, 5), (17, 4), (46, 3))
    narrow_limit: int = 7             # no cap at or below this many moves
    wide_cap: int = 2

    # Adaptive root depth
    base_depth: int = 7
    early_round: int = 18             # rounds before this with > narrow_limit moves
    early_depth: int = 4
    five_moves_depth: int = 8
    few_moves_depth: int = 9          # fewer than 5 moves

    # Thresholds on the time_per_move setting, in ms
    slow_time_ms: int = 4000          # below: depth capped at slow_depth
    slow_depth: int = 3
    panic_time_ms: int = 2000         # below: depth = panic_depth
    panic_depth: int = 1

@dataclass
class SearchConfig:
    max_ply: int = 64                 # size of the per-ply snapshot arena
    use_forced_win: bool = True
    log_candidates: bool = True       # DEBUG log of every root move score

@dataclass
class ArenaConfig:
    num_games: int = 20
    random_opening_plies: int = 2
    seed: Optional[int] = None

@dataclass
class Config:
    depth: Optional[DepthConfig] = None
    search: Optional[SearchConfig] = None
    arena: Optional[ArenaConfig] = None

    def __post_init__(self):
        if self.depth is None:
            self.depth = DepthConfig()
        if self.search is None:
            self.search = SearchConfig()
        if self.arena is None:
            self.arena = ArenaConfig()
