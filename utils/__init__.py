from .board_symmetry import BoardSymmetry, TRANSFORMS

__all__ = ['BoardSymmetry', 'TRANSFORMS']
