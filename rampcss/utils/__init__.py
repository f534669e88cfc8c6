from .interpolate_hue import hue_lerp, shortest_hue_delta, wrap_hue

__all__ = ['hue_lerp', 'shortest_hue_delta', 'wrap_hue']
