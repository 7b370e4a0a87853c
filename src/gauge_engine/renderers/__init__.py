from .svg_renderer import render_svg

__all__ = ['render_svg']
