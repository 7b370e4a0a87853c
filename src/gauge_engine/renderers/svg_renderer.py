"""
SVG snapshot renderer

Turns DerivedOutputs into a standalone SVG document, e.g. for writing the
final state of an animation to disk or embedding it in HTML.
"""

from html import escape
from typing import Optional

from gauge_engine.geometry.path_builder import CENTER_X, CENTER_Y, VIEWPORT_SIZE
from gauge_engine.models.derived_outputs import DerivedOutputs
from gauge_engine.models.enums import LogCategory
from gauge_engine.models.gauge_config import GaugeConfig
from gauge_engine.utils.logger import get_logger

log = get_logger().for_category(LogCategory.RENDER)


def render_svg(
    outputs: DerivedOutputs,
    config: Optional[GaugeConfig] = None,
    dial_color: str = "#eeeeee",
    value_color: str = "#009688",
    text_color: str = "#999999",
    stroke_width: float = 2,
    size: Optional[int] = None,
) -> str:
    """
    Render a gauge snapshot.

    Args:
        outputs: Paths and label to draw
        config: Used for show_label (label omitted when None or False)
        dial_color: Stroke of the background track
        value_color: Stroke of the value arc
        text_color: Label fill
        stroke_width: Arc stroke width in viewport units
        size: Optional width/height attribute in px

    Returns:
        SVG markup
    """
    dims = f' width="{size}" height="{size}"' if size else ''
    lines = [
        f'<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 {VIEWPORT_SIZE} {VIEWPORT_SIZE}"{dims}>',
        f'  <path class="dial" d="{outputs.dial_arc_path}" fill="none" '
        f'stroke="{escape(dial_color)}" stroke-width="{stroke_width}"/>',
    ]

    if outputs.value_arc_path is not None:
        lines.append(
            f'  <path class="value" d="{outputs.value_arc_path}" fill="none" '
            f'stroke="{escape(value_color)}" stroke-width="{stroke_width}"/>'
        )

    if config is not None and config.show_label and outputs.label_value is not None:
        lines.append(
            f'  <text class="value-text" x="{CENTER_X}" y="{CENTER_Y}" fill="{escape(text_color)}" '
            f'font-size="100%" font-family="sans-serif" text-anchor="middle" '
            f'alignment-baseline="middle">{escape(str(outputs.label_value))}</text>'
        )

    lines.append('</svg>')
    log.debug("Rendered SVG snapshot", has_value=outputs.has_value, label=outputs.label_value)
    return "\n".join(lines)
