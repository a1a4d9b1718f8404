"""Rendering pass orchestrator.

Draws a finished circuit layout onto a character canvas in five ordered
passes:

1. Active chips (bodies and identifier labels)
2. Net labels
3. Wires
4. Connection points
5. Passives

Later passes overwrite cells written by earlier ones: junction markers
replace wire glyphs and passives are drawn last so wires never hide them.
The passes never raise on odd geometry; bad input just draws badly.
"""

import logging
import math
from typing import Optional

from ..circuit.abstraction import Chip, Circuit, Line
from ..config import RenderOptions
from .canvas import Canvas
from .chip_rows import compose_row, match_pin_to_row
from .directions import Direction
from .glyphs import GlyphSet
from .transform import round_half_up

logger = logging.getLogger(__name__)

# Horizontal passives at most this many cells wide print their id bare
BARE_PASSIVE_MAX_CELLS = 3


def create_canvas(options: RenderOptions) -> Canvas:
    """Create a fresh canvas configured for one render."""
    return Canvas(
        scale_x=options.grid_scale_x,
        scale_y=options.grid_scale_y,
        show_axis_labels=options.show_axis_labels,
        glyphs=options.glyphs,
        axis_tick_interval=options.axis_tick_interval,
    )


def render_circuit(circuit: Circuit,
                   options: Optional[RenderOptions] = None,
                   canvas: Optional[Canvas] = None) -> Canvas:
    """Render a circuit snapshot into a canvas.

    Args:
        circuit: Finished layout to draw
        options: Render options (defaults if None)
        canvas: Canvas to draw into; a fresh one is created if None.
            Its scale factors are used for every pass.

    Returns:
        The populated canvas
    """
    options = options or RenderOptions()
    if canvas is None:
        canvas = create_canvas(options)

    passives = draw_chips(canvas, circuit, chip_labels=options.chip_labels)
    draw_net_labels(canvas, circuit)
    draw_lines(canvas, circuit)
    draw_connection_points(canvas, circuit)
    draw_passives(canvas, passives)

    logger.debug(
        f"Rendered {len(circuit.chips)} chips ({len(passives)} passive), "
        f"{len(circuit.lines)} lines, {len(circuit.net_labels)} labels, "
        f"{len(circuit.connection_points)} connection points"
    )
    return canvas


# --- pass 1: active chips ---------------------------------------------------


def draw_chips(canvas: Canvas, circuit: Circuit, chip_labels: bool = True):
    """Draw every active chip. Returns the passives, deferred to the last pass."""
    passives = []
    for chip in circuit.chips:
        if chip.is_passive:
            passives.append(chip)
            continue
        draw_chip(canvas, chip, chip_labels=chip_labels)
    return passives


def draw_chip(canvas: Canvas, chip: Chip, chip_labels: bool = True):
    """Draw one chip body, bottom row first."""
    transform = canvas.transform
    glyphs = canvas.glyphs

    total_rows = round_half_up(chip.height * transform.scale_y)
    total_cols = round_half_up(chip.width * transform.scale_x)

    if chip_labels and chip.top_pin_count == 0:
        label_y = chip.y + chip.height
        for i, char in enumerate(chip.chip_id):
            canvas.put_overlay(chip.x + i * transform.cell_width, label_y, char)

    col0, row0 = transform.cell_of(chip.x, chip.y)

    for r in range(total_rows):
        row = row0 + r
        left_pin = right_pin = None
        if 0 < r < total_rows - 1:
            left_pin = match_pin_to_row(chip.left_pins, row, transform)
            right_pin = match_pin_to_row(chip.right_pins, row, transform)

        text = compose_row(r, total_rows, total_cols - 2, left_pin, right_pin, glyphs)
        for c, char in enumerate(text):
            x, y = transform.coord_of(col0 + c, row)
            canvas.put_overlay(x, y, char)


# --- pass 2: net labels -----------------------------------------------------


def draw_net_labels(canvas: Canvas, circuit: Circuit):
    """Draw net labels abbreviated to their first character."""
    for label in circuit.net_labels:
        if label.net_id:
            canvas.put_overlay(label.x, label.y, label.net_id[0])


# --- pass 3: wires ----------------------------------------------------------


def draw_lines(canvas: Canvas, circuit: Circuit):
    for line in circuit.lines:
        draw_line(canvas, line)


def draw_line(canvas: Canvas, line: Line):
    """Register wire edges for an axis-aligned segment.

    Endpoints get a single edge pointing along the wire; cells strictly
    between get both directions.
    """
    transform = canvas.transform
    start, end = line.start, line.end

    if line.is_degenerate:
        return

    if line.is_vertical:
        x = start.x
        ascending = start.y < end.y
        canvas.add_edge(x, start.y, Direction.UP if ascending else Direction.DOWN)
        canvas.add_edge(x, end.y, Direction.DOWN if ascending else Direction.UP)

        row_min = transform.row(min(start.y, end.y))
        row_max = transform.row(max(start.y, end.y))
        for row in range(row_min + 1, row_max):
            y = row * transform.cell_height
            canvas.add_edge(x, y, Direction.UP)
            canvas.add_edge(x, y, Direction.DOWN)

    elif line.is_horizontal:
        y = start.y
        ascending = start.x < end.x
        canvas.add_edge(start.x, y, Direction.RIGHT if ascending else Direction.LEFT)
        canvas.add_edge(end.x, y, Direction.LEFT if ascending else Direction.RIGHT)

        col_min = transform.col(min(start.x, end.x))
        col_max = transform.col(max(start.x, end.x))
        for col in range(col_min + 1, col_max):
            x = col * transform.cell_width
            canvas.add_edge(x, y, Direction.LEFT)
            canvas.add_edge(x, y, Direction.RIGHT)

    else:
        logger.debug(
            f"Skipping diagonal line ({start.x}, {start.y}) -> ({end.x}, {end.y})"
        )


# --- pass 4: connection points ----------------------------------------------


def draw_connection_points(canvas: Canvas, circuit: Circuit):
    """Draw explicit junction markers over the wires."""
    for point in circuit.connection_points:
        if point.show_as_intersection:
            canvas.put_overlay(point.x, point.y, canvas.glyphs.junction)


# --- pass 5: passives -------------------------------------------------------


def draw_passives(canvas: Canvas, passives):
    for chip in passives:
        draw_passive(canvas, chip)


def draw_passive(canvas: Canvas, chip: Chip):
    """Draw a passive centered on its position.

    Horizontal passives (any left/right pins) print their id inline, in
    brackets once wider than three cells. Vertical passives print end caps
    with the id between them.
    """
    if chip.left_pin_count > 0 or chip.right_pin_count > 0:
        _draw_horizontal_passive(canvas, chip, canvas.glyphs)
    else:
        _draw_vertical_passive(canvas, chip, canvas.glyphs)


def _draw_horizontal_passive(canvas: Canvas, chip: Chip, glyphs: GlyphSet):
    cell_width = canvas.transform.cell_width
    cells_possible = chip.width * canvas.scale_x
    # Cell count of a walk from the left edge in cell-width steps
    cell_count = max(0, math.ceil(cells_possible - 1e-9))
    start_x = chip.x - chip.width / 2
    chip_id = chip.chip_id

    for c in range(cell_count):
        x = start_x + c * cell_width
        if cells_possible <= BARE_PASSIVE_MAX_CELLS:
            if c < len(chip_id):
                canvas.put_overlay(x, chip.y, chip_id[c])
        elif c == 0:
            canvas.put_overlay(x, chip.y, glyphs.passive_open)
        elif c == cell_count - 1:
            canvas.put_overlay(x, chip.y, glyphs.passive_close)
        elif c - 1 < len(chip_id):
            # Interior cell c shows chip_id[c - 1]
            canvas.put_overlay(x, chip.y, chip_id[c - 1])


def _draw_vertical_passive(canvas: Canvas, chip: Chip, glyphs: GlyphSet):
    half_height = chip.height / 2
    canvas.put_overlay(chip.x, chip.y - half_height, glyphs.passive_cap_low)
    if chip.chip_id:
        canvas.put_overlay(chip.x, chip.y, chip.chip_id[0])
    if len(chip.chip_id) > 1:
        canvas.put_overlay(
            chip.x + canvas.transform.cell_width, chip.y, chip.chip_id[1]
        )
    canvas.put_overlay(chip.x, chip.y + half_height, glyphs.passive_cap_high)
