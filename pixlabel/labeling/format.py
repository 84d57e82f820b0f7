"""Formatting for labeling results."""

from pixlabel.core.format import (
    adjust_separators,
    attach_format,
    format_footer,
    format_kv_line,
    format_section_header,
    format_title,
    make_table,
)

from .results import LabelResult

MAX_TABLE_ROWS = 20


def format_label_result(result: LabelResult) -> str:
    """Format a labeling result for display."""
    height, width = result.shape
    lines = []

    lines.extend(format_title("Connected Component Labeling"))
    lines.append(format_kv_line("Grid", f"{height} x {width}"))
    lines.append(format_kv_line("Connectivity", result.connectivity))
    lines.append(format_kv_line("Method", result.method))
    if result.method == "relaxation":
        lines.append(format_kv_line("Sweeps", result.n_sweeps))
    lines.append(format_kv_line("Components", result.n_components))

    if result.n_components > 0:
        sizes = result.component_sizes()
        boxes = result.bounding_boxes()
        shown = min(result.n_components, MAX_TABLE_ROWS)

        rows = []
        for k in range(shown):
            min_row, min_col, max_row, max_col = boxes[k]
            rows.append([k + 1, int(sizes[k + 1]), f"({min_row}, {min_col})", f"({max_row}, {max_col})"])

        lines.extend(format_section_header("Components"))
        lines.append("")
        lines.extend(make_table(["Label", "Cells", "Top-left", "Bottom-right"], rows).split("\n"))
        if shown < result.n_components:
            lines.append(f" ... {result.n_components - shown} more components not shown")

    background = int((result.labels == 0).sum())
    lines.extend(format_footer(f"Background cells: {background}"))

    lines = adjust_separators(lines)
    return "\n".join(lines)


attach_format(LabelResult, format_label_result)
