import html

_MONO = "font-family:monospace"


def highlight_code_html(code_lines, active: int):
    if not code_lines:
        return "<em>No code</em>"
    out = []
    for i, line in enumerate(code_lines):
        seg = html.escape(line) or "&nbsp;"
        if i == active:
            out.append(f"<mark>{i + 1:>2}  {seg}</mark>")
        else:
            out.append(f"{i + 1:>2}  {seg}")
    return f"<div style='white-space:pre;{_MONO}'>" + "\n".join(out) + "</div>"


def highlight_cells_html(items, l: int = 0, r: int = -1, pointers=None):
    """
    Render items as a row of cells; indices l..r (inclusive) are marked as the window.
    pointers maps a label ("lo", "mid", ...) to an index shown under the cell.
    """
    if not items:
        return "<em>No input</em>"
    labels = {}
    for name, idx in (pointers or {}).items():
        if idx is not None and 0 <= idx < len(items):
            labels.setdefault(idx, []).append(name)
    cells = []
    for i, v in enumerate(items):
        body = html.escape(str(v))
        if l <= i <= r:
            body = f"<mark>{body}</mark>"
        tag = html.escape(",".join(labels.get(i, [])))
        cells.append(
            "<td style='border:1px solid #888;padding:4px 8px;text-align:center'>"
            f"{body}<br><small>{i}</small><br><small>{tag or '&nbsp;'}</small></td>"
        )
    return f"<table style='border-collapse:collapse;{_MONO}'><tr>" + "".join(cells) + "</tr></table>"
