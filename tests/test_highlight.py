from utils.highlight import highlight_cells_html, highlight_code_html


def test_code_marks_active_line():
    out = highlight_code_html(["lo = 0", "while lo <= hi:"], 1)
    assert "<mark> 2  while lo &lt;= hi:</mark>" in out
    assert "<mark> 1" not in out


def test_cells_mark_window_and_pointers():
    out = highlight_cells_html(["<a>", "b", "c"], 1, 2, {"l": 1, "mid": None, "r": 9})
    assert "&lt;a&gt;" in out
    assert "<mark>b</mark>" in out and "<mark>c</mark>" in out
    assert out.count("<mark>") == 2
    assert "<small>l</small>" in out


def test_empty_inputs():
    assert highlight_code_html([], 0) == "<em>No code</em>"
    assert highlight_cells_html([]) == "<em>No input</em>"
