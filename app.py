# app.py
from dataclasses import asdict

import streamlit as st

from algorithms.binary_search import Variant
from algorithms.registry import PATTERN_REGISTRY, get_pattern, visualizers_for
from services.analyzer import analyze_problem
from utils.highlight import highlight_cells_html, highlight_code_html
from utils.inputs import is_sorted, parse_array, parse_number, read_uploaded_text
from utils.logging import setup_logging

setup_logging()

st.set_page_config(page_title="Pattern Lab", layout="wide")
st.title("Pattern Lab")
st.caption("Crack DSA patterns by seeing them move.")

PAGES = ["Analyze a problem"] + [p.name for p in PATTERN_REGISTRY.values()]
page = st.sidebar.radio("Go to", PAGES)


def scrub(pattern, steps, cells, window, pointers):
    """Step slider + code panel + cell strip for one precomputed trace."""
    if not steps:
        st.info("Nothing to visualize for an empty input.")
        return None
    i = st.slider("Step", 0, len(steps) - 1, 0) if len(steps) > 1 else 0
    step = steps[i]
    left, right = st.columns([1, 2])
    with left:
        st.markdown(highlight_code_html(pattern.code_lines, pattern.active_line(step)),
                    unsafe_allow_html=True)
    with right:
        l, r = window(step)
        st.markdown(highlight_cells_html(cells, l, r, pointers(step)), unsafe_allow_html=True)
        st.write(f"**Step {i + 1}/{len(steps)}**: {step.note}")
    return step


if page == "Analyze a problem":
    upload = st.file_uploader("Problem statement (.txt)", type=["txt"])
    text = st.text_area("Paste a problem description", value=read_uploaded_text(upload), height=200)
    if st.button("Analyze", disabled=not text.strip()):
        res = analyze_problem(text)
        st.subheader(f"{res.best_pattern_name} ({res.confidence}%)")
        for reason in res.top_reasons:
            st.write(f"- {reason}")
        links = [get_pattern(k).name for k in visualizers_for(res.best_pattern_id)]
        if links:
            st.write("Try the visualizer: " + ", ".join(links))
        with st.expander("Top 3 candidates"):
            st.table([asdict(p) for p in res.debug_top3])

elif page == "Binary Search":
    pattern = get_pattern("binary-search")
    st.caption(pattern.subtitle)
    arr = parse_array(st.text_input("Sorted array", "1, 3, 5, 7, 9, 11"))
    target = parse_number(st.text_input("Target", "7"))
    variant = st.selectbox("Variant", [v.value for v in Variant])
    if not is_sorted(arr):
        st.warning("Binary search assumes a sorted array.")
    step = scrub(
        pattern,
        pattern.build_steps(arr, target, variant),
        arr,
        lambda s: (s.lo, s.hi),
        lambda s: {"lo": s.lo, "mid": s.mid, "hi": s.hi, "ans": s.ans_index},
    )
    if step is not None and step.decision in ("found", "done"):
        st.success(f"Result index: {step.result_index}")

elif page == "Sliding Window":
    pattern = get_pattern("sliding-window")
    st.caption(pattern.subtitle)
    arr = parse_array(st.text_input("Array (non-negative)", "2, 1, 5, 1, 3, 2"))
    k = parse_number(st.text_input("k", "7"))
    step = scrub(
        pattern,
        pattern.build_steps(arr, k),
        arr,
        lambda s: (s.l, s.r),
        lambda s: {"l": s.l, "r": s.r},
    )
    if step is not None:
        st.write(f"sum={step.sum} · best=[{step.best_l}..{step.best_r}] len={step.best_len}")

elif page == "Substring Window":
    pattern = get_pattern("substring-window")
    st.caption(pattern.subtitle)
    s = st.text_input("String", "eceba")
    k = parse_number(st.text_input("k", "2"))
    step = scrub(
        pattern,
        pattern.build_steps(s, k),
        list(s),
        lambda w: (w.l, w.r),
        lambda w: {"l": w.l, "r": w.r},
    )
    if step is not None:
        st.write(f"distinct={step.distinct} · best=[{step.best_l}..{step.best_r}] len={step.best_len}")
        st.table([{"char": c, "count": n} for c, n in step.freq.items()])
