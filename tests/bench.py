import random
import time

from algorithms.binary_search import build_binary_search_steps
from algorithms.sliding_window import build_sliding_window_steps
from algorithms.substring_window import build_substring_window_steps
from services.analyzer import analyze_problem

rng = random.Random(0)
arr = sorted(rng.randint(0, 1000) for _ in range(100_000))
vals = [rng.randint(0, 9) for _ in range(100_000)]
text = "".join(rng.choice("abcdef") for _ in range(100_000))

for name, fn in [
    ("Binary search (lower_bound)", lambda: build_binary_search_steps(arr, 500, "lower_bound")),
    ("Sliding window", lambda: build_sliding_window_steps(vals, 40)),
    ("Substring window", lambda: build_substring_window_steps(text, 3)),
]:
    t0 = time.time()
    steps = fn()
    print(name, "steps:", len(steps), "secs:", round(time.time() - t0, 4))

print("Analyzer x1000")
t0 = time.time()
for _ in range(1000):
    analyze_problem("Given a sorted array, find the longest subarray with at most k distinct elements")
print("secs:", round(time.time() - t0, 4))
