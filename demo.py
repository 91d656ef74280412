"""
Priority Heap Demo -- Min/max peeks on sample data, FIFO stability,
build/drain timing, and a drawing of the implicit binary tree.

Generates:
- viz/*.png -- Individual visualization files
- report.pdf -- Comprehensive PDF report
"""

import sys
import time
from pathlib import Path

import numpy as np
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
from matplotlib.backends.backend_pdf import PdfPages

sys.path.insert(0, str(Path(__file__).resolve().parent / "src"))
from priority_heap import PriorityHeap, MIN, MAX

SEED = 42
np.random.seed(SEED)

VIZ_DIR = Path(__file__).parent / "viz"
VIZ_DIR.mkdir(exist_ok=True)
REPORT_PATH = Path(__file__).parent / "report.pdf"

COLORS = {
    "blue": "#3498db",
    "red": "#e74c3c",
    "orange": "#f39c12",
    "green": "#27ae60",
    "dark": "#2c3e50",
}

SAMPLE_ENTRIES = [
    (3, "three"), (56, "large"), (89, "largest"), (4, "four"),
    (2, "two"), (1, "smallest"), (5, "middling"),
]

SIZES = [1_000, 2_000, 4_000, 8_000, 16_000, 32_000]


# ---------------------------------------------------------------------------
# Example 1: Min vs Max on Sample Data
# ---------------------------------------------------------------------------
def example_1_min_max_peek():
    """Bulk-load the same entries into a min and a max heap and compare roots."""
    print("=" * 60)
    print("Example 1: Min vs Max Ordering")
    print("=" * 60)

    min_heap = PriorityHeap(MIN)
    min_heap.from_array(SAMPLE_ENTRIES)
    max_heap = PriorityHeap(MAX)
    max_heap.from_array(SAMPLE_ENTRIES)

    print(f"\n  Input: {SAMPLE_ENTRIES}")
    print(f"  min peek(): {min_heap.peek()}")
    print(f"  max peek(): {max_heap.peek()}")
    print(f"\n  min storage: {min_heap.to_array()}")
    print(f"  max storage: {max_heap.to_array()}")
    print(f"\n  min drain: {[p for p, _ in min_heap]}")
    print(f"  max drain: {[p for p, _ in max_heap]}")

    return min_heap, max_heap


# ---------------------------------------------------------------------------
# Example 2: Stability
# ---------------------------------------------------------------------------
def example_2_stability():
    """Equal priorities come out in insertion order."""
    print("\n" + "=" * 60)
    print("Example 2: FIFO Stability on Equal Priorities")
    print("=" * 60)

    heap = PriorityHeap()
    jobs = [(2, "backup"), (1, "page-oncall"), (2, "reindex"), (1, "failover"), (2, "rotate-logs")]
    for priority, name in jobs:
        heap.push(priority, name)

    order = []
    while not heap.is_empty():
        order.append(heap.pop())
    print(f"\n  Pushed:    {jobs}")
    print(f"  Extracted: {order}")

    replaced = heap.replace(0, "only")
    print(f"\n  replace() on empty heap returned {replaced}, size is now {heap.size()}")
    removed = heap.remove_if(lambda entry: entry[1] == "missing")
    print(f"  remove_if() with no match returned {removed}")


# ---------------------------------------------------------------------------
# Example 3: Build and Drain Timing
# ---------------------------------------------------------------------------
def _time_it(fn, n_runs=3):
    runs = []
    for _ in range(n_runs):
        t0 = time.perf_counter()
        fn()
        runs.append(time.perf_counter() - t0)
    return float(np.median(runs)) * 1000


def example_3_timing():
    """Repeated push vs bottom-up from_array vs popping everything."""
    print("\n" + "=" * 60)
    print("Example 3: Build and Drain Timing")
    print("=" * 60)

    push_ms = []
    bulk_ms = []
    drain_ms = []

    print(f"\n  {'Size':>8} {'push x n (ms)':>15} {'from_array (ms)':>17} {'pop x n (ms)':>14}")
    print(f"  {'-'*58}")

    for n in SIZES:
        priorities = np.random.randint(0, 1_000_000, size=n).tolist()
        entries = [(p, i) for i, p in enumerate(priorities)]

        def build_by_push():
            heap = PriorityHeap()
            for p, v in entries:
                heap.push(p, v)

        def build_bulk():
            PriorityHeap().from_array(entries)

        def drain():
            heap = PriorityHeap(entries=entries)
            while heap.pop() is not None:
                pass

        push_ms.append(_time_it(build_by_push))
        bulk_ms.append(_time_it(build_bulk))
        drain_ms.append(_time_it(drain))
        print(f"  {n:>8} {push_ms[-1]:>15.2f} {bulk_ms[-1]:>17.2f} {drain_ms[-1]:>14.2f}")

    fig, axes = plt.subplots(1, 2, figsize=(13, 5))

    ax = axes[0]
    ax.plot(SIZES, push_ms, "o-", color=COLORS["blue"], label="push x n")
    ax.plot(SIZES, bulk_ms, "s-", color=COLORS["green"], label="from_array")
    ax.plot(SIZES, drain_ms, "^-", color=COLORS["red"], label="pop x n")
    ax.set_xscale("log")
    ax.set_yscale("log")
    ax.set_xlabel("Heap size")
    ax.set_ylabel("Time (ms, median of 3)")
    ax.set_title("Build and drain cost")
    ax.legend()
    ax.grid(True, alpha=0.3)

    ax = axes[1]
    per_item = np.array(drain_ms) / np.array(SIZES) * 1000
    ax.plot(SIZES, per_item, "^-", color=COLORS["red"], label="pop (us / item)")
    ax.plot(SIZES, np.log2(SIZES) * per_item[0] / np.log2(SIZES[0]), "--",
            color=COLORS["dark"], alpha=0.6, label="log2(n) reference")
    ax.set_xscale("log")
    ax.set_xlabel("Heap size")
    ax.set_ylabel("Microseconds per pop")
    ax.set_title("Per-pop cost grows as O(log n)")
    ax.legend()
    ax.grid(True, alpha=0.3)

    fig.suptitle("Priority Heap: Timing", fontsize=14, fontweight="bold")
    fig.tight_layout()
    fig.savefig(VIZ_DIR / "02_timing.png", dpi=150, bbox_inches="tight")
    plt.close(fig)
    print(f"\n  Saved: viz/02_timing.png")


# ---------------------------------------------------------------------------
# Example 4: Implicit Tree Layout
# ---------------------------------------------------------------------------
def _draw_tree(ax, heap, color, title):
    entries = heap.to_array()
    positions = []
    for i in range(len(entries)):
        depth = int(np.floor(np.log2(i + 1)))
        slot = i + 1 - 2 ** depth
        positions.append(((slot + 0.5) / 2 ** depth, -depth))

    for i in range(1, len(entries)):
        parent = (i - 1) // 2
        (x0, y0), (x1, y1) = positions[parent], positions[i]
        ax.plot([x0, x1], [y0, y1], color=COLORS["dark"], alpha=0.5, zorder=1)

    for i, ((priority, value), (x, y)) in enumerate(zip(entries, positions)):
        ax.scatter([x], [y], s=1800, color=color, alpha=0.85, zorder=2)
        ax.text(x, y, f"{priority}\n{value}", ha="center", va="center",
                fontsize=8, color="white", fontweight="bold", zorder=3)
        ax.text(x, y - 0.32, f"[{i}]", ha="center", va="center", fontsize=7,
                color="gray")

    ax.set_title(title)
    ax.set_xlim(0, 1)
    ax.set_ylim(-3, 0.5)
    ax.axis("off")


def example_4_tree_layout(min_heap, max_heap):
    """Draw storage index i at parent (i-1)//2 for both orderings."""
    print("\n" + "=" * 60)
    print("Example 4: Implicit Binary Tree")
    print("=" * 60)

    fig, axes = plt.subplots(1, 2, figsize=(14, 5))
    _draw_tree(axes[0], min_heap, COLORS["blue"], f"min heap, peek() = {min_heap.peek()}")
    _draw_tree(axes[1], max_heap, COLORS["orange"], f"max heap, peek() = {max_heap.peek()}")
    fig.suptitle("Priority Heap: from_array on Sample Data", fontsize=14, fontweight="bold")
    fig.tight_layout()
    fig.savefig(VIZ_DIR / "01_sample_trees.png", dpi=150, bbox_inches="tight")
    plt.close(fig)
    print(f"\n  Saved: viz/01_sample_trees.png")


# ---------------------------------------------------------------------------
# PDF Report
# ---------------------------------------------------------------------------
def generate_pdf_report():
    print("\n" + "=" * 60)
    print("Generating PDF Report")
    print("=" * 60)

    viz_files = sorted(VIZ_DIR.glob("*.png"))

    with PdfPages(str(REPORT_PATH)) as pdf:
        fig, ax = plt.subplots(figsize=(11, 8.5))
        ax.axis("off")
        ax.text(0.5, 0.78, "Priority Heap", fontsize=28, fontweight="bold",
                ha="center", va="center", transform=ax.transAxes)
        ax.text(0.5, 0.68, "Array-backed binary heap with stable min/max ordering",
                fontsize=13, ha="center", va="center", transform=ax.transAxes, color="gray")
        info_text = (
            "Entries are (priority, value) pairs stored in a dense list.\n"
            "Node i has children 2i+1 and 2i+2 and parent (i-1)//2.\n"
            "Equal priorities are broken by insertion sequence number.\n\n"
            "This demo covers:\n"
            "  1. Min vs max ordering on the same sample data\n"
            "  2. FIFO stability on equal priorities\n"
            "  3. Build and drain timing\n"
            "  4. The implicit binary tree behind to_array()\n\n"
            f"Random seed: {SEED}\n"
            f"Number of visualizations: {len(viz_files)}"
        )
        ax.text(0.5, 0.32, info_text, fontsize=11, ha="center", va="center",
                transform=ax.transAxes, linespacing=1.6)
        ax.text(0.5, 0.06, "Generated by demo.py", fontsize=10, ha="center",
                va="center", transform=ax.transAxes, style="italic", color="gray")
        pdf.savefig(fig)
        plt.close(fig)

        for viz_file in viz_files:
            fig = plt.figure(figsize=(11, 8.5))
            title = viz_file.stem.replace("_", " ").title()
            fig.suptitle(title, fontsize=14, fontweight="bold", y=0.98)
            img = plt.imread(str(viz_file))
            ax = fig.add_axes([0.02, 0.02, 0.96, 0.92])
            ax.imshow(img)
            ax.axis("off")
            pdf.savefig(fig)
            plt.close(fig)

    print(f"  Report saved: report.pdf ({len(viz_files) + 1} pages)")


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------
def main():
    print("Priority Heap Demo")
    print("=" * 60)
    print(f"Seed: {SEED}")
    print()

    min_heap, max_heap = example_1_min_max_peek()
    example_2_stability()
    example_3_timing()
    example_4_tree_layout(min_heap, max_heap)
    generate_pdf_report()

    print("\n" + "=" * 60)
    print("All examples completed successfully.")
    print(f"Visualizations: {VIZ_DIR}/")
    print(f"Report: {REPORT_PATH}")
    print("=" * 60)


if __name__ == "__main__":
    main()
