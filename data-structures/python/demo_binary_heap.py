"""
Binary Heap Demo — Scenarios, comparison counts, heap sort timing, custom priorities.

Generates:
- viz/*.png — Individual visualization files
- report.pdf — Comprehensive PDF report
"""

import sys
import time
import operator
from pathlib import Path

import numpy as np
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
from matplotlib.backends.backend_pdf import PdfPages

sys.path.insert(0, str(Path(__file__).resolve().parent / "src"))
from binary_heap import Heap, MinHeap, MaxHeap

SEED = 42
np.random.seed(SEED)

VIZ_DIR = Path(__file__).parent / "viz"
VIZ_DIR.mkdir(exist_ok=True)
REPORT_PATH = Path(__file__).parent / "report.pdf"

COLORS = {
    "add": "#3498db",
    "extract": "#e74c3c",
    "log2": "#2c3e50",
    "repeated add": "#27ae60",
    "from_array": "#9b59b6",
    "np.sort": "#f39c12",
}

SIZES = [2 ** k for k in range(4, 15)]
TIMING_SIZES = [1_000, 2_000, 5_000, 10_000, 20_000, 50_000]


class CountingComparator:
    """Wraps a comparator and counts how often the heap consults it."""

    def __init__(self, compare):
        self.compare = compare
        self.calls = 0

    def __call__(self, a, b):
        self.calls += 1
        return self.compare(a, b)


class TaskPriority:
    """Lower priority number first; ties broken by name."""

    def __call__(self, a, b):
        return (a[0], a[1]) < (b[0], b[1])


def _drain(heap):
    result = []
    while not heap.is_empty():
        result.append(heap.extract())
    return result


def example_1_scenarios():
    """Walk through the canonical min-heap and max-heap scenarios."""
    print("=" * 60)
    print("Example 1: Min-Heap and Max-Heap Scenarios")
    print("=" * 60)

    empty = MaxHeap()
    print(f"  Empty max-heap extract(): {empty.extract()}")

    for name, heap in [("MinHeap", MinHeap()), ("MaxHeap", MaxHeap())]:
        for v in [4, 2, 9, 11]:
            heap.add(v)
        print(f"  {name}: added 4, 2, 9, 11 -> len={len(heap)}, storage={heap._data}")
        first_three = [next(heap) for _ in range(3)]
        heap.add(1)
        print(f"    first three extracted: {first_three}")
        print(f"    after add(1), next extract: {heap.extract()}")

    print()
    return []


def example_2_comparison_counts():
    """Measure comparator calls per add/extract against log2(n)."""
    print("=" * 60)
    print("Example 2: Comparisons per Operation vs log2(n)")
    print("=" * 60)

    np.random.seed(SEED)
    add_means, add_worst = [], []
    extract_means, extract_worst = [], []

    for n in SIZES:
        values = np.random.randint(0, 10 * n, size=n).tolist()
        cmp = CountingComparator(operator.lt)
        heap = Heap(cmp)

        per_add = []
        for v in values:
            before = cmp.calls
            heap.add(v)
            per_add.append(cmp.calls - before)

        per_extract = []
        while heap:
            before = cmp.calls
            heap.extract()
            per_extract.append(cmp.calls - before)

        add_means.append(np.mean(per_add))
        add_worst.append(int(np.max(per_add)))
        extract_means.append(np.mean(per_extract))
        extract_worst.append(int(np.max(per_extract)))
        print(f"  n={n:>6}: add mean={add_means[-1]:5.2f} worst={add_worst[-1]:3d} | "
              f"extract mean={extract_means[-1]:6.2f} worst={extract_worst[-1]:3d} | "
              f"log2(n)={np.log2(n):5.2f}")

    sizes = np.array(SIZES)
    fig, axes = plt.subplots(1, 2, figsize=(14, 5.5))

    ax = axes[0]
    ax.plot(sizes, add_means, "o-", color=COLORS["add"], linewidth=2, label="add (mean)")
    ax.plot(sizes, extract_means, "o-", color=COLORS["extract"], linewidth=2, label="extract (mean)")
    ax.plot(sizes, 2 * np.log2(sizes), "--", color=COLORS["log2"], linewidth=1.5, label="2·log2(n)")
    ax.set_xscale("log", base=2)
    ax.set_xlabel("Heap size n", fontsize=11)
    ax.set_ylabel("Comparator calls", fontsize=11)
    ax.set_title("Mean Comparisons per Operation", fontsize=12, fontweight="bold")
    ax.legend(fontsize=10)
    ax.grid(True, alpha=0.3)

    ax = axes[1]
    ax.plot(sizes, add_worst, "s-", color=COLORS["add"], linewidth=2, label="add (worst)")
    ax.plot(sizes, extract_worst, "s-", color=COLORS["extract"], linewidth=2, label="extract (worst)")
    ax.plot(sizes, np.log2(sizes), "--", color=COLORS["log2"], linewidth=1.5, label="log2(n)")
    ax.plot(sizes, 2 * np.log2(sizes), ":", color=COLORS["log2"], linewidth=1.5, label="2·log2(n)")
    ax.set_xscale("log", base=2)
    ax.set_xlabel("Heap size n", fontsize=11)
    ax.set_ylabel("Comparator calls", fontsize=11)
    ax.set_title("Worst-Case Comparisons per Operation", fontsize=12, fontweight="bold")
    ax.legend(fontsize=10)
    ax.grid(True, alpha=0.3)

    fig.suptitle("Binary Heap Cost Grows with log2(n)", fontsize=14, fontweight="bold", y=1.0)
    fig.tight_layout()
    fig.savefig(VIZ_DIR / "01_comparison_counts.png", dpi=150)
    plt.close(fig)

    print()
    return [VIZ_DIR / "01_comparison_counts.png"]


def example_3_heap_sort():
    """Drain heaps built two ways, check against np.sort, and time them."""
    print("=" * 60)
    print("Example 3: Heap Sort Correctness and Timing")
    print("=" * 60)

    np.random.seed(SEED)
    times = {"repeated add": [], "from_array": [], "np.sort": []}

    for n in TIMING_SIZES:
        values = np.random.randint(-n, n, size=n)
        expected = np.sort(values).tolist()
        as_list = values.tolist()

        start = time.perf_counter()
        heap = MinHeap()
        for v in as_list:
            heap.add(v)
        drained = _drain(heap)
        times["repeated add"].append(time.perf_counter() - start)
        assert drained == expected

        start = time.perf_counter()
        drained = _drain(Heap.from_array(as_list, operator.lt))
        times["from_array"].append(time.perf_counter() - start)
        assert drained == expected

        start = time.perf_counter()
        np.sort(values)
        times["np.sort"].append(time.perf_counter() - start)

        max_drained = list(Heap.from_array(as_list, operator.gt))
        assert max_drained == expected[::-1]

        print(f"  n={n:>6}: repeated add {times['repeated add'][-1] * 1e3:8.2f} ms | "
              f"from_array {times['from_array'][-1] * 1e3:8.2f} ms | "
              f"np.sort {times['np.sort'][-1] * 1e3:6.3f} ms  [sorted OK]")

    fig, ax = plt.subplots(figsize=(10, 6))
    for name, series in times.items():
        ax.plot(TIMING_SIZES, np.array(series) * 1e3, "o-", color=COLORS[name],
                linewidth=2, label=name)
    ax.set_xscale("log")
    ax.set_yscale("log")
    ax.set_xlabel("Input size n", fontsize=12)
    ax.set_ylabel("Wall-clock time (ms)", fontsize=12)
    ax.set_title("Heap Sort (build + drain) vs NumPy Sort", fontsize=14, fontweight="bold")
    ax.legend(fontsize=11)
    ax.grid(True, alpha=0.3, which="both")
    fig.tight_layout()
    fig.savefig(VIZ_DIR / "02_heap_sort_timing.png", dpi=150)
    plt.close(fig)

    print()
    return [VIZ_DIR / "02_heap_sort_timing.png"]


def example_4_custom_priority():
    """Schedule tasks with a strategy-object comparator."""
    print("=" * 60)
    print("Example 4: Custom Priority Order")
    print("=" * 60)

    tasks = [(4, "Read"), (2, "Play"), (5, "Write"), (1, "Code"), (3, "Study"), (2, "Eat")]
    heap = Heap(TaskPriority())
    for task in tasks:
        heap.add(task)

    print(f"  {'Order':<6} | {'Priority':<8} | Task")
    print("  " + "-" * 30)
    for order, (priority, name) in enumerate(heap, start=1):
        print(f"  {order:<6} | {priority:<8} | {name}")

    print()
    return []


def generate_pdf_report(all_figures):
    """Generate comprehensive PDF report with all visualizations."""
    print("=" * 60)
    print("Generating PDF Report")
    print("=" * 60)

    with PdfPages(REPORT_PATH) as pdf:
        fig, ax = plt.subplots(figsize=(10, 7))
        ax.axis("off")
        ax.text(0.5, 0.7, "Binary Heap", fontsize=28, fontweight="bold",
                ha="center", va="center", transform=ax.transAxes)
        ax.text(0.5, 0.55, "Comparator-Driven Priority Queue Report",
                fontsize=16, ha="center", va="center", transform=ax.transAxes,
                color="gray")
        ax.text(0.5, 0.40, "MinHeap | MaxHeap | Custom Comparators",
                fontsize=13, ha="center", va="center", transform=ax.transAxes,
                color="#555555")
        ax.text(0.5, 0.25, f"Seed: {SEED}  |  Pure-Python implementation",
                fontsize=11, ha="center", va="center", transform=ax.transAxes,
                color="#888888")
        fig.tight_layout()
        pdf.savefig(fig)
        plt.close(fig)

        fig, ax = plt.subplots(figsize=(10, 7))
        ax.axis("off")
        summary_text = (
            "Summary of Key Findings\n"
            "========================\n\n"
            "1. Scenarios: a min-heap fed 4, 2, 9, 11 yields 2, 4, 9 and a\n"
            "   max-heap yields 11, 9, 4. Extracting from empty gives None.\n\n"
            "2. Comparisons: add needs at most log2(n) comparator calls and\n"
            "   extract at most 2·log2(n). Mean add cost on random input stays flat.\n\n"
            "3. Heap Sort: draining a heap reproduces np.sort exactly.\n"
            "   from_array builds in O(n) instead of O(n log n).\n\n"
            "4. Custom Priorities: any two-argument callable returning a\n"
            "   bool can order the heap, including strategy objects."
        )
        ax.text(0.05, 0.95, summary_text, fontsize=11, va="top", ha="left",
                transform=ax.transAxes, family="monospace")
        fig.tight_layout()
        pdf.savefig(fig)
        plt.close(fig)

        titles = [
            "Example 2: Comparisons per Operation",
            "Example 3: Heap Sort Timing",
        ]

        for fig_path, title in zip(all_figures, titles):
            if fig_path.exists():
                img = plt.imread(str(fig_path))
                fig, ax = plt.subplots(figsize=(11, 8))
                ax.imshow(img)
                ax.axis("off")
                ax.set_title(title, fontsize=14, fontweight="bold", pad=10)
                fig.tight_layout()
                pdf.savefig(fig)
                plt.close(fig)

    print(f"  Report saved to: {REPORT_PATH}")
    print()


def main():
    print()
    print("*" * 60)
    print("  BINARY HEAP — COMPREHENSIVE DEMO")
    print(f"  Seed: {SEED}")
    print("*" * 60)
    print()

    all_figures = []

    all_figures.extend(example_1_scenarios())
    all_figures.extend(example_2_comparison_counts())
    all_figures.extend(example_3_heap_sort())
    all_figures.extend(example_4_custom_priority())

    generate_pdf_report(all_figures)

    print("=" * 60)
    print("DEMO COMPLETE")
    print("=" * 60)
    print(f"  Visualizations: {VIZ_DIR}/")
    for f in sorted(VIZ_DIR.glob("*.png")):
        print(f"    - {f.name}")
    print(f"  PDF Report:     {REPORT_PATH}")
    print()


if __name__ == "__main__":
    main()
