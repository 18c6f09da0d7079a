"""
Restorable Heap Demo -- Stress scenario walkthrough, live/graveyard trace over
random operations, and restore-vs-rebuild timing.

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
from restorable_heap import RestorableHeap, EmptyQueueError

SEED = 42
np.random.seed(SEED)

VIZ_DIR = Path(__file__).parent / "viz"
VIZ_DIR.mkdir(exist_ok=True)

COLORS = {
    "blue": "#3498db",
    "red": "#e74c3c",
    "orange": "#f39c12",
    "green": "#27ae60",
    "purple": "#9b59b6",
    "dark": "#2c3e50",
}

STRESS_VALUES = [15, 5, 4, 3, 8, 99, 17, -12, 43, 45, 0, 67, 83, 22]
EXTRA_VALUES = [4, 2, 8, 5]
TRACE_STEPS = 400
GRAVEYARD_SIZES = [100, 200, 400, 800, 1600, 3200]


# ---------------------------------------------------------------------------
# Example 1: Stress Scenario
# ---------------------------------------------------------------------------
def example_1_stress_scenario():
    """Walk the heap through pops, collection, restoration and clearing."""
    print("=" * 60)
    print("Example 1: Stress Scenario")
    print("=" * 60)

    heap = RestorableHeap(STRESS_VALUES)
    steps = []

    def record(label):
        print(f"  {heap.dump()}")
        steps.append((label, heap.length(), heap.capacity()))

    for v in EXTRA_VALUES:
        heap.insert(v)
    record("build")

    for _ in range(7):
        print(f"  Popped: {heap.pop()}")
        record("pop")
    print("-" * 20)

    print("  Collecting Garbage...")
    heap.collect_garbage()
    record("collect")

    print("  Restoring...")
    heap.restore_heap()
    record("restore")

    print(f"  Popped: {heap.pop()}")
    record("pop")

    print("  Restoring...")
    heap.restore_heap()
    record("restore")

    heap.insert(999)
    record("insert")

    print("  Collecting Garbage...")
    heap.collect_garbage()
    record("collect")

    print("  Restoring...")
    heap.restore_heap()
    record("restore")

    print("  Clearing...")
    heap.clear()
    record("clear")

    for v in [-4, 27, 8, 9]:
        heap.insert(v)
    record("insert")

    heap.clear()
    for op in (heap.pop, heap.peek):
        try:
            op()
        except EmptyQueueError as e:
            print(f"  {op.__name__}() on empty heap: {e}")

    labels = [s[0] for s in steps]
    lengths = np.array([s[1] for s in steps])
    capacities = np.array([s[2] for s in steps])
    x = np.arange(len(steps))

    fig, ax = plt.subplots(figsize=(14, 6))
    ax.bar(x, lengths, 0.6, label="Live (length)", color=COLORS["blue"], edgecolor="white")
    ax.bar(x, capacities - lengths, 0.6, bottom=lengths, label="Graveyard",
           color=COLORS["orange"], edgecolor="white")
    ax.set_xticks(x)
    ax.set_xticklabels(labels, rotation=45, ha="right", fontsize=8)
    ax.set_ylabel("Elements")
    ax.set_title("Backing Store Split per Step\nPops grow the graveyard; collect and restore empty it",
                 fontsize=10, fontweight="bold")
    ax.legend(fontsize=9)
    ax.grid(True, alpha=0.3, axis="y")

    plt.tight_layout()
    fig.savefig(VIZ_DIR / "01_stress_scenario.png", dpi=150, bbox_inches="tight")
    plt.close(fig)
    print("  Saved: 01_stress_scenario.png")


# ---------------------------------------------------------------------------
# Example 2: Random Operation Trace
# ---------------------------------------------------------------------------
def example_2_operation_trace():
    """Track length and capacity across a random mix of operations."""
    print("\n" + "=" * 60)
    print("Example 2: Random Operation Trace")
    print("=" * 60)

    np.random.seed(SEED)
    ops = np.random.choice(["insert", "pop", "collect", "restore"], size=TRACE_STEPS,
                           p=[0.5, 0.4, 0.05, 0.05])
    values = np.random.randint(-1000, 1000, size=TRACE_STEPS)

    heap = RestorableHeap()
    lengths = np.zeros(TRACE_STEPS, dtype=int)
    capacities = np.zeros(TRACE_STEPS, dtype=int)
    popped = []
    counts = {name: 0 for name in ("insert", "pop", "collect", "restore")}

    for step, (op, value) in enumerate(zip(ops, values)):
        if op == "insert":
            heap.insert(int(value))
        elif op == "pop" and heap:
            popped.append(heap.pop())
        elif op == "collect":
            heap.collect_garbage()
        elif op == "restore":
            heap.restore_heap()
        counts[op] += 1
        lengths[step] = heap.length()
        capacities[step] = heap.capacity()

    assert np.all(capacities >= lengths), "capacity fell below length"
    print(f"  Operations: {counts}")
    print(f"  Final length: {heap.length()}, capacity: {heap.capacity()}")
    print(f"  Max graveyard size: {int(np.max(capacities - lengths))}")

    fig, axes = plt.subplots(1, 2, figsize=(16, 6))
    steps = np.arange(TRACE_STEPS)

    axes[0].fill_between(steps, 0, lengths, color=COLORS["blue"], alpha=0.6, label="Live")
    axes[0].fill_between(steps, lengths, capacities, color=COLORS["orange"], alpha=0.6,
                         label="Graveyard")
    for name, color in (("collect", COLORS["red"]), ("restore", COLORS["green"])):
        marks = steps[ops == name]
        axes[0].vlines(marks, 0, capacities.max(), color=color, alpha=0.4, linewidth=0.8,
                       label=name)
    axes[0].set_xlabel("Step")
    axes[0].set_ylabel("Elements")
    axes[0].set_title("Live Region vs Graveyard\nCapacity never drops below length",
                      fontsize=10, fontweight="bold")
    axes[0].legend(fontsize=9)
    axes[0].grid(True, alpha=0.3)

    axes[1].hist(capacities - lengths, bins=30, color=COLORS["purple"], edgecolor="white")
    axes[1].set_xlabel("Graveyard size")
    axes[1].set_ylabel("Steps")
    axes[1].set_title("Distribution of Graveyard Size", fontsize=10, fontweight="bold")
    axes[1].grid(True, alpha=0.3, axis="y")

    plt.tight_layout()
    fig.savefig(VIZ_DIR / "02_operation_trace.png", dpi=150, bbox_inches="tight")
    plt.close(fig)
    print("  Saved: 02_operation_trace.png")


# ---------------------------------------------------------------------------
# Example 3: Restore vs Rebuild
# ---------------------------------------------------------------------------
def example_3_restore_vs_rebuild(n_runs=5):
    """Compare restore_heap against rebuilding from a saved copy of the inputs."""
    print("\n" + "=" * 60)
    print("Example 3: Restore vs Rebuild Timing")
    print("=" * 60)

    restore_ms = []
    rebuild_ms = []

    for g in GRAVEYARD_SIZES:
        values = np.random.randint(0, 1_000_000, size=2 * g).tolist()
        restore_runs = []
        rebuild_runs = []
        for _ in range(n_runs):
            heap = RestorableHeap(values)
            for _ in range(g):
                heap.pop()
            t0 = time.perf_counter()
            heap.restore_heap()
            restore_runs.append((time.perf_counter() - t0) * 1000)
            assert heap.length() == len(values)

            t0 = time.perf_counter()
            rebuilt = RestorableHeap(values)
            rebuild_runs.append((time.perf_counter() - t0) * 1000)
            assert rebuilt.length() == len(values)

        restore_ms.append(float(np.median(restore_runs)))
        rebuild_ms.append(float(np.median(rebuild_runs)))
        print(f"  graveyard={g:>5}: restore {restore_ms[-1]:8.3f} ms, "
              f"rebuild {rebuild_ms[-1]:8.3f} ms")

    fig, ax = plt.subplots(figsize=(10, 6))
    ax.plot(GRAVEYARD_SIZES, restore_ms, "o-", color=COLORS["green"], linewidth=2,
            markersize=6, label="restore_heap()")
    ax.plot(GRAVEYARD_SIZES, rebuild_ms, "s-", color=COLORS["red"], linewidth=2,
            markersize=6, label="Rebuild from inputs")
    ax.set_xscale("log", base=2)
    ax.set_xlabel("Graveyard size (half the inserted values)")
    ax.set_ylabel("Median time (ms)")
    ax.set_title("Restore Cost vs Full Rebuild\nRestore reinserts only the popped values",
                 fontsize=10, fontweight="bold")
    ax.legend(fontsize=9)
    ax.grid(True, alpha=0.3)

    plt.tight_layout()
    fig.savefig(VIZ_DIR / "03_restore_vs_rebuild.png", dpi=150, bbox_inches="tight")
    plt.close(fig)
    print("  Saved: 03_restore_vs_rebuild.png")


# ---------------------------------------------------------------------------
# PDF Report
# ---------------------------------------------------------------------------
def generate_pdf_report():
    print("\n" + "=" * 60)
    print("Generating PDF report")
    print("=" * 60)

    report_path = Path(__file__).parent / "report.pdf"
    viz_files = sorted(VIZ_DIR.glob("*.png"))

    with PdfPages(str(report_path)) as pdf:
        fig = plt.figure(figsize=(11, 8.5))
        ax = fig.add_axes([0, 0, 1, 1])
        ax.axis("off")
        ax.text(0.5, 0.7, "Restorable Heap", fontsize=28, fontweight="bold",
                ha="center", va="center", transform=ax.transAxes)
        ax.text(0.5, 0.6, "Min-heap with a restorable graveyard of popped values",
                fontsize=14, ha="center", va="center", transform=ax.transAxes)
        summary = (
            "Backing store: [0, length) live heap | [length, capacity) graveyard\n\n"
            "pop()             moves the root past the live boundary\n"
            "collect_garbage() truncates the store to length\n"
            "restore_heap()    reinserts every graveyard value\n"
            "clear()           drops everything"
        )
        ax.text(0.5, 0.35, summary, fontsize=11, ha="center", va="center",
                transform=ax.transAxes, family="monospace", linespacing=1.5)
        pdf.savefig(fig)
        plt.close(fig)

        titles = {
            "01_stress_scenario.png": "Example 1: Stress Scenario",
            "02_operation_trace.png": "Example 2: Random Operation Trace",
            "03_restore_vs_rebuild.png": "Example 3: Restore vs Rebuild Timing",
        }

        for viz_file in viz_files:
            fig = plt.figure(figsize=(11, 8.5))
            title = titles.get(viz_file.name, viz_file.stem.replace("_", " ").title())
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
    print("Restorable Heap Demo")
    print("=" * 60)
    print(f"Seed: {SEED}")
    print()

    example_1_stress_scenario()
    example_2_operation_trace()
    example_3_restore_vs_rebuild()
    generate_pdf_report()

    print("\n" + "=" * 60)
    print("All examples completed successfully.")
    print(f"Visualizations: {VIZ_DIR}/")
    print(f"Report: {Path(__file__).parent / 'report.pdf'}")
    print("=" * 60)


if __name__ == "__main__":
    main()
