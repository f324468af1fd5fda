"""
Timing and memory benchmark for MinHeap.

Each operation runs over exponentially growing random inputs; every run
records wall time and the memory held by the heap it leaves behind. The
summary per (operation, size) goes to a CSV file.

Usage:
    python -m benchmarks.heap_benchmark
"""

import csv
import random
import statistics
import sys
import time

from minheap import MinHeap

FIELDS = [
    "Input Size",
    "Operation",
    "Average Time (ms)",
    "Standard Deviation (ms)",
    "Average Space (bytes)",
]

# ----------------------------
# Measurement
# ----------------------------

def heap_footprint(heap: MinHeap) -> int:
    """Bytes held by the heap object, its backing list and the stored items."""
    items = heap.breadth_first_view()
    return sys.getsizeof(heap) + sys.getsizeof(items) + sum(map(sys.getsizeof, items))

def measure(operation, input_size: int, iterations: int = 5, rng=None):
    """Time *operation* on fresh random inputs; return (mean ms, stdev ms, mean bytes)."""
    rng = rng or random.Random()
    times, spaces = [], []
    for _ in range(iterations):
        data = [rng.randint(0, 1000000) for _ in range(input_size)]
        start = time.perf_counter()
        heap = operation(data)
        times.append((time.perf_counter() - start) * 1000)
        spaces.append(heap_footprint(heap))

    std = statistics.stdev(times) if len(times) > 1 else 0.0
    return statistics.mean(times), std, statistics.mean(spaces)

# ----------------------------
# Operations to Benchmark
# ----------------------------

def bench_insert(data):
    heap = MinHeap()
    for item in data:
        heap.insert(item)
    return heap

def bench_extract_minimum(data):
    heap = MinHeap(data)
    while heap:
        heap.extract_minimum()
    return heap

def bench_breadth_first_view(data):
    heap = MinHeap(data)
    for _ in range(3):
        heap.breadth_first_view()
    return heap

OPERATIONS = {
    "insert": bench_insert,
    "extract_minimum": bench_extract_minimum,
    "breadth_first_view": bench_breadth_first_view,
}

# ----------------------------
# Benchmark Runner
# ----------------------------

def run_benchmarks(output_file: str, base_input: int = 100, steps: int = 12, seed=None):
    """Benchmark every operation at sizes base_input * 2**k for k < steps."""
    rng = random.Random(seed)
    sizes = [base_input << k for k in range(steps)]

    with open(output_file, "w", newline="") as csvfile:
        writer = csv.DictWriter(csvfile, fieldnames=FIELDS)
        writer.writeheader()
        for name, operation in OPERATIONS.items():
            for size in sizes:
                avg_ms, std_ms, avg_bytes = measure(operation, size, rng=rng)
                writer.writerow(dict(zip(FIELDS, [
                    size, name, f"{avg_ms:.3f}", f"{std_ms:.3f}", f"{avg_bytes:.0f}",
                ])))
                print(f"{name:<18} n={size:<8} {avg_ms:9.3f} ms (+/- {std_ms:.3f})  {avg_bytes:.0f} B")

    print(f"\nBenchmark completed. Results saved to {output_file}")

# ----------------------------
# Main Entry Point
# ----------------------------

if __name__ == "__main__":
    run_benchmarks("min_heap_performance.csv", base_input=100)
