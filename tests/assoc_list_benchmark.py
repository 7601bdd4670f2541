import csv
import operator
import random
import statistics
import time

from assoc.datastructures import AssocList, diff, disj, find, fold, join, replace

eq = operator.eq

# ----------------------------
# Helper Functions
# ----------------------------

def generate_random_alist(size: int):
    """Generate an association list of `size` distinct random keys."""
    keys = random.sample(range(size * 10), size)
    return AssocList.from_pairs((k, random.randint(0, 1000000)) for k in keys)


def measure_operation_time(operation, input_size: int, iterations: int = 5):
    """Run the operation multiple times and return average + std deviation (ms)."""
    times = []
    for _ in range(iterations):
        left = generate_random_alist(input_size)
        right = generate_random_alist(input_size)
        start = time.perf_counter()
        operation(left, right)
        end = time.perf_counter()
        times.append((end - start) * 1000)  # convert to milliseconds

    avg_time = statistics.mean(times)
    std_dev = statistics.stdev(times) if len(times) > 1 else 0.0
    return avg_time, std_dev

# ----------------------------
# Operations to Benchmark
# ----------------------------

def bench_find(left, right):
    for k, _ in right.to_list()[:3]:
        find(left, k, eq)


def bench_replace(left, right):
    for k, v in right.to_list()[:3]:
        left, _ = replace(left, k, eq, v)


def bench_diff(left, right):
    diff(left, right, eq)


def bench_join(left, right):
    join(left, right, eq, operator.add)


def bench_disj(left, right):
    disj(left, right, eq, lambda a, b: (a or 0) + (b or 0))


def bench_fold(left, right):
    fold(left, 0, lambda k, v, acc: acc + v)

# ----------------------------
# Benchmark Runner
# ----------------------------

def run_benchmarks(output_file: str, base_input: int = 50, steps: int = 6):
    """Run exponential performance tests for association-list operations."""
    operations = {
        "find": bench_find,
        "replace": bench_replace,
        "diff": bench_diff,
        "join": bench_join,
        "disj": bench_disj,
        "fold": bench_fold,
    }

    # Merges are quadratic, so the size range stays modest.
    input_sizes = [base_input * (2 ** i) for i in range(steps)]

    with open(output_file, "w", newline="") as csvfile:
        writer = csv.writer(csvfile)
        writer.writerow(["Input Size", "Operation", "Average Time (ms)", "Standard Deviation (ms)"])

        for op_name, op_func in operations.items():
            for size in input_sizes:
                avg_time, std_time = measure_operation_time(op_func, size)
                writer.writerow([size, op_name, f"{avg_time:.3f}", f"{std_time:.3f}"])
                print(f"{op_name:<8} | Size: {size:<6} | Avg Time: {avg_time:.3f} ms | Std: {std_time:.3f} ms")

    print(f"\nBenchmark completed. Results saved to {output_file}")

# ----------------------------
# Main Entry Point
# ----------------------------

if __name__ == "__main__":
    run_benchmarks("assoc_list_performance.csv")
