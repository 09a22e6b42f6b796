"""Compare the cost of interleaved and bursty workloads."""

from cost_analyzer import analyze
from workload import bursty_operations, random_operations


def run_cost_experiment():
    """Analyze a few workload shapes."""
    workloads = {
        "Interleaved": random_operations(1000, seed=1),
        "Insert-heavy": random_operations(1000, insert_probability=0.8, seed=2),
        "Bursty": bursty_operations(num_bursts=5, burst_size=100),
    }

    for name, operations in workloads.items():
        print(f"\n{'=' * 60}")
        print(f"Workload: {name}")
        print("=" * 60)
        analyze(operations).summary()


if __name__ == "__main__":
    run_cost_experiment()
