import logging
import time

import numpy as np
import matplotlib.pyplot as plt
from scipy.spatial import ConvexHull

from convex_hull import HullAlgorithm, Point, as_points, convex_hull
from convex_hull_config import BENCHMARK_SEED, configure_logging

logger = logging.getLogger(__name__)

SIZES = (1000, 10000, 100000)
BOUNDS = (-50000, 50000)
REFERENCE = 'scipy'


def _timed(func, repeats):
    times = []
    result = None
    for _ in range(repeats):
        start = time.perf_counter()
        result = func()
        times.append(time.perf_counter() - start)
    return result, float(np.min(times))


def growth_exponent(sizes, times):
    """
    Slope of log(time) against log(n): about 1 for n log h behaviour,
    2 for quadratic behaviour.
    """
    if len(sizes) < 2:
        return None
    times = np.maximum(np.asarray(times, dtype=float), 1e-9)
    slope, _ = np.polyfit(np.log(np.asarray(sizes, dtype=float)), np.log(times), 1)
    return float(slope)


def compare_algorithms(sizes=SIZES, repeats=1, seed=None, bounds=BOUNDS, plot=False):
    """
    Time both hull algorithms and the scipy (Qhull) reference on uniform
    samples of the square `bounds` x `bounds`, one sample per size.
    Each run also checks that all three hulls have the same vertex set.
    """
    if seed is None:
        seed = BENCHMARK_SEED
    rng = np.random.default_rng(seed)

    results = {
        'sizes': list(sizes),
        'runs': [],
        'summary_stats': {}
    }

    for n in sizes:
        points = rng.uniform(bounds[0], bounds[1], size=(n, 2))
        pts = as_points(points)
        timings = {}
        vertex_sets = {}

        for algorithm in HullAlgorithm:
            hull, timings[algorithm.value] = _timed(
                lambda: convex_hull(pts, algorithm), repeats)
            vertex_sets[algorithm.value] = set(hull)

        reference, timings[REFERENCE] = _timed(lambda: ConvexHull(points), repeats)
        vertex_sets[REFERENCE] = {Point(x, y) for x, y in points[reference.vertices].tolist()}

        run = {
            'n': n,
            'hull_size': len(vertex_sets[HullAlgorithm.KIRKPATRICK_SEIDEL.value]),
            'timings': timings,
            'agree': all(s == vertex_sets[REFERENCE] for s in vertex_sets.values())
        }
        results['runs'].append(run)
        logger.info("n=%d h=%d %s", n, run['hull_size'],
                    ", ".join(f"{k}={v:.4f}s" for k, v in timings.items()))

    runs = results['runs']
    ks_times = [r['timings'][HullAlgorithm.KIRKPATRICK_SEIDEL.value] for r in runs]
    jm_times = [r['timings'][HullAlgorithm.JARVIS_MARCH.value] for r in runs]
    results['summary_stats'] = {
        'all_agree': all(r['agree'] for r in runs),
        'kirkpatrick_seidel_exponent': growth_exponent(results['sizes'], ks_times),
        'jarvis_march_exponent': growth_exponent(results['sizes'], jm_times),
        'speedups': [jm / max(ks, 1e-9) for jm, ks in zip(jm_times, ks_times)]
    }

    if plot:
        plot_timings(results)

    return results


def plot_timings(results):
    fig, ax = plt.subplots(1, 1, figsize=(8, 6))
    sizes = results['sizes']
    for name in results['runs'][0]['timings']:
        times = [r['timings'][name] for r in results['runs']]
        ax.plot(sizes, times, 'o-', linewidth=2, label=name)

    ax.set_xscale('log')
    ax.set_yscale('log')
    ax.set_xlabel('Number of points')
    ax.set_ylabel('Time (s)')
    ax.set_title('Convex hull algorithms comparison')
    ax.grid(True, alpha=0.3)
    ax.legend()

    plt.tight_layout()
    plt.show()


def print_summary(results):
    stats = results['summary_stats']
    print("\n" + "="*50)
    print("CONVEX HULL ALGORITHMS COMPARISON")
    print("="*50)
    for run in results['runs']:
        timings = "  ".join(f"{k}: {v:.4f}s" for k, v in run['timings'].items())
        print(f"n={run['n']:<8} h={run['hull_size']:<4} {timings}")
    print(f"All hulls agree: {stats['all_agree']}")
    if stats['kirkpatrick_seidel_exponent'] is not None:
        print(f"Kirkpatrick-Seidel growth exponent: {stats['kirkpatrick_seidel_exponent']:.2f}")
        print(f"Jarvis march growth exponent: {stats['jarvis_march_exponent']:.2f}")
    print(f"Speedups over Jarvis march: {', '.join(f'{s:.2f}x' for s in stats['speedups'])}")


if __name__ == "__main__":
    configure_logging('INFO')
    results = compare_algorithms(plot=True)
    print_summary(results)
