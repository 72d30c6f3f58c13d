import random
import time

from pyinstrument import Profiler
from insort import SortedMap, compare_natural


def resorting_baseline(keys):
    # what SortedMap avoids: sorting the whole key list after every insert
    store = {}
    order = []
    for key in keys:
        store[key] = key
        order = sorted(store)
    return order


def fill(keys):
    m = SortedMap(cmp=compare_natural)
    for key in keys:
        m.set(key, key)
    return m


def churn(m, keys, rng):
    for _ in range(len(keys)):
        key = rng.choice(keys)
        if not m.delete(key):
            m.set(key, key)


def benchmark_large():
    rng = random.Random(42)
    N = 20_000
    keys = list(range(N))
    rng.shuffle(keys)

    start = time.perf_counter()
    resorting_baseline(keys[:2_000])
    print(f"re-sorting baseline, 2000 inserts: {time.perf_counter() - start:.3f}s")

    profiler = Profiler()
    profiler.start()

    print(f"Filling sorted map with {N} keys...")
    m = fill(keys)
    print("Churning...")
    churn(m, keys, rng)
    print(f"Done, {m.size} keys left.")

    profiler.stop()

    profiler.print()

    # Optional: save to HTML
    with open("insort_profile.html", "w") as f:
        f.write(profiler.output_html())


if __name__ == "__main__":
    benchmark_large()
