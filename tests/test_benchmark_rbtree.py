import bisect
import random

import pytest

from llrb import RedBlackBST

SIZES = [1000, 10000]


def build_tree(keys):
    tree = RedBlackBST()
    for key in keys:
        tree.put(key, key)
    return tree


def build_sorted_list(keys):
    # baseline: a plain sorted list kept in order with bisect
    ordered = []
    for key in keys:
        bisect.insort(ordered, key)
    return ordered


@pytest.fixture(scope="session")
def random_keys():
    rng = random.Random(0)
    yield {size: rng.sample(range(size * 10), size) for size in SIZES}


@pytest.mark.benchmark
@pytest.mark.parametrize("size", SIZES)
def test_put(benchmark, random_keys, size):
    benchmark(build_tree, random_keys[size])


@pytest.mark.benchmark
@pytest.mark.parametrize("size", SIZES)
def test_sorted_list_insert(benchmark, random_keys, size):
    benchmark(build_sorted_list, random_keys[size])


@pytest.mark.benchmark
@pytest.mark.parametrize("size", SIZES)
def test_get(benchmark, random_keys, size):
    keys = random_keys[size]
    tree = build_tree(keys)

    def lookup():
        for key in keys:
            tree.get(key)

    benchmark(lookup)


@pytest.mark.benchmark
@pytest.mark.parametrize("size", SIZES)
def test_rank_select(benchmark, random_keys, size):
    tree = build_tree(random_keys[size])

    def rank_select():
        for i in range(tree.size()):
            tree.rank(tree.select(i))

    benchmark(rank_select)


@pytest.mark.benchmark
@pytest.mark.parametrize("size", SIZES)
def test_delete_all(benchmark, random_keys, size):
    keys = random_keys[size]

    def setup():
        return (build_tree(keys), list(keys)), {}

    def delete_all(tree, order):
        for key in order:
            tree.delete(key)

    benchmark.pedantic(delete_all, setup=setup, rounds=5)
