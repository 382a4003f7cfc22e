import threading
import time

from . import *

from nuget_frameworks.objutils import *


class TestHashify(TestCase):
    def test_scalar(self):
        self.assertEqual(hashify(1), 1)
        self.assertEqual(hashify('foo'), 'foo')

    def test_list(self):
        self.assertEqual(hashify([1, [2, 3]]), (1, (2, 3)))

    def test_dict(self):
        self.assertEqual(hashify({'a': [1]}), (('a', (1,)),))


class TestMemoize(TestCase):
    def test_memoize_0_args(self):
        i = 0

        @memoize
        def f():
            nonlocal i
            i += 1
            return i

        self.assertEqual(f(), 1)
        self.assertEqual(f(), 1)

    def test_memoize_1_arg(self):
        i = 0

        @memoize
        def f(j):
            nonlocal i
            i += 1
            return i + j

        self.assertEqual(f(0), 1)
        self.assertEqual(f(1), 3)
        self.assertEqual(f(0), 1)

    def test_memoize_reset(self):
        i = 0

        @memoize
        def f(j):
            nonlocal i
            i += 1
            return i + j

        self.assertEqual(f(0), 1)
        self.assertEqual(f(1), 3)
        f._reset()
        self.assertEqual(f(0), 3)
        self.assertEqual(f(1), 5)

    def test_concurrent_first_use(self):
        calls = []

        @memoize
        def f():
            calls.append(None)
            time.sleep(0.01)
            return object()

        results = []
        threads = [threading.Thread(target=lambda: results.append(f()))
                   for i in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        self.assertEqual(len(calls), 1)
        self.assertEqual(len(results), 8)
        self.assertTrue(all(i is results[0] for i in results))


class TestMemoizeMethod(TestCase):
    def test_memoize_0_args(self):
        class Foo:
            def __init__(self, i):
                self.i = i

            @memoize_method
            def fn(self):
                self.i += 1
                return self.i

        f = Foo(0)
        self.assertEqual(f.fn(), 1)
        self.assertEqual(f.fn(), 1)
        g = Foo(1)
        self.assertEqual(g.fn(), 2)
        self.assertEqual(g.fn(), 2)

    def test_memoize_1_arg(self):
        class Foo:
            def __init__(self, i):
                self.i = i

            @memoize_method
            def fn(self, j):
                self.i += 1
                return self.i + j

        f = Foo(0)
        self.assertEqual(f.fn(0), 1)
        self.assertEqual(f.fn(1), 3)
        self.assertEqual(f.fn(0), 1)

    def test_memoize_reset(self):
        class Foo:
            def __init__(self, i):
                self.i = i

            @memoize_method
            def fn(self, j):
                self.i += 1
                return self.i + j

        f = Foo(0)
        Foo.fn._reset(f)

        self.assertEqual(f.fn(0), 1)
        self.assertEqual(f.fn(1), 3)
        Foo.fn._reset(f)
        self.assertEqual(f.fn(0), 3)

    def test_concurrent_first_use(self):
        class Foo:
            def __init__(self):
                self.calls = 0

            @memoize_method
            def fn(self):
                self.calls += 1
                time.sleep(0.01)
                return object()

        f = Foo()
        results = []
        threads = [threading.Thread(target=lambda: results.append(f.fn()))
                   for i in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        self.assertEqual(f.calls, 1)
        self.assertTrue(all(i is results[0] for i in results))
