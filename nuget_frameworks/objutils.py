import functools
import threading

__all__ = ['hashify', 'memoize', 'memoize_method']


def hashify(thing):
    if isinstance(thing, dict):
        return tuple((hashify(k), hashify(v)) for k, v in thing.items())
    elif isinstance(thing, (list, tuple, set, frozenset)):
        return tuple(hashify(i) for i in thing)
    return thing


# Both decorators below hold a lock while computing a missing entry, so the
# wrapped function runs at most once per key even when several threads ask
# for the same value at the same time.

def memoize(fn):
    cache = {}
    lock = threading.RLock()

    @functools.wraps(fn)
    def wrapper(*args, **kwargs):
        key = (hashify(args), hashify(kwargs))
        with lock:
            if key in cache:
                return cache[key]
            result = cache[key] = fn(*args, **kwargs)
            return result

    def reset():
        with lock:
            cache.clear()

    wrapper._reset = reset
    return wrapper


def memoize_method(fn):
    cachename = '_memoize_cache_{}'.format(fn.__name__)
    class_lock = threading.Lock()

    def get_cache(self):
        with class_lock:
            try:
                return getattr(self, cachename)
            except AttributeError:
                cache = ({}, threading.RLock())
                # Use object.__setattr__ so this works on frozen classes too.
                object.__setattr__(self, cachename, cache)
                return cache

    @functools.wraps(fn)
    def wrapper(self, *args, **kwargs):
        cache, lock = get_cache(self)
        key = (hashify(args), hashify(kwargs))
        with lock:
            if key in cache:
                return cache[key]
            result = cache[key] = fn(self, *args, **kwargs)
            return result

    def reset(self):
        try:
            cache, lock = getattr(self, cachename)
        except AttributeError:
            return
        with lock:
            cache.clear()

    wrapper._reset = reset
    return wrapper
