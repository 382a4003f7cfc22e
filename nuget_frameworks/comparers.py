__all__ = ['ComparerKey', 'FullComparer', 'NameComparer', 'ProfileComparer']


def _fold(s):
    return s.casefold()


class _Comparer:
    """An equality relation over frameworks, with a matching hash function.

    Subclasses define `_key`, which reduces a framework to the parts that
    matter for the relation; equality and hashing are both derived from it so
    that they always agree."""

    def _key(self, fw):
        raise NotImplementedError()

    def equals(self, a, b):
        if a is b:
            return True
        if a is None or b is None:
            return False
        return self._key(a) == self._key(b)

    def hash(self, fw):
        if fw is None:
            return 0
        return hash(self._key(fw))

    def key(self, fw):
        return ComparerKey(self, fw)

    def __eq__(self, rhs):
        return type(self) is type(rhs)

    def __hash__(self):
        return hash(type(self))

    def __repr__(self):
        return '<{}>'.format(type(self).__name__)


class FullComparer(_Comparer):
    def _key(self, fw):
        return (_fold(fw.framework), tuple(fw.version), _fold(fw.profile))


class NameComparer(_Comparer):
    def _key(self, fw):
        return _fold(fw.framework)


class ProfileComparer(_Comparer):
    def _key(self, fw):
        return _fold(fw.profile)


class ComparerKey:
    """Wrap a framework so that sets and dicts use `comparer` for it."""

    __slots__ = ('comparer', 'framework')

    def __init__(self, comparer, framework):
        self.comparer = comparer
        self.framework = framework

    def __eq__(self, rhs):
        if not isinstance(rhs, ComparerKey) or self.comparer != rhs.comparer:
            return NotImplemented
        return self.comparer.equals(self.framework, rhs.framework)

    def __hash__(self):
        return self.comparer.hash(self.framework)

    def __repr__(self):
        return '<ComparerKey({!r}, {!r})>'.format(self.comparer,
                                                  self.framework)
