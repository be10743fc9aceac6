"""Tests for the TTL cache backing the sector endpoint.

Expiry is driven through the FakeClock fixture, never by sleeping.
"""

from oracle.cache import TTLCache


class TestGetSet:
    def test_round_trip(self, clock):
        cache = TTLCache('test_basic', ttl_seconds=3600, clock=clock)
        cache.set('FRA', {'count': 11})
        assert cache.get('FRA') == {'count': 11}

    def test_missing_key(self, clock):
        cache = TTLCache('test_missing', clock=clock)
        assert cache.get('DEU') is None

    def test_later_set_wins(self, clock):
        cache = TTLCache('test_overwrite', clock=clock)
        cache.set('USA', 'first')
        cache.set('USA', 'second')
        assert cache.get('USA') == 'second'

    def test_default_ttl(self):
        assert TTLCache('test_default_ttl').ttl_seconds == 300


class TestExpiry:
    def test_fresh_just_before_ttl(self, clock):
        cache = TTLCache('test_ttl_before', ttl_seconds=300, clock=clock)
        cache.set('USA', 'payload')

        clock.advance(299)
        assert cache.get('USA') == 'payload'

    def test_gone_at_ttl(self, clock):
        cache = TTLCache('test_ttl_expire', ttl_seconds=300, clock=clock)
        cache.set('USA', 'payload')

        clock.advance(300)
        assert cache.get('USA') is None

    def test_per_entry_ttl(self, clock):
        cache = TTLCache('test_custom_ttl', ttl_seconds=3600, clock=clock)
        cache.set('JPN', 'short-lived', ttl_seconds=10)
        cache.set('GBR', 'long-lived')

        clock.advance(15)
        assert cache.get('JPN') is None
        assert cache.get('GBR') == 'long-lived'


class TestEviction:
    def test_invalidate(self, clock):
        cache = TTLCache('test_invalidate', clock=clock)
        cache.set('ITA', 'payload')

        assert cache.invalidate('ITA') is True
        assert cache.get('ITA') is None
        assert cache.invalidate('ITA') is False

    def test_clear_reports_count(self, clock):
        cache = TTLCache('test_clear', clock=clock)
        for code in ('FRA', 'USA', 'CHN'):
            cache.set(code, code.lower())

        assert cache.clear() == 3
        assert cache.get('FRA') is None


class TestStats:
    def test_hit_rate(self, clock):
        cache = TTLCache('test_hit_rate', clock=clock)
        cache.set('USA', 'payload')

        cache.get('USA')
        cache.get('USA')
        cache.get('BRA')
        cache.get('BRA')

        stats = cache.stats()
        assert (stats['hits'], stats['misses'], stats['hit_rate']) == (2, 2, 0.5)

    def test_no_lookups(self, clock):
        assert TTLCache('test_zero_requests', clock=clock).stats()['hit_rate'] == 0.0

    def test_expired_entries_not_counted(self, clock):
        cache = TTLCache('test_live_entries', ttl_seconds=10, clock=clock)
        cache.set('FRA', 1)
        cache.set('USA', 2, ttl_seconds=100)

        clock.advance(50)
        assert cache.stats()['entries'] == 1


class TestRegistry:
    def test_lookup_by_name(self, clock):
        cache = TTLCache('test_registry', clock=clock)
        assert TTLCache.named('test_registry') is cache
        assert 'test_registry' in TTLCache.get_all_stats()

    def test_clear_all(self, clock):
        cache = TTLCache('test_clear_all', clock=clock)
        cache.set('FRA', 'payload')

        assert TTLCache.clear_all()['test_clear_all'] == 1
        assert cache.get('FRA') is None

    def test_unknown_name(self):
        assert TTLCache.named('unknown-cache') is None
