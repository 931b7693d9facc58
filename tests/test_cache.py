import threading
from datetime import datetime, timezone

import pytest

from models.cache import ServerIPCache
from models.geo import GeoRecord


def make_record(n):
    return GeoRecord(
        ip=f'192.0.2.{n}',
        city=f'city-{n}',
        country=f'country-{n}',
        last_updated=datetime.now(timezone.utc),
    )


def test_starts_empty():
    assert ServerIPCache().current_value() == GeoRecord.empty()


def test_replace_installs_whole_record():
    cache = ServerIPCache()
    record = make_record(1)
    cache.replace(record)
    assert cache.current_value() is record


def test_records_are_immutable():
    record = make_record(1)
    with pytest.raises(AttributeError):
        record.city = 'elsewhere'


def test_concurrent_writers_never_tear_records():
    cache = ServerIPCache()
    records = [make_record(n) for n in range(20)]
    seen = []
    start = threading.Barrier(len(records) + 1)

    def writer(record):
        start.wait()
        for _ in range(200):
            cache.replace(record)

    def reader():
        start.wait()
        for _ in range(2000):
            seen.append(cache.current_value())

    threads = [threading.Thread(target=writer, args=(r,)) for r in records]
    threads.append(threading.Thread(target=reader))
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    allowed = set(records) | {GeoRecord.empty()}
    assert all(record in allowed for record in seen)
    assert cache.current_value() in records
