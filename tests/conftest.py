import copy
import itertools

import pytest


class FakeCursor:
    def __init__(self, docs):
        self._docs = docs

    def limit(self, n):
        return FakeCursor(self._docs[:n])

    def __iter__(self):
        return iter(self._docs)


class FakeResult:
    def __init__(self, inserted_id=None, matched_count=0):
        self.inserted_id = inserted_id
        self.matched_count = matched_count


class FakeCollection:
    """Equality-filter subset of a pymongo Collection, enough for the tasks under test."""

    _ids = itertools.count(1)

    def __init__(self):
        self.docs = []
        self.writes = []

    @staticmethod
    def _matches(doc, filt):
        return all(doc.get(k) == v for k, v in (filt or {}).items())

    def find(self, filt=None):
        return FakeCursor([copy.deepcopy(d) for d in self.docs if self._matches(d, filt)])

    def find_one(self, filt=None):
        for d in self.docs:
            if self._matches(d, filt):
                return copy.deepcopy(d)
        return None

    def count_documents(self, filt):
        return sum(1 for d in self.docs if self._matches(d, filt))

    def insert_one(self, doc):
        doc = copy.deepcopy(doc)
        doc.setdefault("_id", f"auto-{next(self._ids)}")
        self.docs.append(doc)
        return FakeResult(inserted_id=doc["_id"])

    def update_one(self, filt, update):
        self.writes.append((filt, update))
        for d in self.docs:
            if self._matches(d, filt):
                d.update(copy.deepcopy(update.get("$set", {})))
                for field in update.get("$unset", {}):
                    d.pop(field, None)
                return FakeResult(matched_count=1)
        return FakeResult()

    def replace_one(self, filt, doc, upsert=False):
        for i, d in enumerate(self.docs):
            if self._matches(d, filt):
                self.docs[i] = copy.deepcopy(doc)
                return FakeResult(matched_count=1)
        if upsert:
            self.insert_one(doc)
        return FakeResult()


class FakeDB:
    def __init__(self):
        self.collections = {}

    def __getitem__(self, name):
        return self.collections.setdefault(name, FakeCollection())

    def list_collection_names(self):
        return list(self.collections)


@pytest.fixture
def fake_db():
    return FakeDB()


@pytest.fixture
def patched_db(monkeypatch, fake_db):
    """Point the task scripts' database bootstrap at the in-memory store."""
    import database

    monkeypatch.setattr(database, "db", fake_db)
    return fake_db
