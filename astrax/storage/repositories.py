"""
Typed repositories over a KeyValueStore.

Each repository owns one or two storage keys and (de)serializes pydantic
models as JSON. Repositories do not make domain decisions: routing, scoring
and permission checks live in services.
"""

import json
from typing import Callable, Dict, List, Optional, Type

from pydantic import BaseModel, ValidationError

from astrax.config import STORAGE_KEYS
from astrax.exceptions import NotFoundError
from astrax.schemas.application import Application, ApplicationStatus
from astrax.schemas.internship import Internship
from astrax.schemas.profile import Role, UserProfile
from astrax.seed_data import seed_internships
from astrax.storage.events import ChangeNotifier
from astrax.storage.key_value_store import KeyValueStore
from astrax.utils.logger import get_logger

logger = get_logger(__name__)


def _dump_list(items: list) -> str:
    return json.dumps([i.model_dump(mode="json") for i in items], ensure_ascii=False)


class ProfileStore:
    """Current session user plus the last saved student and recruiter profiles."""

    def __init__(self, store: KeyValueStore, keys: Optional[Dict[str, str]] = None) -> None:
        self._store = store
        self._keys = keys or STORAGE_KEYS

    def _saved_key(self, role: Role) -> str:
        return self._keys["saved_recruiter_profile"] if role == "recruiter" else self._keys["saved_profile"]

    def _read(self, key: str) -> Optional[UserProfile]:
        raw = self._store.get(key)
        if raw is None:
            return None
        try:
            return UserProfile.model_validate_json(raw)
        except ValidationError as e:
            logger.warning("Discarding unreadable profile under %s: %s", key, e)
            self._store.remove(key)
            return None

    def get_current(self) -> Optional[UserProfile]:
        """Restore the signed-in user; an unreadable entry is removed."""
        return self._read(self._keys["current_user"])

    def set_current(self, profile: UserProfile) -> None:
        self._store.set(self._keys["current_user"], profile.model_dump_json())

    def clear_current(self) -> None:
        self._store.remove(self._keys["current_user"])

    def get_saved(self, role: Role) -> Optional[UserProfile]:
        return self._read(self._saved_key(role))

    def save(self, profile: UserProfile) -> None:
        """Persist into the role-specific saved slot."""
        self._store.set(self._saved_key(profile.role), profile.model_dump_json())


class _CollectionStore:
    """
    A JSON list of one model under a single key.

    Items are validated one by one; an invalid item is skipped on read and the
    raw collection is copied to `<key>.corrupt` before the next write drops it.
    A value that is not a JSON list is moved to `<key>.corrupt` and read as empty.
    """

    model: Type[BaseModel]

    def __init__(self, store: KeyValueStore, key: str) -> None:
        self._store = store
        self._key = key

    @property
    def backup_key(self) -> str:
        return f"{self._key}.corrupt"

    def _read(self) -> Optional[list]:
        """Valid items, or None when the key is missing."""
        raw = self._store.get(self._key)
        if raw is None:
            return None
        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            data = None
            logger.warning("%s is not valid JSON: %s", self._key, e)
        if not isinstance(data, list):
            logger.warning("Moving unreadable %s to %s", self._key, self.backup_key)
            with self._store.lock:
                self._store.set(self.backup_key, raw)
                self._store.remove(self._key)
            return []

        items = []
        for i, item in enumerate(data):
            try:
                items.append(self.model.model_validate(item))
            except ValidationError as e:
                logger.warning("Skipping invalid %s entry %s: %s", self._key, i, e)
        if len(items) < len(data) and self._store.get(self.backup_key) != raw:
            self._store.set(self.backup_key, raw)
        return items

    def _write(self, items: list) -> None:
        self._store.set(self._key, _dump_list(items))


class ListingStore(_CollectionStore):
    """Internship listings; seeded with the mock feed when empty or unreadable."""

    model = Internship

    def __init__(self, store: KeyValueStore, keys: Optional[Dict[str, str]] = None) -> None:
        super().__init__(store, (keys or STORAGE_KEYS)["internships"])

    def list_all(self) -> List[Internship]:
        with self._store.lock:
            listings = self._read()
            if listings is None:
                listings = seed_internships()
                self.put_all(listings)
                logger.info("Seeded %s internships", len(listings))
            return listings if listings else seed_internships()

    def put_all(self, listings: List[Internship]) -> None:
        self._write(listings)

    def get(self, listing_id: str) -> Internship:
        for listing in self.list_all():
            if listing.id == listing_id:
                return listing
        raise NotFoundError(f"No listing with id {listing_id}")

    def add(self, listing: Internship) -> None:
        """New listings go to the top of the feed."""
        with self._store.lock:
            self.put_all([listing] + self.list_all())

    def update(self, listing: Internship) -> None:
        with self._store.lock:
            listings = self.list_all()
            if not any(l.id == listing.id for l in listings):
                raise NotFoundError(f"No listing with id {listing.id}")
            self.put_all([listing if l.id == listing.id else l for l in listings])


class ApplicationStore(_CollectionStore):
    """Submitted applications with change subscriptions for recruiter views."""

    model = Application

    def __init__(self, store: KeyValueStore, keys: Optional[Dict[str, str]] = None) -> None:
        super().__init__(store, (keys or STORAGE_KEYS)["applications"])
        self._changes: ChangeNotifier[List[Application]] = ChangeNotifier("applications")

    def list_all(self) -> List[Application]:
        return self._read() or []

    def put_all(self, applications: List[Application]) -> None:
        with self._store.lock:
            self._write(applications)
        self._changes.notify(list(applications))

    def add(self, application: Application) -> None:
        with self._store.lock:
            applications = self.list_all() + [application]
            self._write(applications)
        self._changes.notify(applications)

    def get(self, application_id: str) -> Application:
        for app in self.list_all():
            if app.id == application_id:
                return app
        raise NotFoundError(f"No application with id {application_id}")

    def update_status(self, application_id: str, status: ApplicationStatus) -> Application:
        with self._store.lock:
            apps = self.list_all()
            updated: Optional[Application] = None
            for i, app in enumerate(apps):
                if app.id == application_id:
                    updated = app.model_copy(update={"status": status})
                    apps[i] = updated
                    break
            if updated is None:
                raise NotFoundError(f"No application with id {application_id}")
            self._write(apps)
        self._changes.notify(list(apps))
        return updated

    def for_job(self, job_id: str) -> List[Application]:
        return [a for a in self.list_all() if a.job_id == job_id]

    def for_student(self, email: str) -> List[Application]:
        return [a for a in self.list_all() if a.student_id == email]

    def on_applications_changed(
        self,
        callback: Callable[[List[Application]], None],
        weak: bool = False,
    ) -> Callable[[], None]:
        """
        Call back with the full application list after every write; returns unsubscribe.
        With weak=True the store does not keep a bound-method callback's owner alive.
        """
        return self._changes.subscribe(callback, weak=weak)
