# ABOUTME: Repository holding the in-memory profile collection over a persistence port.
# ABOUTME: Loads tolerantly, saves after every change and never lets store failures escape.

import logging

from pydantic import TypeAdapter, ValidationError

from prospect_crm.errors import ProfileNotFoundError
from prospect_crm.models import Profile
from prospect_crm.storage import PersistencePort

logger = logging.getLogger(__name__)

_COLLECTION_ADAPTER = TypeAdapter(list[Profile])


class ProfileRepository:
    """In-memory profile collection persisted as a whole through a store.

    The in-memory list is authoritative for the session. Profiles are
    immutable values; updates swap the stored value for a new one.
    """

    DEFAULT_KEY = "profiles"

    def __init__(self, store: PersistencePort, key: str = DEFAULT_KEY) -> None:
        """Initialize the repository.

        Args:
            store: Persistence port used for load and save.
            key: Store key under which the collection is saved.
        """
        self._store = store
        self._key = key
        self._profiles: list[Profile] = []

    @property
    def profiles(self) -> list[Profile]:
        """Return a snapshot of the collection in canonical order."""
        return list(self._profiles)

    def load(self) -> list[Profile]:
        """Load the collection from the store.

        Missing or unreadable data results in an empty collection.

        Returns:
            The loaded profiles.
        """
        try:
            raw = self._store.read(self._key)
        except Exception:
            logger.warning("Could not read stored profiles; starting empty", exc_info=True)
            raw = None

        if raw is None:
            self._profiles = []
            return self.profiles

        try:
            self._profiles = _COLLECTION_ADAPTER.validate_json(raw)
        except ValidationError as e:
            logger.warning("Stored profiles are corrupt; starting empty (%d errors)", e.error_count())
            self._profiles = []

        logger.debug("Loaded %d profile(s)", len(self._profiles))
        return self.profiles

    def save(self) -> bool:
        """Write the whole collection to the store.

        Returns:
            True if the write succeeded, False if it failed and was logged.
        """
        payload = _COLLECTION_ADAPTER.dump_json(self._profiles).decode("utf-8")
        try:
            self._store.write(self._key, payload)
        except Exception:
            logger.error("Failed to save %d profile(s)", len(self._profiles), exc_info=True)
            return False
        return True

    def add(self, profile: Profile) -> Profile:
        """Insert a new profile at the front of the collection and save.

        Args:
            profile: The profile to add.

        Returns:
            The added profile.
        """
        self._profiles.insert(0, profile)
        self.save()
        return profile

    def replace(self, profile: Profile) -> Profile:
        """Swap the stored profile having the same id for a new value and save.

        A profile whose id is not in the collection is ignored.

        Args:
            profile: The updated profile.

        Returns:
            The profile passed in.
        """
        for index, existing in enumerate(self._profiles):
            if existing.id == profile.id:
                if existing != profile:
                    self._profiles[index] = profile
                    self.save()
                break
        else:
            logger.debug("Ignoring update for unknown profile %s", profile.id)
        return profile

    def get(self, reference: str) -> Profile:
        """Look up a profile by full id or unique id prefix.

        Args:
            reference: Full id or the start of one.

        Returns:
            The matching profile.

        Raises:
            ProfileNotFoundError: If no profile or more than one profile matches.
        """
        reference = reference.strip()
        for profile in self._profiles:
            if profile.id == reference:
                return profile

        matches = [p for p in self._profiles if reference and p.id.startswith(reference)]
        if len(matches) != 1:
            raise ProfileNotFoundError(reference, candidates=len(matches))
        return matches[0]
