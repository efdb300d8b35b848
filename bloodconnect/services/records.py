"""
Record Stores
Data access for donor and hospital records. Every read that leaves the service
goes through PUBLIC_PROJECTION so credential hashes are never returned.
"""
from typing import List, Optional

from pymongo.errors import DuplicateKeyError

from ..errors import Conflict

PUBLIC_PROJECTION = {"_id": 0, "passwordHash": 0}


class RecordStore:
    """Shared access to one collection of account records."""

    collection_name: str = ""
    conflict_message: str = "Record already exists"

    def __init__(self, db):
        self.collection = db[self.collection_name]

    async def insert(self, doc: dict) -> None:
        """Insert a new record; the unique email index decides duplicates."""
        try:
            await self.collection.insert_one(doc)
        except DuplicateKeyError as e:
            raise Conflict(self.conflict_message) from e

    async def get(self, record_id: str) -> Optional[dict]:
        return await self.collection.find_one({"id": record_id}, PUBLIC_PROJECTION)

    async def get_credentials(self, email: str) -> Optional[dict]:
        """Full record including the password hash. Login use only."""
        return await self.collection.find_one({"email": email}, {"_id": 0})

    async def find(self, query: dict) -> List[dict]:
        return await self.collection.find(query, PUBLIC_PROJECTION).to_list(None)


class DonorStore(RecordStore):
    collection_name = "donors"
    conflict_message = "Donor already exists"

    async def search(self, blood_group: str, location: str) -> List[dict]:
        return await self.find({"bloodGroup": blood_group, "location": location})


class HospitalStore(RecordStore):
    collection_name = "hospitals"
    conflict_message = "Hospital already exists"

    async def search(self, blood_group: str, city: str) -> List[dict]:
        # any inventory entry of the type counts, whatever its unit count
        return await self.find({"city": city, "blood.type": blood_group})
