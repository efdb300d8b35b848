"""
Blood Matching API
Open search for donors and hospitals able to supply a blood group in a location.
"""
import logging

from fastapi import APIRouter, Depends
from pymongo.errors import PyMongoError

from ..errors import Internal
from ..models import BloodSearch
from ..services import DonorStore, HospitalStore, get_donor_store, get_hospital_store

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Blood Matching"])

@router.post("/find-blood")
async def find_blood(
    search: BloodSearch,
    donor_store: DonorStore = Depends(get_donor_store),
    hospital_store: HospitalStore = Depends(get_hospital_store)
):
    """Donors with the exact group and location, plus hospitals in that city stocking the group"""
    try:
        donors = await donor_store.search(search.blood_group, search.location)
        hospitals = await hospital_store.search(search.blood_group, search.location)
    except PyMongoError as e:
        logger.error(f"Blood search error: {e}", exc_info=True)
        raise Internal("Error searching blood", error=str(e))

    if not donors and not hospitals:
        return {"found": False, "donors": [], "hospitals": []}
    return {"found": True, "donors": donors, "hospitals": hospitals}
