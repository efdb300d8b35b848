from fastapi import APIRouter, Depends, status

from ..errors import Forbidden, NotFound
from ..middleware import get_current_user, require_admin
from ..models import DonorIdentity, HospitalIdentity, Identity
from ..services import DonorStore, HospitalStore, get_donor_store, get_hospital_store

router = APIRouter(tags=["Dashboards"])

@router.get("/donor-dashboard")
async def donor_dashboard(
    current_user: Identity = Depends(get_current_user),
    store: DonorStore = Depends(get_donor_store)
):
    if not isinstance(current_user, DonorIdentity):
        raise Forbidden("Access denied")
    donor = await store.get(current_user.id)
    if not donor:
        raise NotFound("Donor not found", status_code=status.HTTP_404_NOT_FOUND)
    return {"message": f"Welcome {donor['name']}", "donor": donor}

@router.get("/hospital-dashboard")
async def hospital_dashboard(
    current_user: Identity = Depends(get_current_user),
    store: HospitalStore = Depends(get_hospital_store)
):
    if not isinstance(current_user, HospitalIdentity):
        raise Forbidden("Access denied")
    hospital = await store.get(current_user.id)
    if not hospital:
        raise NotFound("Hospital not found", status_code=status.HTTP_404_NOT_FOUND)
    return {"message": f"Welcome {hospital['hospitalName']}", "hospital": hospital}

@router.get("/hospital-admin-data")
async def hospital_admin_data(
    current_user: HospitalIdentity = Depends(require_admin),
    store: HospitalStore = Depends(get_hospital_store)
):
    hospital = await store.get(current_user.id)
    if not hospital:
        raise NotFound("Hospital not found", status_code=status.HTTP_404_NOT_FOUND)
    return {"hospital": hospital}
