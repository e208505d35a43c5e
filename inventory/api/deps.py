# inventory/api/deps.py
from typing import Annotated, Optional
from bson import ObjectId
from fastapi import Depends, Path
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from inventory.core.config import Settings, get_settings
from inventory.core.security import decode_access_token
from inventory.db.mongo import get_db
from inventory.domain.errors import UnauthorizedError, ValidationError
from inventory.domain.repositories.product_repo import ProductRepo
from inventory.domain.repositories.user_repo import UserRepo

_bearer = HTTPBearer(auto_error=False)

# Dependency for injecting the MongoDB database into endpoints/services
async def mongo_db(db = Depends(get_db)):
    return db

# Repositories are built per request on top of the shared Motor database handle
def product_repo(db = Depends(mongo_db)) -> ProductRepo:
    return ProductRepo(db)

def user_repo(db = Depends(mongo_db)) -> UserRepo:
    return UserRepo(db)

def current_user_id(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(_bearer),
    settings: Settings = Depends(get_settings),
) -> str:
    """
    Resolve the caller from `Authorization: Bearer <token>`.
    401 when no token is sent, 403 when it does not verify or has expired.
    """
    if credentials is None or not credentials.credentials:
        raise UnauthorizedError("Access token required", status_code=401)
    return decode_access_token(credentials.credentials, settings)

def valid_product_id(product_id: str = Path(..., description="Product ObjectId (24 hex chars)")) -> str:
    # malformed ids are a client error, never a lookup miss
    if not ObjectId.is_valid(product_id):
        raise ValidationError({"id": "Must be a 24-character hex ObjectId"}, message="Invalid product ID format")
    return product_id

SettingsDep = Annotated[Settings, Depends(get_settings)]
UserIdDep = Annotated[str, Depends(current_user_id)]
ProductIdDep = Annotated[str, Depends(valid_product_id)]
ProductRepoDep = Annotated[ProductRepo, Depends(product_repo)]
UserRepoDep = Annotated[UserRepo, Depends(user_repo)]
