"""Routy psů / Dog API routes."""

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from spolky.database import get_db
from spolky.models.dog import Dog
from spolky.models.user import User
from spolky.schemas.dog import DogCreate, DogRead
from spolky.utils.clock import as_naive_utc
from spolky.api.deps import ALL_ROLES, EDITOR_ROLES, require_roles

router = APIRouter()


@router.post("/", response_model=DogRead, status_code=status.HTTP_201_CREATED)
async def create_dog(
    data: DogCreate,
    response: Response,
    db: AsyncSession = Depends(get_db),
    user: User = Depends(require_roles(*EDITOR_ROLES)),
):
    """Vytvořit psa / Create a dog."""
    if not data.name or not data.name.strip():
        raise HTTPException(status_code=400, detail="Name is required.")
    if await db.scalar(select(func.count(Dog.id)).where(Dog.name == data.name)):
        raise HTTPException(status_code=400, detail="Dog with this name already exists.")

    dog = Dog(
        name=data.name,
        breed=data.breed,
        gender=data.gender,
        date_of_birth=as_naive_utc(data.date_of_birth),
        owners_name=data.owners_name,
        owners_phone=data.owners_phone,
    )
    db.add(dog)
    await db.flush()
    await db.refresh(dog)
    response.headers["Location"] = f"/api/dogs/{dog.id}"
    return dog


@router.get("/{dog_id}", response_model=DogRead)
async def get_dog(
    dog_id: int,
    db: AsyncSession = Depends(get_db),
    user: User = Depends(require_roles(*ALL_ROLES)),
):
    """Detail psa / Get dog by ID."""
    dog = await db.get(Dog, dog_id)
    if not dog:
        raise HTTPException(status_code=404, detail="Dog not found")
    return dog
