"""Routy výstav a výsledků / Exhibition and result API routes."""

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from spolky.database import get_db
from spolky.models.club import Club
from spolky.models.dog import Dog
from spolky.models.exhibition import Exhibition, ExhibitionResult
from spolky.models.user import User
from spolky.schemas.exhibition import (
    ExhibitionCreate,
    ExhibitionRead,
    ExhibitionResultCreate,
    ExhibitionResultRead,
)
from spolky.utils.clock import as_naive_utc
from spolky.api.deps import ALL_ROLES, EDITOR_ROLES, require_roles

router = APIRouter()


@router.post("/", response_model=ExhibitionRead, status_code=status.HTTP_201_CREATED)
async def create_exhibition(
    data: ExhibitionCreate,
    response: Response,
    db: AsyncSession = Depends(get_db),
    user: User = Depends(require_roles(*EDITOR_ROLES)),
):
    """Vytvořit výstavu / Create an exhibition."""
    if not data.name or not data.name.strip() or len(data.name) > 200:
        raise HTTPException(status_code=400, detail="Name is required and must be <= 200 characters.")
    # Název je unikátní / Exhibition names are unique
    if await db.scalar(select(func.count(Exhibition.id)).where(Exhibition.name == data.name)):
        raise HTTPException(status_code=400, detail="Exhibition with this name already exists.")
    if await db.get(Club, data.club_id) is None:
        raise HTTPException(status_code=400, detail=f"Invalid club_id: {data.club_id}")

    exhibition = Exhibition(
        name=data.name,
        date=as_naive_utc(data.date),
        place=data.place,
        club_id=data.club_id,
        description=data.description,
        created_by_id=user.id,
    )
    db.add(exhibition)
    await db.flush()
    await db.refresh(exhibition)
    response.headers["Location"] = f"/api/exhibitions/{exhibition.id}"
    return exhibition


@router.get("/", response_model=list[ExhibitionRead])
async def list_exhibitions(
    club_id: int | None = None,
    db: AsyncSession = Depends(get_db),
    user: User = Depends(require_roles(*ALL_ROLES)),
):
    """Seznam výstav, volitelně podle spolku / List exhibitions, optionally filtered by club."""
    query = select(Exhibition).order_by(Exhibition.date.desc(), Exhibition.id)
    if club_id is not None:
        query = query.where(Exhibition.club_id == club_id)
    result = await db.execute(query)
    return result.scalars().all()


@router.get("/{exhibition_id}", response_model=ExhibitionRead)
async def get_exhibition(
    exhibition_id: int,
    db: AsyncSession = Depends(get_db),
    user: User = Depends(require_roles(*ALL_ROLES)),
):
    """Detail výstavy / Get exhibition by ID."""
    exhibition = await db.get(Exhibition, exhibition_id)
    if not exhibition:
        raise HTTPException(status_code=404, detail="Exhibition not found")
    return exhibition


@router.post("/{exhibition_id}/results", response_model=ExhibitionResultRead, status_code=status.HTTP_201_CREATED)
async def add_result(
    exhibition_id: int,
    data: ExhibitionResultCreate,
    response: Response,
    db: AsyncSession = Depends(get_db),
    user: User = Depends(require_roles(*EDITOR_ROLES)),
):
    """Přidat výsledek k výstavě / Add a result to an exhibition."""
    if await db.get(Exhibition, exhibition_id) is None:
        raise HTTPException(status_code=404, detail="Exhibition not found")
    if await db.get(Dog, data.dog_id) is None:
        raise HTTPException(status_code=400, detail="Dog does not exist")

    result = ExhibitionResult(
        exhibition_id=exhibition_id,
        dog_id=data.dog_id,
        location=data.location,
        description=data.description,
        score=data.score,
        created_by_id=user.id,
    )
    db.add(result)
    await db.flush()
    await db.refresh(result)
    response.headers["Location"] = f"/api/exhibitions/{exhibition_id}/results/{result.id}"
    return result


@router.get("/{exhibition_id}/results", response_model=list[ExhibitionResultRead])
async def list_results(
    exhibition_id: int,
    db: AsyncSession = Depends(get_db),
    user: User = Depends(require_roles(*ALL_ROLES)),
):
    """Výsledky výstavy / Results of an exhibition."""
    if await db.get(Exhibition, exhibition_id) is None:
        raise HTTPException(status_code=404, detail="Exhibition not found")
    result = await db.execute(
        select(ExhibitionResult)
        .where(ExhibitionResult.exhibition_id == exhibition_id)
        .order_by(ExhibitionResult.id)
    )
    return result.scalars().all()
