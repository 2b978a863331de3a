"""
greeting_demo.api.routers.greetings

REST exposure of the greeting repository.

Responsibilities:
- List, count, fetch, create, replace and delete greetings.
- Expose the derived lookup at `/greetings/search/findByText`.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query, Response
from pydantic import BaseModel, ConfigDict
from starlette.status import HTTP_201_CREATED, HTTP_204_NO_CONTENT, HTTP_404_NOT_FOUND

from greeting_demo.api.deps import greeting_repo
from greeting_demo.db.models import Greeting
from greeting_demo.db.repositories.greetings import GreetingRepo

router = APIRouter(prefix="/greetings", tags=["greetings"])


class GreetingCreateRequest(BaseModel):
    text: str | None = None


class GreetingResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    text: str | None


class CountResponse(BaseModel):
    count: int


@router.get("", response_model=list[GreetingResponse])
async def list_greetings(repo: GreetingRepo = Depends(greeting_repo)) -> list[Greeting]:
    return await repo.find_all()


@router.get("/count", response_model=CountResponse)
async def count_greetings(repo: GreetingRepo = Depends(greeting_repo)) -> CountResponse:
    return CountResponse(count=await repo.count())


@router.get("/search/findByText", response_model=list[GreetingResponse])
async def find_by_text(
    text: str = Query(...),
    repo: GreetingRepo = Depends(greeting_repo),
) -> list[Greeting]:
    # Exact, case-sensitive match; no matches is an empty list, not a 404.
    return await repo.find_by_text(text)


@router.get("/{greeting_id}", response_model=GreetingResponse)
async def get_greeting(
    greeting_id: int,
    repo: GreetingRepo = Depends(greeting_repo),
) -> Greeting:
    greeting = await repo.get(greeting_id)
    if greeting is None:
        raise HTTPException(status_code=HTTP_404_NOT_FOUND, detail="Greeting not found")
    return greeting


@router.post("", response_model=GreetingResponse, status_code=HTTP_201_CREATED)
async def create_greeting(
    body: GreetingCreateRequest,
    repo: GreetingRepo = Depends(greeting_repo),
) -> Greeting:
    return await repo.save(Greeting(body.text))


@router.put("/{greeting_id}", response_model=GreetingResponse)
async def replace_greeting(
    greeting_id: int,
    body: GreetingCreateRequest,
    repo: GreetingRepo = Depends(greeting_repo),
) -> Greeting:
    greeting = await repo.get(greeting_id)
    if greeting is None:
        raise HTTPException(status_code=HTTP_404_NOT_FOUND, detail="Greeting not found")
    greeting.text = body.text
    return await repo.save(greeting)


@router.delete("/{greeting_id}", status_code=HTTP_204_NO_CONTENT)
async def delete_greeting(
    greeting_id: int,
    repo: GreetingRepo = Depends(greeting_repo),
) -> Response:
    if not await repo.delete_by_id(greeting_id):
        raise HTTPException(status_code=HTTP_404_NOT_FOUND, detail="Greeting not found")
    return Response(status_code=HTTP_204_NO_CONTENT)
