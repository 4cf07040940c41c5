# wordhoard\adapters\api\routers\words.py
from typing import Annotated

from fastapi import APIRouter, Body, Depends, Path, status

from wordhoard.adapters.api.dependencies import get_caller, get_lexicon_service
from wordhoard.adapters.api.responses import to_response
from wordhoard.adapters.api.schemas import (
    AddCitationRequest,
    AddDefinitionRequest,
    AddExampleRequest,
    AddWordRequest,
    VoteRequest,
)
from wordhoard.core.domain.elements import Caller
from wordhoard.services.lexicon_service import LexiconService

router = APIRouter(tags=["Lexicon"])

# Words may contain "/" (e.g. "and/or"), so word routes use the `path` converter.
WordText = Annotated[str, Path(min_length=2, max_length=50, description="The word, any case")]


@router.post("/words", summary="Add a new word with its first definition")
async def add_word(
    request: AddWordRequest,
    service: LexiconService = Depends(get_lexicon_service),
):
    result = await service.add_word(request.word_text, request.def_content, request.def_reference)
    return to_response(result, success_status=status.HTTP_201_CREATED)


@router.get("/words/{text:path}", summary="Look up a word")
async def get_word(
    text: WordText,
    service: LexiconService = Depends(get_lexicon_service),
):
    return to_response(await service.lookup(text))


@router.get("/shards/{prefix:path}", summary="List the words stored under a prefix's shard")
async def list_shard(
    prefix: Annotated[str, Path(min_length=1, max_length=50)],
    service: LexiconService = Depends(get_lexicon_service),
):
    return to_response(await service.list_shard(prefix))


# --- Contributions ---

@router.post("/words/{text:path}/definitions", summary="Add a definition")
async def add_definition(
    text: WordText,
    request: AddDefinitionRequest = Body(...),
    service: LexiconService = Depends(get_lexicon_service),
):
    result = await service.add_definition(text, request.def_content, request.def_reference)
    return to_response(result, success_status=status.HTTP_201_CREATED)


@router.post("/words/{text:path}/examples", summary="Add a usage example")
async def add_example(
    text: WordText,
    request: AddExampleRequest = Body(...),
    service: LexiconService = Depends(get_lexicon_service),
):
    result = await service.add_example(text, request.example_text, request.example_reference)
    return to_response(result, success_status=status.HTTP_201_CREATED)


@router.post("/words/{text:path}/citations", summary="Add a citation (mention)")
async def add_citation(
    text: WordText,
    request: AddCitationRequest = Body(...),
    service: LexiconService = Depends(get_lexicon_service),
):
    result = await service.add_citation(text, request.mention_title, request.mention_hyperlink)
    return to_response(result, success_status=status.HTTP_201_CREATED)


# --- Moderation ---

@router.post("/words/{text:path}/reports", summary="Report a word or one of its entries")
async def report(
    text: WordText,
    request: VoteRequest = Body(...),
    caller: Caller = Depends(get_caller),
    service: LexiconService = Depends(get_lexicon_service),
):
    return to_response(await service.report(caller, text, request.element_type, request.element_id))


@router.post("/words/{text:path}/approvals", summary="Up-vote a word or one of its entries")
async def approve(
    text: WordText,
    request: VoteRequest = Body(...),
    caller: Caller = Depends(get_caller),
    service: LexiconService = Depends(get_lexicon_service),
):
    return to_response(await service.approve(caller, text, request.element_type, request.element_id))
