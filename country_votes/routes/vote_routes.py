from fastapi import APIRouter, Body, Depends
from typing import List, Optional

from ..dependencies import get_vote_store
from ..models.vote_model import Vote, VoteIn
from ..storage import VoteStore

vote_router = APIRouter(prefix="/votes", tags=["Votes"])


# ------------------------------
# ✅ LIST ALL VOTES
# ------------------------------
@vote_router.get("", response_model=List[Vote])
def get_votes(store: VoteStore = Depends(get_vote_store)):
    return store.read_all()


# ------------------------------
# ✅ VOTE OF ONE USER (null if the email never voted)
# ------------------------------
@vote_router.get("/{email}", response_model=Optional[Vote])
def get_vote_by_user(email: str, store: VoteStore = Depends(get_vote_store)):
    return store.find_by_email(email)


# ------------------------------
# ✅ CAST VOTE
# ------------------------------
@vote_router.post("")
def post_vote(vote: Optional[VoteIn] = Body(None), store: VoteStore = Depends(get_vote_store)):
    """
    Registers a vote. One vote per email.
    Missing fields and repeated emails are rejected with 400.
    """
    store.append(vote if vote is not None else VoteIn())
    return {"message": "Vote successfully registered"}
