from fastapi import Request

from .country_api import CountryClient
from .storage import VoteStore


def get_vote_store(request: Request) -> VoteStore:
    return request.app.state.vote_store


def get_country_client(request: Request) -> CountryClient:
    return request.app.state.country_client
